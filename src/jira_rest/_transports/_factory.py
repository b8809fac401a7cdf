from typing import Union

from .._config import DefaultConfig, HostedConfig
from ._hosted_transport import HostedTransport
from ._httpx_transport import HttpxTransport
from ._protocol import Transport


def create_transport(config: Union[DefaultConfig, HostedConfig]) -> Transport:
    """Build the transport matching the config's hosting mode."""
    if isinstance(config, HostedConfig):
        return HostedTransport(
            config.api, act_as=config.act_as, timeout=config.timeout
        )
    return HttpxTransport(
        config.base_url, config.auth_headers, timeout=config.timeout
    )
