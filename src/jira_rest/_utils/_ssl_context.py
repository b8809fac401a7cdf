import os
import ssl
from typing import Any, Optional

from .constants import DEFAULT_TIMEOUT

CA_BUNDLE_ENV_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
CA_DIR_ENV_VAR = "SSL_CERT_DIR"


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """Build the SSL context used for direct connections to Jira.

    A CA bundle named by ``SSL_CERT_FILE`` or ``REQUESTS_CA_BUNDLE`` (or a
    directory in ``SSL_CERT_DIR``) takes precedence. Otherwise the operating
    system trust store is used through truststore, with certifi's bundle as
    the fallback where truststore is unavailable.
    """
    cafile = next(
        (path for path in map(_env_path, CA_BUNDLE_ENV_VARS) if path), None
    )
    capath = _env_path(CA_DIR_ENV_VAR)
    if cafile or capath:
        return ssl.create_default_context(cafile=cafile, capath=capath)

    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(cafile=certifi.where())


def get_httpx_client_kwargs(timeout: float = DEFAULT_TIMEOUT) -> dict[str, Any]:
    return {
        "verify": create_ssl_context(),
        "timeout": timeout,
        "follow_redirects": True,
    }
