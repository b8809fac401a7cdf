from typing import Literal, Mapping, TypedDict, Union


class RequestOptions(TypedDict, total=False):
    """Per-call options accepted by every service method.

    headers: Extra headers for this call, overriding the defaults.
    act_as: Principal the host acts as, ``"user"`` (default) or ``"app"``.
        Only meaningful in hosted mode.
    timeout: Timeout in seconds for this call.
    """

    headers: Mapping[str, str]
    act_as: Literal["user", "app"]
    timeout: Union[int, float]
