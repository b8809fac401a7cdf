import re
from typing import Any, Mapping
from urllib.parse import quote

from ..models.errors import MalformedRequestError

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Endpoint(str):
    """A REST path template such as ``/rest/agile/1.0/board/{boardId}``.

    Placeholders are resolved with :meth:`resolve`, which percent-encodes every
    substituted value so that reserved URL characters never leak into the path.
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return super().__new__(cls, endpoint)

    @property
    def placeholders(self) -> list[str]:
        return _PLACEHOLDER.findall(self)

    def resolve(self, path_params: Mapping[str, Any] | None = None) -> str:
        """Substitute every ``{name}`` placeholder exactly once.

        Args:
            path_params: Values keyed by placeholder name.

        Returns:
            str: The resolved, percent-encoded path.

        Raises:
            MalformedRequestError: If a placeholder has no value.
        """
        params = path_params or {}

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            value = params.get(name)
            if value is None:
                raise MalformedRequestError(
                    f"Missing path parameter '{name}' for endpoint '{self}'"
                )
            return quote(_stringify(value), safe="")

        return _PLACEHOLDER.sub(substitute, self)
