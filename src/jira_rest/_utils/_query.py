import json
from typing import Any, Mapping

from httpx import QueryParams

from ..models.errors import MalformedRequestError
from ._endpoint import _stringify


def _flatten(
    name: str,
    value: Any,
    *,
    comma_separated: frozenset[str],
    exploded: frozenset[str],
) -> list[tuple[str, str]]:
    if isinstance(value, (list, tuple)):
        if any(item is None for item in value):
            raise MalformedRequestError(
                f"Query parameter '{name}' contains a None element"
            )
        items = [_stringify(item) for item in value]
        if name in comma_separated:
            return [(name, ",".join(items))] if items else []
        return [(name, item) for item in items]

    if isinstance(value, dict):
        if name in exploded:
            return [
                (key, _stringify(item))
                for key, item in value.items()
                if item is not None
            ]
        return [(name, json.dumps(value, separators=(",", ":")))]

    return [(name, _stringify(value))]


def build_query(
    params: Mapping[str, Any] | None,
    *,
    comma_separated: frozenset[str] = frozenset(),
    exploded: frozenset[str] = frozenset(),
) -> str:
    """Encode query parameters into a query string (without the leading ``?``).

    Entries set to ``None`` are skipped; a ``None`` element inside a list value
    raises :class:`MalformedRequestError`. Element order of list values is kept
    as given and duplicates are never removed.
    """
    if not params:
        return ""

    pairs: list[tuple[str, str]] = []
    for name, value in params.items():
        if value is None:
            continue
        pairs.extend(
            _flatten(
                name, value, comma_separated=comma_separated, exploded=exploded
            )
        )

    return str(QueryParams(pairs))


def build_url(
    path: str,
    params: Mapping[str, Any] | None,
    *,
    comma_separated: frozenset[str] = frozenset(),
    exploded: frozenset[str] = frozenset(),
) -> str:
    query = build_query(
        params, comma_separated=comma_separated, exploded=exploded
    )
    return f"{path}?{query}" if query else path
