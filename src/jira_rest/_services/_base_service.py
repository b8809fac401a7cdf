from logging import getLogger
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from .._dispatcher import Dispatcher
from .._utils import RequestOptions, RequestSpec
from .._utils.constants import LOGGER_NAME
from ..models.errors import ErrorKind
from ..models.result import ErrorDetail, JiraFailure, JiraResult, JiraSuccess


class BaseService:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._dispatcher = dispatcher

    async def request(
        self,
        spec: RequestSpec,
        options: Optional[RequestOptions] = None,
        *,
        model: Any = None,
    ) -> JiraResult[Any]:
        """Dispatch ``spec`` and, if ``model`` is given, validate the body into it.

        ``model`` is any type pydantic can validate against, such as a model
        class or ``list[Model]``. A body that does not fit the model is reported
        as a decode failure.
        """
        result = await self._dispatcher.dispatch(spec, options)
        if model is None or not result.ok or result.value is None:
            return result

        try:
            value = TypeAdapter(model).validate_python(result.value)
        except ValidationError as e:
            self._logger.debug(f"Response did not match {model!r}: {e}")
            return JiraFailure(
                error=ErrorDetail(
                    kind=ErrorKind.DECODE_FAILURE,
                    status=result.status,
                    message=f"Response body does not match the expected shape: {e}",
                    payload=result.value,
                ),
                status=result.status,
                headers=result.headers,
            )

        return JiraSuccess(value=value, status=result.status, headers=result.headers)


def compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop ``None`` entries, mirroring how unset fields are left out of bodies."""
    return {key: value for key, value in values.items() if value is not None}
