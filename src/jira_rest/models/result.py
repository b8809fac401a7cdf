from typing import Any, Generic, Literal, NoReturn, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAliasType

from .errors import ErrorKind, JiraResultError

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Details of a failed call."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ErrorKind
    status: int
    message: str
    payload: Any = None


class JiraSuccess(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[True] = True
    value: T
    status: int
    headers: dict[str, str] = Field(default_factory=dict)

    def unwrap(self) -> T:
        return self.value


class JiraFailure(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[False] = False
    error: ErrorDetail
    status: int
    headers: dict[str, str] = Field(default_factory=dict)

    def unwrap(self) -> NoReturn:
        raise JiraResultError(
            self.error.message, self.error.kind, self.status, self.error.payload
        )


JiraResult = TypeAliasType(
    "JiraResult", Union[JiraSuccess[T], JiraFailure], type_params=(T,)
)
