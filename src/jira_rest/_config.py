from os import environ as env
from typing import Annotated, Any, Literal, Optional, Union

from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from ._transports._protocol import HostApi
from ._utils._headers import basic_auth_header, bearer_auth_header
from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_ACCESS_TOKEN,
    ENV_API_TOKEN,
    ENV_BASE_URL,
    ENV_EMAIL,
    ENV_TIMEOUT,
)
from .models.errors import (
    BaseUrlMissingError,
    ConfigurationError,
    CredentialsMissingError,
)

ActAs = Literal["user", "app"]


class DefaultConfig(BaseModel):
    """Standalone configuration: the client talks to Jira directly.

    Authenticates with Basic auth (``email`` + ``api_token``) or, when
    ``access_token`` is set, with a Bearer token.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["default"] = "default"
    base_url: str
    email: Optional[str] = None
    api_token: Optional[str] = Field(default=None, repr=False)
    access_token: Optional[str] = Field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        try:
            HttpUrl(url=value)
        except ValidationError as e:
            raise ValueError(f"Invalid base URL '{value}'") from e
        return str(value).rstrip("/")

    @model_validator(mode="after")
    def validate_credentials(self) -> "DefaultConfig":
        if self.access_token:
            return self
        if not self.email or not self.api_token:
            raise ValueError(
                "Default config requires 'email' and 'api_token', or 'access_token'"
            )
        return self

    @property
    def auth_headers(self) -> dict[str, str]:
        if self.access_token:
            return bearer_auth_header(self.access_token)
        return basic_auth_header(self.email or "", self.api_token or "")

    @classmethod
    def from_env(cls, **overrides: Any) -> "DefaultConfig":
        """Build a config from ``JIRA_*`` environment variables.

        A ``.env`` file in the working directory is loaded first. Keyword
        arguments take precedence over the environment.
        """
        load_dotenv()

        base_url = overrides.pop("base_url", None) or env.get(ENV_BASE_URL)
        if not base_url:
            raise BaseUrlMissingError()

        email = overrides.pop("email", None) or env.get(ENV_EMAIL)
        api_token = overrides.pop("api_token", None) or env.get(ENV_API_TOKEN)
        access_token = overrides.pop("access_token", None) or env.get(
            ENV_ACCESS_TOKEN
        )
        if not access_token and not (email and api_token):
            raise CredentialsMissingError()

        timeout = overrides.pop("timeout", None) or env.get(ENV_TIMEOUT)

        values: dict[str, Any] = {
            "base_url": base_url,
            "email": email,
            "api_token": api_token,
            "access_token": access_token,
            **overrides,
        }
        if timeout:
            values["timeout"] = float(timeout)

        return cls(**values)


class HostedConfig(BaseModel):
    """Embedded configuration: a trusted host runtime executes the requests.

    The host owns authentication; ``act_as`` picks the default principal the
    host should act as.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Literal["hosted"] = "hosted"
    api: Any = Field(repr=False)
    act_as: ActAs = "user"
    timeout: Optional[float] = None

    @field_validator("api")
    @classmethod
    def validate_api(cls, value: Any) -> Any:
        if not isinstance(value, HostApi):
            raise ValueError("Hosted config 'api' must provide as_user() and as_app()")
        return value


JiraConfig = Annotated[Union[DefaultConfig, HostedConfig], Field(discriminator="type")]

_config_adapter: TypeAdapter[Union[DefaultConfig, HostedConfig]] = TypeAdapter(
    JiraConfig
)


def validate_config(config: Any) -> Union[DefaultConfig, HostedConfig]:
    """Validate a config model or a plain mapping.

    Raises:
        ConfigurationError: If the config is missing or invalid.
    """
    if config is None:
        raise ConfigurationError("Config is required")
    if isinstance(config, (DefaultConfig, HostedConfig)):
        return config
    if isinstance(config, dict) and "type" not in config:
        raise ConfigurationError("Config must have a 'type' property")

    try:
        return _config_adapter.validate_python(config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid Jira config: {e}") from e
