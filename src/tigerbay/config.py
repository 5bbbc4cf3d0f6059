"""Client configuration and logging setup."""

import json
import logging
import pathlib

import pydantic
import structlog

from .auth import DEFAULT_ENV_PREFIX, CredentialsProvider, EnvCredentials

CONFIG_ENV_VAR = "TIGERBAY_CONFIG_PATH"

DEFAULT_TIMEOUT = 30.0


class ClientConfig(pydantic.BaseModel):
    """Parameters for constructing a :class:`~tigerbay.client.Client`."""

    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True)

    base_url: str = pydantic.Field(description="Base URL for the API", min_length=1)
    auth_url: str | None = pydantic.Field(
        None,
        description="Authentication server base URL, if different to base_url",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    credentials: CredentialsProvider = pydantic.Field(
        description="Provider of the API client id and secret",
    )

    @property
    def resolved_auth_url(self) -> str:
        return self.auth_url or self.base_url


class ClientSettings(pydantic.BaseModel):
    """File-based configuration; credentials always come from the environment."""

    base_url: str = pydantic.Field(description="Base URL for the API", min_length=1)
    auth_url: str | None = pydantic.Field(
        None,
        description="Authentication server base URL, if different to base_url",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    credentials_env_prefix: str = pydantic.Field(
        DEFAULT_ENV_PREFIX,
        description="Prefix of the CLIENT_ID / CLIENT_SECRET environment variables",
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            base_url=self.base_url,
            auth_url=self.auth_url,
            timeout=self.timeout,
            credentials=EnvCredentials(self.credentials_env_prefix),
        )


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str | pathlib.Path) -> ClientSettings:
    """Load client settings from a JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientSettings(**data)
