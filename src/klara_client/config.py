"""Configuration and logging setup for the Klara API client."""

import json
import logging
import os
import pathlib

import pydantic
import structlog

from . import klaraapi

CONFIG_ENV_VAR = "KLARA_CLIENT_CONFIG_PATH"
logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Configuration for the Klara API client."""

    base_url: str = pydantic.Field(
        klaraapi.KLARA_BASE_URL,
        description="Base URL for the Klara API",
    )
    access_token: str | None = pydantic.Field(
        None,
        description="Bearer token sent with every request",
    )
    timeout: float = pydantic.Field(
        klaraapi.DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    envelope_key: str | None = pydantic.Field(
        klaraapi.DEFAULT_ENVELOPE_KEY,
        description="Response envelope field returned to callers",
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")


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


def load_config(config_path: str | pathlib.Path) -> ClientConfig:
    """Load configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If a value is invalid.
    """
    with pathlib.Path(config_path).open() as f:
        return ClientConfig.model_validate(json.load(f))


def create_client_from_config(config: ClientConfig) -> klaraapi.KlaraApiClient:
    """Construct a client from validated config."""
    api_client = klaraapi.KlaraApiClient(
        base_url=config.base_url,
        timeout=config.timeout,
        envelope_key=config.envelope_key,
    )
    if config.access_token is not None:
        api_client.set_access_token(config.access_token)
    logger.info(
        "Created Klara API client",
        base_url=api_client.base_url,
        has_token=config.access_token is not None,
    )
    return api_client


def create_client(config_path: str | None = None) -> klaraapi.KlaraApiClient:
    """Create a client using a config path or environment default.

    Without a path and without the environment variable, the defaults of
    :class:`ClientConfig` are used.
    """
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    config = load_config(resolved_path) if resolved_path else ClientConfig()
    configure_logging(config.log_level)
    return create_client_from_config(config)
