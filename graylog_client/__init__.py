"""Graylog GELF HTTP client and command-line tools."""
__version__ = "0.3.0"

from graylog_client.client import GraylogClient, send_event  # noqa: E402
from graylog_client.config import GraylogConfig, load_config, resolve_target  # noqa: E402
from graylog_client.exceptions import (  # noqa: E402
    ConfigError,
    FetchError,
    GraylogError,
    MissingParameterError,
    NetworkError,
    ValidationError,
)
from graylog_client.kvparse import parse_key_values  # noqa: E402
from graylog_client.levels import valid_facilities, valid_levels  # noqa: E402
from graylog_client.message import normalize  # noqa: E402

__all__ = [
    "__version__",
    "GraylogClient",
    "GraylogConfig",
    "GraylogError",
    "ConfigError",
    "FetchError",
    "MissingParameterError",
    "NetworkError",
    "ValidationError",
    "load_config",
    "normalize",
    "parse_key_values",
    "resolve_target",
    "send_event",
    "valid_facilities",
    "valid_levels",
]
