import os
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, Field, ValidationError

PORT_ENV_VAR = "TASKBOARD_PORT"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class LogLevel(str, Enum):
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"


class ServerSettings(BaseModel):
    host: str = Field(default=DEFAULT_HOST, description="Host to bind to")
    port: int = Field(
        default=DEFAULT_PORT, ge=1, le=65535, description="Port to bind to"
    )
    log_level: LogLevel = Field(default=LogLevel.INFO)


def load_settings(environ: Mapping[str, str] | None = None) -> ServerSettings:
    """Build settings, taking the port from ``TASKBOARD_PORT`` when set.

    Raises ``ValueError`` if the variable is not a valid port number.
    """
    if environ is None:
        environ = os.environ
    raw_port = environ.get(PORT_ENV_VAR, "").strip()
    if not raw_port:
        return ServerSettings()
    try:
        return ServerSettings.model_validate({"port": raw_port})
    except ValidationError as exc:
        raise ValueError(
            f"Invalid {PORT_ENV_VAR} {raw_port!r}: expected an integer "
            "between 1 and 65535"
        ) from exc
