"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear ValidationError
is raised at startup instead of a cryptic KeyError deep in application code.

Each top-level class corresponds to one file in config/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from pydantic import BaseModel, ConfigDict


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class EndpointsSchema(_StrictBase):
    create_expense: str
    delete_expense: str
    get_expenses: str


class ApiSchema(_StrictBase):
    base_url: str
    endpoints: EndpointsSchema


class TimeoutsSchema(_StrictBase):
    # None disables the client timeout entirely.
    external_api: float | None = None


class CliSchema(_StrictBase):
    exit_nonzero_on_failure: bool = False


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    environment: str
    api: ApiSchema
    timeouts: TimeoutsSchema
    cli: CliSchema


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: str
    format: str
    handlers: HandlersSchema
