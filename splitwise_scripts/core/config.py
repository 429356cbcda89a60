"""
Configuration Management.

Loads secrets from the environment (or config/.env) and settings from
config/settings/*.yaml. No hardcoded values in code — endpoints, timeouts
and CLI policy all come from these sources.

Secrets (environment or config/.env):
    X_CSRF_TOKEN, USER_CREDENTIALS, SWDID, SPLITWISE_SESSION

Settings (YAML):
    application.yaml   - App identity, API base URL and endpoints, timeouts, CLI policy
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from splitwise_scripts.api.schemas import AuthContext
from splitwise_scripts.core.config_schema import ApplicationSchema, LoggingSchema

PACKAGE_DIR = Path(__file__).resolve().parent.parent


def _search_upwards(start: Path) -> Path | None:
    current = start
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    return None


def find_project_root() -> Path:
    """
    Find project root by looking for the .project_root marker file.

    The working directory is searched first, then the directory the
    package was installed from, so the scripts also work when invoked
    from elsewhere through their console entry points.
    """
    for start in (Path.cwd(), PACKAGE_DIR):
        root = _search_upwards(start)
        if root is not None:
            return root
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """
    Session credentials for the Splitwise web API.

    Read from the process environment, falling back to config/.env.
    Missing values stay empty: the remote API is the one that rejects them.
    """

    x_csrf_token: str = ""
    user_credentials: str = ""
    swdid: str = ""
    splitwise_session: str = ""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached secrets instance. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_auth_context(settings: Settings | None = None) -> AuthContext:
    """
    Build the immutable credential bundle attached to every request.

    Args:
        settings: Secrets to use. If None, the cached settings are loaded.

    Returns:
        AuthContext carrying the CSRF token and the three session cookies.
    """
    settings = settings or get_settings()
    return AuthContext(
        csrf_token=settings.x_csrf_token,
        user_credentials=settings.user_credentials,
        swdid=settings.swdid,
        splitwise_session=settings.splitwise_session,
    )


def get_api_base_url() -> tuple[str, float | None]:
    """
    Get the Splitwise API base URL and timeout from application.yaml.

    Returns:
        Tuple of (base_url, timeout_seconds). A timeout of None means
        requests wait until the transport gives up.
    """
    app = get_app_config().application
    return app.api.base_url, app.timeouts.external_api
