"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs against a throwaway project root in tmp_path: its own
.project_root marker, config/settings/*.yaml and fake credentials in the
environment. Nothing ever reaches the real Splitwise API.
"""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from splitwise_scripts.api.schemas import AuthContext
from splitwise_scripts.core.config import get_app_config, get_settings

TEST_BASE_URL = "https://splitwise.test/api/v3.0"

APPLICATION_YAML = f"""
name: Splitwise Expense Scripts
version: 1.0.0
description: Test configuration
environment: test
api:
  base_url: {TEST_BASE_URL}
  endpoints:
    create_expense: /create_expense
    delete_expense: /delete_expense/{{expense_id}}
    get_expenses: /get_expenses
timeouts:
  external_api: 5
cli:
  exit_nonzero_on_failure: false
"""

LOGGING_YAML = """
level: WARNING
format: console
handlers:
  console:
    enabled: true
  file:
    enabled: false
    path: logs/system.jsonl
    max_bytes: 1048576
    backup_count: 1
"""

FAKE_CREDENTIALS = {
    "X_CSRF_TOKEN": "csrf-test-token",
    "USER_CREDENTIALS": "cred-test",
    "SWDID": "swdid-test",
    "SPLITWISE_SESSION": "session-test",
}


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """
    Temporary project root with test configuration, used as working directory.

    Tests that need a different application.yaml can overwrite
    ``project_root / "config" / "settings" / "application.yaml"`` and call
    ``get_app_config.cache_clear()``.
    """
    (tmp_path / ".project_root").touch()
    settings_dir = tmp_path / "config" / "settings"
    settings_dir.mkdir(parents=True)
    (settings_dir / "application.yaml").write_text(APPLICATION_YAML)
    (settings_dir / "logging.yaml").write_text(LOGGING_YAML)

    for key, value in FAKE_CREDENTIALS.items():
        monkeypatch.setenv(key, value)
    monkeypatch.chdir(tmp_path)

    _clear_caches()
    yield tmp_path
    _clear_caches()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    """setup_logging replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def auth() -> AuthContext:
    """Credentials matching FAKE_CREDENTIALS."""
    return AuthContext(
        csrf_token="csrf-test-token",
        user_credentials="cred-test",
        swdid="swdid-test",
        splitwise_session="session-test",
    )


@pytest.fixture
def base_url() -> str:
    """API base URL configured in the test application.yaml."""
    return TEST_BASE_URL
