"""
Script Harness.

Shared lifecycle for the expense scripts: help, flag validation, logging
setup, one API call, interpretation and output. Each script only supplies
a ScriptDefinition.

Exit status:
    0  help shown, or the call was made (whatever the API answered)
    1  missing required flag, or configuration could not be loaded
    1  call failed or was rejected, only when cli.exit_nonzero_on_failure
       is enabled in application.yaml
"""

import asyncio
import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import click
import structlog

from splitwise_scripts.api.client import APIClient
from splitwise_scripts.api.responses import Outcome, OutcomeStatus
from splitwise_scripts.api.schemas import AuthContext, PreparedRequest
from splitwise_scripts.cli.args import HELP_FLAG, has_flag, require_arguments
from splitwise_scripts.core.config import get_app_config, get_auth_context
from splitwise_scripts.core.config_schema import EndpointsSchema
from splitwise_scripts.core.exceptions import ApplicationError, UsageError
from splitwise_scripts.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

VERBOSE_FLAG = "--verbose"
DEBUG_FLAG = "--debug"


@dataclass(frozen=True)
class ScriptDefinition:
    """Everything that differs between the scripts."""

    name: str
    help_text: str
    usage_text: str
    error_label: str
    """Prefix for top-level errors; may use flag values, e.g. ``{id}``."""
    required: tuple[str, ...]
    build: Callable[[dict[str, str | None], AuthContext, EndpointsSchema], PreparedRequest]
    interpret: Callable[[Any, dict[str, str | None]], Outcome]
    optional: tuple[str, ...] = field(default=())


def _log_level(args: Sequence[str]) -> str:
    if has_flag(args, DEBUG_FLAG):
        return "DEBUG"
    if has_flag(args, VERBOSE_FLAG):
        return "INFO"
    return "WARNING"


def _describe_error(error: Exception) -> str:
    """Error text for the user. Never empty: transport errors often have no message."""
    if isinstance(error, ApplicationError):
        return error.message
    detail = str(error)
    return f"{type(error).__name__}: {detail}" if detail else type(error).__name__


def _format_payload(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_outcome(outcome: Outcome) -> None:
    """Print an outcome. Failures go to stderr."""
    err = outcome.status is OutcomeStatus.FAILURE
    click.echo(outcome.message, err=err)
    if outcome.payload is not None:
        click.echo(_format_payload(outcome.payload), err=err)


async def _execute(
    definition: ScriptDefinition,
    values: dict[str, str | None],
    auth: AuthContext,
    endpoints: EndpointsSchema,
    client: APIClient,
) -> Outcome:
    prepared = definition.build(values, auth, endpoints)
    try:
        body = await client.send(prepared)
    finally:
        await client.close()

    outcome = definition.interpret(body, values)
    logger.info("Call completed", method=prepared.method, path=prepared.path, status=outcome.status.value)
    return outcome


def run_script(
    definition: ScriptDefinition,
    args: Sequence[str],
    auth: AuthContext | None = None,
    client: APIClient | None = None,
) -> int:
    """
    Run one script invocation and return its exit status.

    Args:
        definition: The script to run.
        args: Raw command-line arguments, without the program name.
        auth: Credentials to use. If None, loaded from configuration.
        client: HTTP client to use. If None, one is built from configuration.
    """
    if has_flag(args, HELP_FLAG):
        click.echo(definition.help_text)
        return 0

    try:
        values = require_arguments(args, definition.required, definition.optional)
    except UsageError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        click.echo(definition.usage_text, err=True)
        return 1

    try:
        setup_logging(level=_log_level(args), format_type="console")
        app_config = get_app_config().application
    except Exception as e:
        click.echo(click.style(f"Error: could not load configuration: {e}", fg="red"), err=True)
        return 1

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(source="cli", script=definition.name)

    strict = app_config.cli.exit_nonzero_on_failure
    logger.debug("Script invoked", flags=sorted(k for k, v in values.items() if v is not None))

    try:
        if auth is None:
            auth = get_auth_context()
        missing = auth.missing_fields()
        if missing:
            logger.warning("Splitwise credentials not configured", missing=missing)

        outcome = asyncio.run(
            _execute(definition, values, auth, app_config.api.endpoints, client or APIClient())
        )
    except Exception as e:
        logger.error("Call failed", error=str(e), error_type=type(e).__name__)
        label = definition.error_label.format_map(values)
        click.echo(click.style(f"{label} {_describe_error(e)}", fg="red"), err=True)
        return 1 if strict else 0

    render_outcome(outcome)
    return 1 if strict and outcome.failed else 0


class RawArgsCommand(click.Command):
    """
    Click command that skips click's parser entirely.

    The tokens land in ``ctx.args`` exactly as given. Click's parser would
    drop a ``--`` token even for UNPROCESSED arguments.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args


def make_command(definition: ScriptDefinition) -> click.Command:
    """
    Wrap a script definition in a click command.

    Click's own option parsing and help are switched off: the raw tokens are
    handed to the script's flag parser unchanged.
    """

    @click.command(name=definition.name, cls=RawArgsCommand, add_help_option=False)
    @click.pass_context
    def command(ctx: click.Context) -> None:
        ctx.exit(run_script(definition, ctx.args))

    command.help = definition.help_text
    return command
