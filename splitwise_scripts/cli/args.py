"""
Flag Parsing.

The scripts take long flags of the form ``--name value``. Matching is exact
and case-sensitive; ``--name=value`` and short forms are not recognised.
When a flag is repeated, the first occurrence wins.
"""

from collections.abc import Iterable, Sequence

from splitwise_scripts.core.exceptions import UsageError

HELP_FLAG = "--help"


def has_flag(args: Sequence[str], name: str) -> bool:
    """True if the bare flag token appears anywhere in ``args``."""
    return name in args


def get_argument(args: Sequence[str], name: str) -> str | None:
    """
    Return the token following ``name``.

    None if the flag is absent, is the last token, or is followed by an
    empty string. The following token is taken as-is even if it looks like
    another flag.
    """
    try:
        index = list(args).index(name)
    except ValueError:
        return None

    if index + 1 < len(args) and args[index + 1]:
        return args[index + 1]
    return None


def collect_arguments(args: Sequence[str], names: Iterable[str]) -> dict[str, str | None]:
    """Map each flag name (without the leading dashes) to its value."""
    return {name.removeprefix("--"): get_argument(args, name) for name in names}


def require_arguments(
    args: Sequence[str],
    required: Sequence[str],
    optional: Sequence[str] = (),
) -> dict[str, str | None]:
    """
    Collect required and optional flag values.

    Raises:
        UsageError: If any required flag has no value. ``missing`` lists
            every absent flag, in declaration order.
    """
    values = collect_arguments(args, [*required, *optional])
    missing = [name for name in required if values[name.removeprefix("--")] is None]
    if missing:
        noun = "argument" if len(required) == 1 else "arguments"
        raise UsageError(f"Missing required {noun}.", missing=missing)
    return values
