# errors.py
import click


class PgClientError(click.ClickException):
    """Base class for every failure the client reports before exiting with 1."""

    exit_code = 1


class UsageError(PgClientError):
    """Bad flags or missing/empty SQL. Nothing was executed."""


class ParameterFormatError(UsageError):
    """--params was not a JSON array."""


class ConfigError(PgClientError):
    """Required environment setting is missing."""


class PolicyBlockError(PgClientError):
    """Read-only mode refused a statement that looks mutating."""


class ExecutionError(PgClientError):
    """The driver failed while connecting or executing."""
