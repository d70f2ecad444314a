# cli.py
import sys
from typing import List, Optional

import click

from pg_client.app import InvocationConfig, safe_exec
from pg_client.db.config import POSTGRES_URL_ENV, READ_ONLY_ENV, load_settings
from pg_client.execution.params import parse_params
from pg_client.utils.formatting import OUTPUT_FORMATS

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = f"""\b
Examples:
  pg-client --query "SELECT 1"
  pg-client --file ./path/to/query.sql --format table
  pg-client -q "SELECT * FROM users WHERE id = $1" --params '[42]'

\b
Environment:
  {POSTGRES_URL_ENV}        Postgres connection URL (a .env file is also read)
  {READ_ONLY_ENV}  "true" or "false" (default "true")
"""


def _params_callback(ctx, param, value):
    return parse_params(value)


@click.command("pg-client", context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.option("--query", "-q", help="SQL query string")
@click.option("--file", "-f", "file_path", help="Path to a .sql file")
@click.option("--params", callback=_params_callback, metavar="JSON",
              help="JSON array bound to $1, $2, ... placeholders")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS),
              default="json", show_default=True, help="Output format")
@click.argument("positional", nargs=-1, metavar="[SQL]")
def cli(query, file_path, params, output_format, positional):
    """Run one SQL statement against Postgres and print the result.

    Statements that look like writes are refused unless POSTGRES_READ_ONLY=false.
    """
    if not query and positional:
        query = positional[0]

    settings = load_settings()
    invocation = InvocationConfig(
        query=query,
        file=file_path,
        params=params,
        output_format=output_format,
    )
    click.echo(safe_exec(invocation, settings))


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cli.main(args=argv, prog_name="pg-client", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
