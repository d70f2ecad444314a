from dataclasses import dataclass, field
from typing import Any, List, Optional
from pg_client.db.config import POSTGRES_URL_ENV, Settings
from pg_client.db.database import DatabaseManager
from pg_client.errors import ConfigError
from pg_client.execution.executor import run_sql
from pg_client.query_source import resolve_query
from pg_client.utils.formatting import format_result
from pg_client.utils.readonly_guard import ensure_query_allowed


@dataclass
class InvocationConfig:
    query: Optional[str] = None
    file: Optional[str] = None
    params: List[Any] = field(default_factory=list)
    output_format: str = "json"


def require_connection_url(settings: Settings) -> str:
    if not settings.db_url:
        raise ConfigError(f"Missing {POSTGRES_URL_ENV}. Set it in your environment or .env file.")
    return settings.db_url


def safe_exec(invocation: InvocationConfig, settings: Settings, db_factory=DatabaseManager) -> str:
    """
    Run one invocation end to end and return the text to print.
        ① connection URL must be configured
        ② resolve SQL from --query or --file
        ③ read-only guard, before any connection exists
        ④ execute once on a scoped connection
        ⑤ format as JSON or table

        Args:
            invocation: parsed command line
            settings: environment settings, read once at startup
            db_factory: builds the DatabaseManager for the URL (swapped in tests)
    """
    db_url = require_connection_url(settings)
    sql = resolve_query(invocation.query, invocation.file)
    ensure_query_allowed(sql, settings.read_only)
    result = run_sql(db_url, sql, invocation.params, db_factory=db_factory)
    return format_result(result, invocation.output_format)
