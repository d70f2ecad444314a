from typing import Any, Callable, Dict, List, Optional, Sequence, Union
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from pg_client.db.database import DatabaseManager
from pg_client.errors import ExecutionError
from pg_client.execution.params import bind_positional

QueryResult = Union[List[Dict[str, Any]], Dict[str, Any]]


def _driver_message(exc: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception; its own str() adds SQL and a docs link
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc)


def run_sql(
    db_url: str,
    sql: str,
    params: Optional[Sequence[Any]] = None,
    db_factory: Callable[[str], DatabaseManager] = DatabaseManager,
) -> QueryResult:
    """
    Execute one statement on one fresh connection.

    Returns the rows as dicts when the statement produces rows,
    otherwise {"affected_rows": n}. The connection is closed on every path.
    """
    try:
        db = db_factory(db_url)
        with db.connection() as conn:
            if params:
                statement, bound = bind_positional(sql, params, conn.dialect.paramstyle)
                rs = conn.exec_driver_sql(statement, bound)
            else:
                # Sent verbatim: no bind parsing, so % and : in the SQL are left alone
                rs = conn.execution_options(no_parameters=True).exec_driver_sql(sql)

            # INSERT/UPDATE/DELETE without RETURNING produce no rows
            if rs.returns_rows:
                return [dict(row._mapping) for row in rs]
            # DDL and utility commands report -1: no count available
            return {"affected_rows": rs.rowcount if rs.rowcount >= 0 else None}
    except SQLAlchemyError as e:
        raise ExecutionError(_driver_message(e)) from e
