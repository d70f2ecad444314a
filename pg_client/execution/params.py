import json
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pg_client.errors import ParameterFormatError

# $1, $2 ... but not the tail of a dollar-quote tag like $tag1$
POSITIONAL_PLACEHOLDER = re.compile(r"(?<![\w$])\$(\d+)\b")


def parse_params(raw: Optional[str]) -> List[Any]:
    """Parse the --params value. Missing or empty means no parameters."""
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParameterFormatError(f"--params must be a JSON array: {e}") from e
    if not isinstance(parsed, list):
        raise ParameterFormatError("--params must be a JSON array")
    return parsed


def bind_positional(
    sql: str, params: Sequence[Any], paramstyle: str
) -> Tuple[str, Union[Dict[str, Any], Tuple[Any, ...]]]:
    """
    Rewrite Postgres-style $N placeholders for the DBAPI paramstyle.

    "SELECT * FROM t WHERE id = $1::int" with [7] under psycopg2 ("pyformat")
    becomes ("SELECT * FROM t WHERE id = %(p1)s::int", {"p1": 7}).
    Types are not checked; unused values are ignored.
    """
    if paramstyle == "numeric_dollar":
        return sql, tuple(params)

    def value_for(match: "re.Match[str]") -> Any:
        index = int(match.group(1))
        if index < 1 or index > len(params):
            raise ParameterFormatError(
                f"${index} has no value: --params holds {len(params)} item(s)"
            )
        return params[index - 1]

    if paramstyle in ("pyformat", "format"):
        # percent signs become significant once parameters are passed
        sql = sql.replace("%", "%%")

    if paramstyle in ("pyformat", "named"):
        named: Dict[str, Any] = {}

        def to_named(match: "re.Match[str]") -> str:
            key = f"p{match.group(1)}"
            named[key] = value_for(match)
            return f"%({key})s" if paramstyle == "pyformat" else f":{key}"

        return POSITIONAL_PLACEHOLDER.sub(to_named, sql), named

    if paramstyle == "numeric":
        for match in POSITIONAL_PLACEHOLDER.finditer(sql):
            value_for(match)
        return POSITIONAL_PLACEHOLDER.sub(lambda m: f":{m.group(1)}", sql), tuple(params)

    # qmark / format: one value per occurrence, in order
    ordered: List[Any] = []

    def to_positional(match: "re.Match[str]") -> str:
        ordered.append(value_for(match))
        return "?" if paramstyle == "qmark" else "%s"

    return POSITIONAL_PLACEHOLDER.sub(to_positional, sql), tuple(ordered)
