"""
Read-only guard.

Keyword heuristic, not a SQL parser: a keyword inside a string literal or an
identifier (e.g. a column called "comment") still counts as mutating, and a
write hidden behind a function call does not. Comments are stripped first.
"""
import re
from typing import Optional

from pg_client.db.config import READ_ONLY_ENV
from pg_client.errors import PolicyBlockError

MUTATING_KEYWORDS = (
    "insert", "update", "delete", "alter", "create", "drop", "truncate",
    "grant", "revoke", "comment", "set", "vacuum", "analyze", "refresh",
    "merge", "call", "copy", "cluster", "reindex",
)

MUTATING_PATTERN = re.compile(r"\b(" + "|".join(MUTATING_KEYWORDS) + r")\b", re.IGNORECASE)
LINE_COMMENT = re.compile(r"--.*$", re.MULTILINE)
BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def strip_comments(sql: str) -> str:
    return BLOCK_COMMENT.sub("", LINE_COMMENT.sub("", sql))


def find_mutating_keyword(sql: str) -> Optional[str]:
    """Return the first mutating keyword outside comments, upper-cased, or None"""
    match = MUTATING_PATTERN.search(strip_comments(sql))
    return match.group(1).upper() if match else None


def is_mutating(sql: str) -> bool:
    return find_mutating_keyword(sql) is not None


def ensure_query_allowed(sql: str, read_only: bool) -> None:
    """Raise PolicyBlockError when read-only mode is on and the SQL looks mutating."""
    if not read_only:
        return
    keyword = find_mutating_keyword(sql)
    if keyword is None:
        return
    raise PolicyBlockError(
        f"Blocked mutating query ({keyword}) while {READ_ONLY_ENV} is true. "
        f"Set {READ_ONLY_ENV}=false to allow writes."
    )
