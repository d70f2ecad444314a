from pathlib import Path
from typing import Optional, Union

from pg_client.errors import UsageError


def resolve_query(
    query: Optional[str],
    file_path: Optional[str],
    cwd: Optional[Union[str, Path]] = None,
) -> str:
    """
    Return the SQL text to run, from --query or from a UTF-8 file.

    Relative file paths are resolved against cwd (the process working
    directory by default). The text is returned as written; it only has to
    be non-blank.
    """
    if query and file_path:
        raise UsageError("Provide either --query or --file, not both.")

    sql = query or ""
    if file_path:
        path = Path(cwd or Path.cwd()) / file_path
        try:
            sql = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise UsageError(f"Could not read {path}: not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise UsageError(f"Could not read {path}: {e.strerror or e}") from e

    if not sql.strip():
        raise UsageError("No SQL provided. Use --query or --file.")
    return sql
