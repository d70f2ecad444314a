import pytest
from pg_client.errors import UsageError
from pg_client.query_source import resolve_query


def test_inline_query_is_returned_as_written():
    assert resolve_query("  SELECT 1\n", None) == "  SELECT 1\n"


def test_file_is_read_relative_to_cwd(tmp_path):
    (tmp_path / "q.sql").write_text("SELECT 'héllo'\n", encoding="utf-8")
    assert resolve_query(None, "q.sql") == "SELECT 'héllo'\n"


def test_file_relative_to_explicit_cwd(tmp_path):
    sub = tmp_path / "sql"
    sub.mkdir()
    (sub / "q.sql").write_text("SELECT 2")
    assert resolve_query(None, "q.sql", cwd=sub) == "SELECT 2"


def test_both_sources_is_a_usage_error(tmp_path):
    (tmp_path / "a.sql").write_text("SELECT 1")
    with pytest.raises(UsageError, match="not both"):
        resolve_query("SELECT 1", "a.sql")


@pytest.mark.parametrize("query", [None, "", "   \n\t"])
def test_missing_or_blank_query(query):
    with pytest.raises(UsageError, match="No SQL provided"):
        resolve_query(query, None)


def test_blank_file(tmp_path):
    (tmp_path / "empty.sql").write_text("\n\n")
    with pytest.raises(UsageError, match="No SQL provided"):
        resolve_query(None, "empty.sql")


def test_missing_file():
    with pytest.raises(UsageError, match="Could not read"):
        resolve_query(None, "nope.sql")


def test_non_utf8_file(tmp_path):
    (tmp_path / "latin1.sql").write_bytes(b"SELECT '\xe9'")
    with pytest.raises(UsageError, match="not valid UTF-8"):
        resolve_query(None, "latin1.sql")
