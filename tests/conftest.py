import sqlite3
import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # No stray .env or shell settings leak into a test
    monkeypatch.delenv("POSTGRES_URL", raising=False)
    monkeypatch.delenv("POSTGRES_READ_ONLY", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "test.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE t (id INTEGER PRIMARY KEY, x INTEGER, name TEXT)")
    conn.executemany("INSERT INTO t (id, x, name) VALUES (?, ?, ?)",
                     [(1, 10, "alpha"), (2, 20, "beta")])
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def db_url(db_path):
    return f"sqlite:///{db_path}"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def read_rows(db_path):
    def _read():
        conn = sqlite3.connect(db_path)
        rows = conn.execute("SELECT id, x FROM t ORDER BY id").fetchall()
        conn.close()
        return rows
    return _read
