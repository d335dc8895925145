import sqlite3

import pytest

from deprimera.database import ConfiguracionSize, Database, DatabaseError, QueryDao


class _Recorder:
    """A DB-API connection and cursor that records what it is given."""

    def __init__(self):
        self.executed = []
        self.committed = False
        self.rolled_back = False
        self.closed = False
        self.lastrowid = 7

    def cursor(self):
        return self

    def execute(self, sql, params):
        self.executed.append((sql, params))

    def fetchall(self):
        return []

    def fetchone(self):
        return None

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


def _sqlite_db(tmp_path, schema=""):
    path = tmp_path / "test.db"
    conn = sqlite3.connect(path)
    conn.executescript(schema)
    conn.close()
    return Database(lambda: sqlite3.connect(path), "qmark")


def test_qmark_reorders_arguments(tmp_path):
    db = _sqlite_db(tmp_path)
    assert db.query_one("select $2, $1", "a", "b") == ("b", "a")


def test_repeated_placeholder_reuses_argument(tmp_path):
    db = _sqlite_db(tmp_path)
    assert db.query_one("select $1, $1", "x") == ("x", "x")


def test_query_one_returns_none_without_rows(tmp_path):
    db = _sqlite_db(tmp_path, "create table t (v integer);")
    assert db.query_one("select v from t") is None


def test_execute_returns_inserted_id(tmp_path):
    db = _sqlite_db(tmp_path, "create table t (id integer primary key, v text);")
    first = db.execute("insert into t (v) values ($1)", "one")
    second = db.execute("insert into t (v) values ($1)", "two")
    assert db.query("select id, v from t order by id") == [(first, "one"), (second, "two")]
    assert first != second


def test_missing_argument_raises(tmp_path):
    db = _sqlite_db(tmp_path)
    with pytest.raises(DatabaseError):
        db.query("select $1, $2", "only")


def test_bad_statement_raises(tmp_path):
    db = _sqlite_db(tmp_path)
    with pytest.raises(DatabaseError):
        db.execute("insert into missing_table values ($1)", 1)


def test_connect_failure_raises():
    def broken():
        raise OSError("down")

    db = Database(broken, "qmark")
    with pytest.raises(DatabaseError):
        db.query("select 1")


def test_unknown_paramstyle_rejected():
    with pytest.raises(ValueError):
        Database(lambda: None, "pyformat")


def test_numeric_style_keeps_argument_order():
    recorder = _Recorder()
    db = Database(lambda: recorder, "numeric")
    db.query("select $2, $1", "a", "b")
    assert recorder.executed == [("select :2, :1", ("a", "b"))]


def test_format_style_escapes_percent():
    recorder = _Recorder()
    db = Database(lambda: recorder, "format")
    db.execute("select '%' || $1", "v")
    assert recorder.executed == [("select '%%' || %s", ("v",))]


def test_dollar_style_passes_through():
    recorder = _Recorder()
    db = Database(lambda: recorder, "dollar")
    assert db.execute("delete from t where id = $1", 3) == 7
    assert recorder.executed == [("delete from t where id = $1", (3,))]
    assert recorder.committed and recorder.closed


def test_connection_rolls_back_on_error():
    recorder = _Recorder()
    db = Database(lambda: recorder, "qmark")
    with pytest.raises(RuntimeError):
        with db.connection():
            raise RuntimeError("boom")
    assert recorder.rolled_back
    assert recorder.closed
    assert not recorder.committed


_SCHEMA = """
create table ligas (id integer primary key);
create table campeonatos (id integer primary key);
create table equipos (id integer primary key);
create table arbitros (id integer primary key);
create table asistentes (id integer primary key);
create table jugadores (id integer primary key);
"""


def test_configuraciones_size_counts_rows(tmp_path):
    db = _sqlite_db(tmp_path, _SCHEMA)
    for _ in range(2):
        db.execute("insert into ligas default values")
    for _ in range(3):
        db.execute("insert into equipos default values")
    db.execute("insert into jugadores default values")
    size = QueryDao(db).configuraciones_size()
    assert size == ConfiguracionSize(ligas=2, equipos=3, jugadores=1)


def test_configuraciones_size_empty(tmp_path):
    db = _sqlite_db(tmp_path, _SCHEMA)
    assert QueryDao(db).configuraciones_size() == ConfiguracionSize()