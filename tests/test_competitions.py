import sqlite3

import pytest

from deprimera.competitions import EliminatoriasDao, LigasDao
from deprimera.database import Database, DatabaseError
from deprimera.models import Eliminatoria, Liga

SCHEMA = """
create table ligas (
    id_liga integer primary key autoincrement,
    nombre text, nombre_contacto text, mail_contacto text, cuit text,
    domicilio text, telefono text, telefono_contacto text
);
create table eliminatorias (
    id_eliminatoria integer primary key autoincrement,
    id_campeonato integer, id_partido integer, nro_llave integer
);
"""


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "competitions.db"
    with sqlite3.connect(path) as conn:
        conn.executescript(SCHEMA)
    return Database(lambda: sqlite3.connect(path))


def make_liga():
    return Liga(
        nombre="Liga Norte",
        domicilio="Calle Falsa 123",
        cuit="cuit",
        mail_contacto="liga@example.com",
        nombre_contacto="Juan",
        telefono=None,
        telefono_contacto=None,
    )


def test_liga_insert_then_get(db):
    dao = LigasDao(db)
    liga = make_liga()
    new_id = dao.save(liga)
    assert new_id > 0
    assert liga.id_liga == new_id
    assert dao.get(new_id) == liga


def test_liga_update(db):
    dao = LigasDao(db)
    liga = make_liga()
    new_id = dao.save(liga)
    liga.nombre = "Liga Sur"
    liga.telefono_contacto = "contacto"
    assert dao.save(liga) == new_id
    assert dao.get(new_id) == liga
    assert len(dao.get_all()) == 1


def test_liga_delete(db):
    dao = LigasDao(db)
    new_id = dao.save(make_liga())
    assert dao.delete(new_id) is True
    assert dao.get(new_id) == Liga()
    assert dao.get_all() == []


def test_liga_get_all_keeps_fields(db):
    dao = LigasDao(db)
    first = make_liga()
    second = make_liga()
    second.nombre = "Liga Oeste"
    dao.save(first)
    dao.save(second)
    assert dao.get_all() == [first, second]


def test_eliminatoria_round_trip(db):
    dao = EliminatoriasDao(db)
    tie = Eliminatoria(id_campeonato=4, id_partido=9, nro_llave=None)
    new_id = dao.save(tie)
    assert dao.get(new_id) == Eliminatoria(new_id, 4, 9, None)


def test_eliminatoria_update_and_delete(db):
    dao = EliminatoriasDao(db)
    tie = Eliminatoria(id_campeonato=4, id_partido=9, nro_llave=2)
    new_id = dao.save(tie)
    tie.id_partido = 11
    assert dao.save(tie) == new_id
    assert dao.get_all() == [tie]
    assert dao.delete(new_id) is True
    assert dao.get(new_id) == Eliminatoria()


def test_missing_table_raises(tmp_path):
    path = tmp_path / "empty.db"
    db = Database(lambda: sqlite3.connect(path))
    with pytest.raises(DatabaseError):
        LigasDao(db).delete(1)