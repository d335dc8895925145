import sqlite3

import pytest

from deprimera.database import Database
from deprimera.models import Partido, PartidoResult
from deprimera.partidos import PartidosDao


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "league.db"
    conn = sqlite3.connect(path)
    conn.execute(
        "create table partidos ("
        "id_partidos integer primary key autoincrement, id_liga integer, id_campeonato integer, "
        "id_equipo_local integer, id_equipo_visitante integer, id_arbitro integer, "
        "id_asistente integer, fecha_encuentro text, resultado_local integer, "
        "resultado_visitante integer, suspendido text, motivo_suspencion text, "
        "observacion text, iniciado integer default 0, finalizado integer default 0)"
    )
    conn.commit()
    conn.close()
    return Database(lambda: sqlite3.connect(path))


def _partido():
    return Partido(
        id_liga=1,
        id_campeonato=2,
        id_equipo_local=3,
        id_equipo_visitante=4,
        id_arbitro=5,
        suspendido="N",
        observacion="lluvia",
    )


def test_save_and_get_round_trip(db):
    dao = PartidosDao(db)
    partido = _partido()
    new_id = dao.save(partido)
    assert new_id > 0
    assert partido.id_partidos == new_id
    assert dao.get(new_id) == partido


def test_update_existing_match(db):
    dao = PartidosDao(db)
    partido = _partido()
    new_id = dao.save(partido)
    partido.resultado_local = 2
    partido.id_asistente = 8
    assert dao.save(partido) == new_id
    assert dao.get(new_id) == partido
    assert dao.get_all() == [partido]


def test_save_result_updates_score_and_status(db):
    dao = PartidosDao(db)
    new_id = dao.save(_partido())
    result = PartidoResult(
        id_partidos=new_id,
        resultado_local=1,
        resultado_visitante=3,
        iniciado=True,
        finalizado=True,
        motivo="ninguno",
    )
    assert dao.save_result(result) == new_id
    stored = dao.get(new_id)
    assert (stored.resultado_local, stored.resultado_visitante) == (1, 3)
    assert stored.iniciado is True
    assert stored.finalizado is True
    assert stored.motivo_suspencion == "ninguno"


def test_save_result_without_id_changes_nothing(db):
    dao = PartidosDao(db)
    partido = _partido()
    dao.save(partido)
    assert dao.save_result(PartidoResult(resultado_local=9)) == 0
    assert dao.get_all() == [partido]


def test_delete_then_get_returns_empty(db):
    dao = PartidosDao(db)
    new_id = dao.save(_partido())
    assert dao.delete(new_id) is True
    assert dao.get(new_id) == Partido()
    assert dao.get_all() == []