from dataclasses import asdict, replace
from datetime import datetime

import pytest

from deprimera.models import (
    AppGrupo,
    AppSession,
    Campeonato,
    Equipo,
    EquipoTablePos,
    JugadorPlantel,
    Liga,
    Pais,
    Partido,
    PartidoFromDate,
    PartidoResult,
    Persona,
    Provincia,
    SancionJugador,
    SancionJugadorFromCampeonato,
    User,
    Zona,
    table_name,
)


@pytest.mark.parametrize(
    "model, expected",
    [
        (AppGrupo, "app_grupos"),
        (Campeonato, "campeonatos"),
        (Pais, "app_paises"),
        (Provincia, "app_provincias"),
        (SancionJugador, "sanciones_jugadores"),
        (User, "users"),
        (Zona, "zonas"),
        (Partido, "partidos"),
    ],
)
def test_table_name_of_class(model, expected):
    assert table_name(model) == expected


def test_table_name_of_instance_matches_class():
    liga = Liga(id_liga=3, nombre="Liga Norte")
    assert table_name(liga) == table_name(Liga) == "ligas"


@pytest.mark.parametrize(
    "model",
    [EquipoTablePos, JugadorPlantel, PartidoResult, PartidoFromDate, SancionJugadorFromCampeonato],
)
def test_table_name_rejects_query_shapes(model):
    with pytest.raises(TypeError):
        table_name(model)


def test_table_name_rejects_plain_objects():
    with pytest.raises(TypeError):
        table_name(object())


def test_defaults_are_zero_values():
    persona = Persona()
    assert persona.id_persona == 0
    assert persona.apellido == ""
    assert persona.domicilio is None
    assert persona.edad is None


def test_equipo_defaults_and_photo():
    equipo = Equipo(nombre="Los Pumas", foto=b"\x89PNG")
    assert equipo.habilitado is False
    assert equipo.foto == b"\x89PNG"
    assert equipo.id_equipo == 0


def test_table_is_not_a_field():
    assert "TABLE" not in asdict(Campeonato())


def test_replace_round_trip():
    inicio = datetime(2021, 3, 6, 10, 0, 0)
    campeonato = Campeonato(id_liga=1, descripcion="Apertura", fecha_inicio=inicio)
    saved = replace(campeonato, id_campeonato=7)
    assert saved.id_campeonato == 7
    assert replace(saved, id_campeonato=0) == campeonato


def test_asdict_round_trip():
    session = AppSession(user_id="jperez", token="token", expire_date=datetime(2021, 1, 1))
    assert AppSession(**asdict(session)) == session


def test_user_holds_credentials():
    password = "password"
    user = User(user_id="jperez", password=password, habilitado=True)
    assert user.password == password
    assert user.telefono is None