"""Championships and their top scorers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from deprimera.database import Database, DatabaseError
from deprimera.models import Campeonato

logger = logging.getLogger(__name__)

_COLUMNS = (
    "c.id_campeonato, c.id_liga, c.id_modelo, c.descripcion, c.fecha_inicio, "
    "c.fecha_fin, c.gen_fixture, c.gen_fixture_finish"
)

_USER_FILTER = "where p.id_user = $1 and p.idgrupo = $2"

# Joins that restrict the championships to those a user of each group takes part in.
_GROUP_JOINS = {
    # administrators see every championship
    1: None,
    # delegates
    2: "inner join campeonatos_equipos ce on ce.id_campeonato = c.id_campeonato "
    "inner join asistentes a on a.id_campeonato = ce.id_campeonato "
    "inner join personas p on p.id_persona = a.id_persona ",
    # players
    3: "inner join campeonatos_equipos ce on ce.id_campeonato = c.id_campeonato "
    "inner join jugadores j on j.id_equipo = ce.id_equipo "
    "inner join personas p on p.id_persona = j.id_persona ",
    # referees
    4: "inner join campeonatos_equipos ce on ce.id_campeonato = c.id_campeonato "
    "inner join arbitros a on a.id_campeonato = ce.id_campeonato "
    "inner join personas p on p.id_persona = a.id_persona ",
}


@dataclass
class CampeonatoGoleador:
    """A player's goal total within a championship."""

    id_jugador: int = 0
    equipo: str = ""
    nombre: str = ""
    apellido: str = ""
    goles: int = 0


def format_timestamp(moment: datetime) -> str:
    """Format a moment as 'YYYY-MM-DD hh:mm:ss' for storage."""
    return (
        f"{moment.year}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def _campeonato(row: Sequence[Any]) -> Campeonato:
    id_campeonato, id_liga, id_modelo, descripcion, inicio, fin, gen, gen_finish = row
    return Campeonato(
        id_campeonato=id_campeonato,
        id_liga=id_liga,
        id_modelo=id_modelo,
        descripcion=descripcion,
        fecha_inicio=_as_datetime(inicio),
        fecha_fin=_as_datetime(fin),
        gen_fixture=bool(gen),
        gen_fixture_finish=bool(gen_finish),
    )


def _shirt_number(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


class CampeonatosDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Campeonato]:
        rows = self.db.query(f"select {_COLUMNS} from campeonatos c")
        return [_campeonato(row) for row in rows]

    def get_for_user(self, id_user: str, id_grupo: int) -> list[Campeonato]:
        """Championships visible to a user of the given group (1 to 4)."""
        if id_grupo not in _GROUP_JOINS:
            raise ValueError(f"unknown group: {id_grupo}")
        joins = _GROUP_JOINS[id_grupo]
        if joins is None:
            rows = self.db.query(f"select {_COLUMNS} from campeonatos c")
        else:
            rows = self.db.query(
                f"select {_COLUMNS} from campeonatos c {joins}{_USER_FILTER}",
                id_user,
                id_grupo,
            )
        return [_campeonato(row) for row in rows]

    def get(self, id_campeonato: int) -> Campeonato:
        """Return the championship, or an empty Campeonato when there is none."""
        row = self.db.query_one(
            f"select {_COLUMNS} from campeonatos c where c.id_campeonato = $1", id_campeonato
        )
        return Campeonato() if row is None else _campeonato(row)

    def save(self, campeonato: Campeonato) -> int:
        """Update an existing championship or insert a new one; return its id."""
        inicio = None if campeonato.fecha_inicio is None else format_timestamp(campeonato.fecha_inicio)
        fin = None if campeonato.fecha_fin is None else format_timestamp(campeonato.fecha_fin)
        if campeonato.id_campeonato > 0:
            self.db.execute(
                "update campeonatos set descripcion=$1, fecha_fin=$2, fecha_inicio=$3, "
                "id_liga=$4, id_modelo=$5, gen_fixture =$6 where id_campeonato = $7",
                campeonato.descripcion,
                fin,
                inicio,
                campeonato.id_liga,
                campeonato.id_modelo,
                campeonato.gen_fixture,
                campeonato.id_campeonato,
            )
        else:
            self.db.execute(
                "insert into campeonatos (descripcion, fecha_fin, fecha_inicio, id_liga, id_modelo) "
                "values($1,$2,$3,$4,$5)",
                campeonato.descripcion,
                fin,
                inicio,
                campeonato.id_liga,
                campeonato.id_modelo,
            )
            row = self.db.query_one(
                "select id_campeonato from campeonatos order by id_campeonato desc limit 1"
            )
            if row is None:
                raise DatabaseError("inserted championship not found")
            campeonato.id_campeonato = row[0]
        return campeonato.id_campeonato

    def delete(self, id_campeonato: int) -> bool:
        self.db.execute("delete from campeonatos where id_campeonato = $1", id_campeonato)
        return True

    def save_goleadores(
        self, id_partido: int, goleadores_local: str, goleadores_visitante: str
    ) -> bool:
        """Credit goals of a match, given as space-separated shirt numbers per side."""
        rows = self.db.query(
            "select jlocal.id_jugadores as jug_local, jlocal.nro_camiseta as nro_camiseta_local, "
            "jvisit.id_jugadores as jug_visit, jvisit.nro_camiseta as nro_camiseta_visit "
            "from partidos p "
            "left join jugadores jlocal on jlocal.id_equipo = p.id_equipo_local "
            "left join jugadores jvisit on jvisit.id_equipo = p.id_equipo_visitante "
            "where id_partidos = $1",
            id_partido,
        )
        for jug_local, nro_local, jug_visit, nro_visit in rows:
            self._save_goles(id_partido, jug_local, nro_local, goleadores_local)
            self._save_goles(id_partido, jug_visit, nro_visit, goleadores_visitante)
        return True

    def _save_goles(
        self,
        id_partido: int,
        id_jugador: Optional[int],
        nro_camiseta: Optional[int],
        goleadores: str,
    ) -> None:
        if not goleadores:
            return
        shirt = nro_camiseta or 0
        for token in goleadores.split(" "):
            if _shirt_number(token) != shirt:
                continue
            try:
                self.db.execute(
                    "insert into campeonatos_goleadores(id_partido, id_jugadores, goles) "
                    "values($1,$2,1) on DUPLICATE KEY UPDATE goles = goles + 1",
                    id_partido,
                    id_jugador,
                )
            except DatabaseError as exc:
                logger.error("cannot record goal: %s", exc)

    def get_goleadores(self, id_campeonato: int) -> list[CampeonatoGoleador]:
        """Goal totals of every scorer in a championship."""
        rows = self.db.query(
            "select cg.id_jugadores, e.nombre, per.nombre, per.apellido, sum(goles) as goles "
            "from campeonatos_goleadores cg "
            "inner join partidos p on p.id_partidos = cg.id_partido "
            "inner join jugadores j on j.id_jugadores = cg.id_jugadores "
            "inner join personas per on per.id_persona = j.id_persona "
            "inner join equipos e on e.id_equipo = j.id_equipo "
            "where p.id_campeonato = $1 "
            "group by cg.id_jugadores, e.nombre, per.nombre, per.apellido",
            id_campeonato,
        )
        return [
            CampeonatoGoleador(
                id_jugador=id_jugador,
                equipo=equipo,
                nombre=nombre,
                apellido=apellido,
                goles=int(goles or 0),
            )
            for id_jugador, equipo, nombre, apellido, goles in rows
        ]