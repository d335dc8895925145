"""Read-only match reports: detailed match lists, standings and team history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Sequence, Union

from deprimera.database import Database
from deprimera.models import EquipoTablePos, PartidoFromDate

_ROJA = 1
_AMARILLA = 2

_AGG = "select string_agg(cast(aux_jug.nro_camiseta as text), ' ') "


def _goleadores(side: str) -> str:
    return (
        f"({_AGG}from campeonatos_goleadores aux_cg "
        "inner join jugadores aux_jug on aux_jug.id_jugadores = aux_cg.id_jugadores "
        f"and aux_jug.id_equipo = {side}.id_equipo "
        "where aux_cg.id_partido = p.id_partidos)"
    )


def _sanciones(side: str, id_sancion: int) -> str:
    return (
        f"({_AGG}from sanciones_jugadores aux_sj "
        "inner join jugadores aux_jug on aux_jug.id_jugadores = aux_sj.id_jugador "
        f"and aux_jug.id_equipo = {side}.id_equipo "
        f"where aux_sj.id_sancion = {id_sancion} and aux_sj.id_partidos = p.id_partidos)"
    )


_JOINS = (
    " from partidos p "
    " inner join ligas l on l.id_liga = p.id_liga "
    " inner join campeonatos c on c.id_campeonato = p.id_campeonato "
    " inner join equipos e_local on e_local.id_equipo = p.id_equipo_local "
    " inner join equipos e_visit on e_visit.id_equipo = p.id_equipo_visitante "
    " left join arbitros a on a.id_arbitro = p.id_arbitro "
    " left join asistentes asis on asis.id_asistente = p.id_asistente "
)

_SUMMARY_COLUMNS = (
    "select p.id_partidos, p.fecha_encuentro, "
    "l.nombre as liga_name, c.descripcion as campeonato_name, "
    "e_local.nombre as e_local_name, e_visit.nombre as e_visit_name, "
    "p.resultado_local, p.resultado_visitante, p.suspendido"
)

_DETALLE_SELECT = (
    _SUMMARY_COLUMNS
    + ", p.iniciado, p.finalizado, p.motivo_suspencion, "
    + f"{_goleadores('e_local')} as goleadores_local, "
    + f"{_goleadores('e_visit')} as goleadores_visit, "
    + f"{_sanciones('e_local', _AMARILLA)} as sanciones_local_amarillas, "
    + f"{_sanciones('e_local', _ROJA)} as sanciones_local_rojas, "
    + f"{_sanciones('e_visit', _AMARILLA)} as sanciones_visit_amarillas, "
    + f"{_sanciones('e_visit', _ROJA)} as sanciones_visit_rojas"
    + _JOINS
)


@dataclass
class PartidoDetalle:
    """A match with names, results, status, scorers and cards of each side.

    Scorers and cards are space-separated shirt numbers; empty when there are none.
    """

    id_partidos: int = 0
    fecha_encuentro: Optional[datetime] = None
    liga_name: str = ""
    campeonato_name: str = ""
    e_local_name: str = ""
    e_visit_name: str = ""
    resultado_local: int = 0
    resultado_visitante: int = 0
    suspendido: bool = False
    iniciado: bool = False
    finalizado: bool = False
    motivo: str = ""
    goleadores_local: str = ""
    goleadores_visit: str = ""
    sanc_local_amar: str = ""
    sanc_local_rojas: str = ""
    sanc_visit_amar: str = ""
    sanc_visit_rojas: str = ""


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def _detalle(row: Sequence[Any]) -> PartidoDetalle:
    (
        id_partidos,
        fecha,
        liga_name,
        campeonato_name,
        e_local_name,
        e_visit_name,
        resultado_local,
        resultado_visitante,
        suspendido,
        iniciado,
        finalizado,
        motivo,
        goleadores_local,
        goleadores_visit,
        sanc_local_amar,
        sanc_local_rojas,
        sanc_visit_amar,
        sanc_visit_rojas,
    ) = row
    return PartidoDetalle(
        id_partidos=id_partidos,
        fecha_encuentro=_as_datetime(fecha),
        liga_name=liga_name or "",
        campeonato_name=campeonato_name or "",
        e_local_name=e_local_name or "",
        e_visit_name=e_visit_name or "",
        resultado_local=resultado_local or 0,
        resultado_visitante=resultado_visitante or 0,
        suspendido=bool(suspendido),
        iniciado=bool(iniciado),
        finalizado=bool(finalizado),
        motivo=motivo or "",
        goleadores_local=goleadores_local or "",
        goleadores_visit=goleadores_visit or "",
        sanc_local_amar=sanc_local_amar or "",
        sanc_local_rojas=sanc_local_rojas or "",
        sanc_visit_amar=sanc_visit_amar or "",
        sanc_visit_rojas=sanc_visit_rojas or "",
    )


class PartidoReportsDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all_from_equipo(self, id_equipo: int) -> list[PartidoDetalle]:
        """Every match a team plays, home or away."""
        rows = self.db.query(
            f"{_DETALLE_SELECT} where e_local.id_equipo = $1 or e_visit.id_equipo = $1",
            id_equipo,
        )
        return [_detalle(row) for row in rows]

    def get_all_from_date(self, date_partidos: Union[str, date]) -> list[PartidoDetalle]:
        """Matches played on a day ('YYYY-MM-DD'), in order of kick-off."""
        day = date_partidos.isoformat() if isinstance(date_partidos, date) else date_partidos
        rows = self.db.query(
            f"{_DETALLE_SELECT} where p.fecha_encuentro between $1 and $2 "
            "order by p.fecha_encuentro asc",
            day + " 00:00:01",
            day + " 23:59:59",
        )
        return [_detalle(row) for row in rows]

    def get_all_from_campeonato(self, id_campeonato: int) -> list[PartidoDetalle]:
        """Matches of a championship, in order of kick-off."""
        rows = self.db.query(
            f"{_DETALLE_SELECT} where c.id_campeonato = $1 order by p.fecha_encuentro asc",
            id_campeonato,
        )
        return [_detalle(row) for row in rows]

    def get_table_position(self, id_campeonato: int) -> list[EquipoTablePos]:
        """The standings of a championship, highest points first."""
        rows = self.db.query(
            "select ce.id_campeonato, ce.id_equipo, e.nombre, ce.nro_equipo, "
            "ce.puntos, ce.p_gan, ce.p_emp, ce.p_per "
            "from campeonatos_equipos ce "
            "inner join campeonatos c on c.id_campeonato = ce.id_campeonato "
            "inner join equipos e on e.id_equipo = ce.id_equipo "
            "where c.id_campeonato = $1 "
            "order by ce.puntos desc",
            id_campeonato,
        )
        return [
            EquipoTablePos(
                id_equipo=id_equipo,
                id_campeonato=camp,
                nombre=nombre or "",
                nro_equipo="" if nro is None else str(nro),
                puntos=puntos or 0,
                partido_ganado=p_gan or 0,
                partido_empatado=p_emp or 0,
                partido_perdido=p_per or 0,
            )
            for camp, id_equipo, nombre, nro, puntos, p_gan, p_emp, p_per in rows
        ]

    def history_plays(self, id_equipo: int) -> list[PartidoFromDate]:
        """A team's matches with league, championship and team names."""
        rows = self.db.query(
            f"{_SUMMARY_COLUMNS}{_JOINS}"
            "where p.id_equipo_local = $1 or p.id_equipo_visitante = $1",
            id_equipo,
        )
        return [
            PartidoFromDate(
                id_partidos=id_partidos,
                fecha_encuentro=_as_datetime(fecha),
                liga_name=liga or "",
                campeonato_name=campeonato or "",
                e_local_name=local or "",
                e_visit_name=visit or "",
                resultado_local=res_local or 0,
                resultado_visitante=res_visit or 0,
                suspendido=bool(suspendido),
            )
            for (
                id_partidos,
                fecha,
                liga,
                campeonato,
                local,
                visit,
                res_local,
                res_visit,
                suspendido,
            ) in rows
        ]