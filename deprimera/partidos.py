"""Matches of a championship."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from deprimera.database import Database
from deprimera.models import Partido, PartidoResult

_COLUMNS = (
    "id_partidos, id_liga, id_campeonato, id_equipo_local, id_equipo_visitante, "
    "id_arbitro, id_asistente, fecha_encuentro, resultado_local, resultado_visitante, "
    "suspendido, motivo_suspencion, observacion, iniciado, finalizado"
)


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def _partido(row: Sequence[Any]) -> Partido:
    (
        id_partidos,
        id_liga,
        id_campeonato,
        id_local,
        id_visitante,
        id_arbitro,
        id_asistente,
        fecha,
        resultado_local,
        resultado_visitante,
        suspendido,
        motivo,
        observacion,
        iniciado,
        finalizado,
    ) = row
    return Partido(
        id_partidos=id_partidos,
        id_liga=id_liga,
        id_campeonato=id_campeonato,
        id_equipo_local=id_local,
        id_equipo_visitante=id_visitante,
        id_arbitro=id_arbitro,
        id_asistente=id_asistente,
        fecha_encuentro=_as_datetime(fecha),
        resultado_local=resultado_local or 0,
        resultado_visitante=resultado_visitante or 0,
        suspendido=suspendido,
        motivo_suspencion=motivo,
        observacion=observacion,
        iniciado=bool(iniciado),
        finalizado=bool(finalizado),
    )


class PartidosDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Partido]:
        return [_partido(row) for row in self.db.query(f"select {_COLUMNS} from partidos")]

    def get(self, id_partido: int) -> Partido:
        """Return the match, or an empty Partido when there is none."""
        row = self.db.query_one(
            f"select {_COLUMNS} from partidos where id_partidos = $1", id_partido
        )
        return Partido() if row is None else _partido(row)

    def save(self, partido: Partido) -> int:
        """Update an existing match or insert a new one; return its id."""
        values = (
            partido.id_arbitro,
            partido.id_asistente,
            partido.id_campeonato,
            partido.id_equipo_local,
            partido.id_equipo_visitante,
            partido.id_liga,
            partido.motivo_suspencion,
            partido.observacion,
            partido.resultado_local,
            partido.resultado_visitante,
            partido.suspendido,
            partido.fecha_encuentro,
        )
        if partido.id_partidos > 0:
            self.db.execute(
                "update partidos set id_arbitro=$1, id_asistente=$2, id_campeonato=$3, "
                "id_equipo_local=$4, id_equipo_visitante=$5, id_liga=$6, motivo_suspencion=$7, "
                "observacion=$8, resultado_local=$9, resultado_visitante=$10, suspendido=$11, "
                "fecha_encuentro= $12 where id_partidos = $13",
                *values,
                partido.id_partidos,
            )
        else:
            new_id = self.db.execute(
                "insert into partidos (id_arbitro, id_asistente, id_campeonato, "
                "id_equipo_local, id_equipo_visitante, id_liga, motivo_suspencion, observacion, "
                "resultado_local, resultado_visitante, suspendido, fecha_encuentro) "
                "values($1,$2,$3,$4,$5,$6,$7,$8,$9,$10,$11,$12)",
                *values,
            )
            partido.id_partidos = new_id or 0
        return partido.id_partidos

    def save_result(self, result: PartidoResult) -> int:
        """Record score and status of an existing match; ids of 0 or less are ignored."""
        if result.id_partidos > 0:
            self.db.execute(
                "update partidos set resultado_local=$1, resultado_visitante=$2, iniciado =$3, "
                "finalizado =$4, suspendido =$5, motivo_suspencion =$6 where id_partidos = $7",
                result.resultado_local,
                result.resultado_visitante,
                result.iniciado,
                result.finalizado,
                result.suspendido,
                result.motivo,
                result.id_partidos,
            )
        return result.id_partidos

    def delete(self, id_partido: int) -> bool:
        self.db.execute("delete from partidos where id_partidos = $1", id_partido)
        return True