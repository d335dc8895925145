"""Leagues and knockout brackets."""

from __future__ import annotations

from deprimera.database import Database
from deprimera.models import Eliminatoria, Liga

_LIGA_COLUMNS = (
    "id_liga, nombre, domicilio, cuit, mail_contacto, nombre_contacto, "
    "telefono, telefono_contacto"
)


class LigasDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Liga]:
        rows = self.db.query(f"select {_LIGA_COLUMNS} from ligas")
        return [Liga(*row) for row in rows]

    def get(self, id_liga: int) -> Liga:
        """Return the league, or an empty Liga when there is none."""
        row = self.db.query_one(f"select {_LIGA_COLUMNS} from ligas where id_liga = $1", id_liga)
        return Liga() if row is None else Liga(*row)

    def save(self, liga: Liga) -> int:
        """Update an existing league or insert a new one; return its id."""
        values = (
            liga.cuit,
            liga.domicilio,
            liga.mail_contacto,
            liga.nombre,
            liga.nombre_contacto,
            liga.telefono,
            liga.telefono_contacto,
        )
        if liga.id_liga > 0:
            self.db.execute(
                "update ligas set cuit=$1, domicilio=$2, mail_contacto=$3, nombre=$4, "
                "nombre_contacto=$5, telefono=$6, telefono_contacto=$7 where id_liga = $8",
                *values,
                liga.id_liga,
            )
        else:
            new_id = self.db.execute(
                "insert into ligas (cuit, domicilio, mail_contacto, nombre, nombre_contacto, "
                "telefono, telefono_contacto) values($1,$2,$3,$4,$5,$6,$7)",
                *values,
            )
            liga.id_liga = new_id or 0
        return liga.id_liga

    def delete(self, id_liga: int) -> bool:
        self.db.execute("delete from ligas where id_liga = $1", id_liga)
        return True


class EliminatoriasDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Eliminatoria]:
        rows = self.db.query(
            "select id_eliminatoria, id_campeonato, id_partido, nro_llave from eliminatorias"
        )
        return [Eliminatoria(*row) for row in rows]

    def get(self, id_eliminatoria: int) -> Eliminatoria:
        """Return the knockout tie, or an empty Eliminatoria when there is none."""
        row = self.db.query_one(
            "select id_eliminatoria, id_campeonato, id_partido, nro_llave from eliminatorias "
            "where id_eliminatoria = $1",
            id_eliminatoria,
        )
        return Eliminatoria() if row is None else Eliminatoria(*row)

    def save(self, eliminatoria: Eliminatoria) -> int:
        """Update an existing knockout tie or insert a new one; return its id."""
        if eliminatoria.id_eliminatoria > 0:
            self.db.execute(
                "update eliminatorias set id_campeonato=$1, id_partido=$2, nro_llave=$3 "
                "where id_eliminatoria=$4",
                eliminatoria.id_campeonato,
                eliminatoria.id_partido,
                eliminatoria.nro_llave,
                eliminatoria.id_eliminatoria,
            )
        else:
            new_id = self.db.execute(
                "insert into eliminatorias (id_campeonato, id_partido, nro_llave) "
                "values($1,$2,$3)",
                eliminatoria.id_campeonato,
                eliminatoria.id_partido,
                eliminatoria.nro_llave,
            )
            eliminatoria.id_eliminatoria = new_id or 0
        return eliminatoria.id_eliminatoria

    def delete(self, id_eliminatoria: int) -> bool:
        self.db.execute("delete from eliminatorias where id_eliminatoria = $1", id_eliminatoria)
        return True