"""People registered in the application."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from deprimera.database import Database
from deprimera.models import Persona

_COLUMNS = (
    "id_persona, nombre, apellido, domicilio, edad, localidad, "
    "id_pais, id_provincia, id_tipo_doc, nro_doc"
)


def _persona(row: Optional[Sequence[Any]]) -> Persona:
    if row is None:
        return Persona()
    persona = Persona(*row)
    persona.apellido = persona.apellido or ""
    return persona


class PersonasDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Persona]:
        return [_persona(row) for row in self.db.query(f"select {_COLUMNS} from personas")]

    def get(self, id_persona: int) -> Persona:
        """Return the person, or an empty Persona when there is none."""
        return _persona(
            self.db.query_one(f"select {_COLUMNS} from personas where id_persona = $1", id_persona)
        )

    def get_from_user(self, id_user: str) -> Persona:
        """Return the person linked to a user, or an empty Persona."""
        return _persona(
            self.db.query_one(f"select {_COLUMNS} from personas where id_user = $1", id_user)
        )

    def save(self, persona: Persona) -> int:
        """Update an existing person or insert a new one; return its id."""
        values = (
            persona.nombre,
            persona.apellido,
            persona.domicilio,
            persona.edad,
            persona.localidad,
            persona.id_pais,
            persona.id_provincia,
            persona.id_tipo_doc,
            persona.nro_doc,
        )
        if persona.id_persona > 0:
            self.db.execute(
                "update personas set nombre=$1, apellido=$2, domicilio=$3, edad=$4, "
                "localidad=$5, id_pais=$6, id_provincia=$7, id_tipo_doc=$8, nro_doc=$9 "
                "where id_persona = $10",
                *values,
                persona.id_persona,
            )
        else:
            self.db.execute(
                "insert into personas (nombre, apellido, domicilio, edad, localidad, "
                "id_pais, id_provincia, id_tipo_doc, nro_doc) "
                "values($1,$2,$3,$4,$5,$6,$7,$8,$9)",
                *values,
            )
            row = self.db.query_one(
                "select id_persona from personas order by id_persona desc limit 1"
            )
            persona.id_persona = 0 if row is None else row[0]
        return persona.id_persona

    def delete(self, id_persona: int) -> bool:
        self.db.execute("delete from personas where id_persona = $1", id_persona)
        return True