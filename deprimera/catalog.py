"""Reference data: user groups, countries and provinces."""

from __future__ import annotations

from deprimera.database import Database
from deprimera.models import AppGrupo, Pais, Provincia


class AppGruposDao:
    """User groups and the group a user belongs to."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[AppGrupo]:
        rows = self.db.query("select idgrupo, descripcion from app_grupos")
        return [AppGrupo(idgrupo=idgrupo, descripcion=descripcion) for idgrupo, descripcion in rows]

    def get_user_app_grupo(self, id_user: str) -> AppGrupo:
        """Return the group of the person linked to a user, or an empty AppGrupo."""
        rows = self.db.query(
            "select p.idgrupo, ag.descripcion "
            " from personas p "
            " inner join app_grupos ag on p.idgrupo = ag.idgrupo "
            " where p.id_user = $1",
            id_user,
        )
        grupo = AppGrupo()
        for idgrupo, descripcion in rows:
            grupo = AppGrupo(idgrupo=idgrupo, descripcion=descripcion)
        return grupo


class PaisesDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Pais]:
        rows = self.db.query("select id_pais, nombre from app_paises")
        return [Pais(*row) for row in rows]

    def get(self, id_pais: int) -> Pais:
        """Return the country, or an empty Pais when there is none."""
        row = self.db.query_one(
            "select id_pais, nombre from app_paises where id_pais = $1", id_pais
        )
        return Pais() if row is None else Pais(*row)


class ProvinciasDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Provincia]:
        rows = self.db.query("select id_provincia, id_pais, nombre from app_provincias")
        return [Provincia(*row) for row in rows]

    def get(self, id_pais: int, id_provincia: int) -> Provincia:
        """Return the province of a country, or an empty Provincia when there is none."""
        row = self.db.query_one(
            "select id_provincia, id_pais, nombre from app_provincias "
            "where id_pais = $1 and id_provincia = $2",
            id_pais,
            id_provincia,
        )
        return Provincia() if row is None else Provincia(*row)