"""Connection handling, placeholder translation and the configuration summary query."""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")
_PARAMSTYLES = frozenset({"qmark", "format", "numeric", "dollar"})


class DatabaseError(Exception):
    """Raised when a statement cannot be prepared or the database rejects it."""


class Database:
    """Runs statements written with ``$1``-style placeholders on a DB-API driver.

    ``connect`` is called with no arguments and returns a fresh DB-API
    connection; every statement runs on its own connection, which is committed
    and closed afterwards. ``paramstyle`` names the driver's placeholder style:
    ``qmark`` (``?``), ``format`` (``%s``), ``numeric`` (``:1``) or ``dollar``
    (``$1``, passed through unchanged).
    """

    def __init__(self, connect: Callable[[], Any], paramstyle: str = "qmark") -> None:
        if paramstyle not in _PARAMSTYLES:
            raise ValueError(f"unsupported paramstyle: {paramstyle!r}")
        self._connect = connect
        self.paramstyle = paramstyle

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """Open a connection, commit it on success, roll back on error, always close it."""
        try:
            conn = self._connect()
        except Exception as exc:
            logger.error("cannot connect: %s", exc)
            raise DatabaseError(f"cannot connect: {exc}") from exc
        try:
            yield conn
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _prepare(self, sql: str, args: Sequence[Any]) -> tuple[str, tuple[Any, ...]]:
        if self.paramstyle == "dollar":
            return sql, tuple(args)
        if self.paramstyle == "numeric":
            return _PLACEHOLDER.sub(r":\1", sql), tuple(args)

        if self.paramstyle == "format":
            sql = sql.replace("%", "%%")
            marker = "%s"
        else:
            marker = "?"
        params = []
        for number in _PLACEHOLDER.findall(sql):
            index = int(number) - 1
            if not 0 <= index < len(args):
                raise DatabaseError(f"no argument for placeholder ${number}")
            params.append(args[index])
        return _PLACEHOLDER.sub(marker, sql), tuple(params)

    def _run(self, sql: str, args: Sequence[Any], fetch: Callable[[Any], Any]) -> Any:
        statement, params = self._prepare(sql, args)
        try:
            with self.connection() as conn:
                cursor = conn.cursor()
                try:
                    cursor.execute(statement, params)
                    return fetch(cursor)
                finally:
                    cursor.close()
        except DatabaseError:
            raise
        except Exception as exc:
            logger.error("statement failed: %s: %s", statement, exc)
            raise DatabaseError(str(exc)) from exc

    def execute(self, sql: str, *args: Any) -> Optional[int]:
        """Run a statement and return the id of the last inserted row, if the driver has one."""

        def last_row_id(cursor: Any) -> Optional[int]:
            row_id = getattr(cursor, "lastrowid", None)
            return row_id if isinstance(row_id, int) and row_id >= 0 else None

        return self._run(sql, args, last_row_id)

    def query(self, sql: str, *args: Any) -> list[tuple[Any, ...]]:
        """Run a query and return all of its rows."""
        return self._run(sql, args, lambda cursor: [tuple(row) for row in cursor.fetchall()])

    def query_one(self, sql: str, *args: Any) -> Optional[tuple[Any, ...]]:
        """Run a query and return its first row, or None when there is none."""

        def first(cursor: Any) -> Optional[tuple[Any, ...]]:
            row = cursor.fetchone()
            return None if row is None else tuple(row)

        return self._run(sql, args, first)


@dataclass
class ConfiguracionSize:
    """How many rows each configurable table holds."""

    ligas: int = 0
    campeonatos: int = 0
    equipos: int = 0
    arbitros: int = 0
    asistentes: int = 0
    jugadores: int = 0


class QueryDao:
    """Summary queries over the configuration tables."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def configuraciones_size(self) -> ConfiguracionSize:
        """Count the leagues, championships, teams, referees, assistants and players."""
        row = self.db.query_one(
            "select "
            "(select count(*) from ligas) as ligas, "
            "(select count(*) from campeonatos) as campeonatos, "
            "(select count(*) from equipos) as equipos, "
            "(select count(*) from arbitros) as arbitros, "
            "(select count(*) from asistentes) as asistentes, "
            "(select count(*) from jugadores) as jugadores "
            ";"
        )
        if row is None:
            return ConfiguracionSize()
        return ConfiguracionSize(*(int(value) for value in row))