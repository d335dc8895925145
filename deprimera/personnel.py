"""Referees, assistants, players and team rosters."""

from __future__ import annotations

from deprimera.database import Database
from deprimera.models import Arbitro, Asistente, EquipoJugador, Jugador


class ArbitrosDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Arbitro]:
        rows = self.db.query("select id_arbitro, id_persona, id_campeonato from arbitros")
        return [Arbitro(*row) for row in rows]

    def get(self, id_arbitro: int) -> Arbitro:
        """Return the referee, or an empty Arbitro when there is none."""
        row = self.db.query_one(
            "select id_arbitro, id_persona, id_campeonato from arbitros where id_arbitro = $1",
            id_arbitro,
        )
        return Arbitro() if row is None else Arbitro(*row)

    def save(self, arbitro: Arbitro) -> int:
        """Replace an existing referee row or insert a new one; return its id."""
        if arbitro.id_arbitro > 0:
            self.delete(arbitro.id_arbitro, arbitro.id_persona, arbitro.id_campeonato)
            self.db.execute(
                "insert into arbitros (id_arbitro, id_persona, id_campeonato) values($1,$2,$3)",
                arbitro.id_arbitro,
                arbitro.id_persona,
                arbitro.id_campeonato,
            )
        else:
            new_id = self.db.execute(
                "insert into arbitros (id_persona, id_campeonato) values($1,$2)",
                arbitro.id_persona,
                arbitro.id_campeonato,
            )
            arbitro.id_arbitro = new_id or 0
        return arbitro.id_arbitro

    def delete(self, id_arbitro: int, id_persona: int, id_campeonato: int) -> bool:
        self.db.execute(
            "delete from arbitros where id_arbitro = $1 and id_persona = $2 and id_campeonato = $3",
            id_arbitro,
            id_persona,
            id_campeonato,
        )
        return True


class AsistentesDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Asistente]:
        rows = self.db.query("select id_asistente, id_persona, id_campeonato from asistentes")
        return [Asistente(*row) for row in rows]

    def save(self, asistente: Asistente) -> int:
        """Replace an existing assistant row or insert a new one; return its id."""
        if asistente.id_asistente > 0:
            self.delete(asistente.id_asistente, asistente.id_persona, asistente.id_campeonato)
            self.db.execute(
                "insert into asistentes (id_asistente, id_persona, id_campeonato) values($1,$2,$3)",
                asistente.id_asistente,
                asistente.id_persona,
                asistente.id_campeonato,
            )
        else:
            new_id = self.db.execute(
                "insert into asistentes (id_persona, id_campeonato) values($1,$2)",
                asistente.id_persona,
                asistente.id_campeonato,
            )
            asistente.id_asistente = new_id or 0
        return asistente.id_asistente

    def delete(self, id_asistente: int, id_persona: int, id_campeonato: int) -> bool:
        self.db.execute(
            "delete from asistentes where id_asistente = $1 and id_persona = $2 "
            "and id_campeonato = $3",
            id_asistente,
            id_persona,
            id_campeonato,
        )
        return True


class JugadoresDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Jugador]:
        rows = self.db.query(
            "select id_jugadores, id_persona, id_equipo, nro_camiseta from jugadores"
        )
        return [Jugador(*row) for row in rows]

    def save(self, jugador: Jugador) -> int:
        """Replace the player's row in its team and return the new row's id."""
        self.delete(jugador.id_persona, jugador.id_equipo)
        new_id = self.db.execute(
            "insert into jugadores (id_persona, id_equipo, nro_camiseta) values($1,$2,$3)",
            jugador.id_persona,
            jugador.id_equipo,
            jugador.nro_camiseta,
        )
        if new_id is not None:
            jugador.id_jugador = new_id
        return jugador.id_jugador

    def delete(self, id_persona: int, id_equipo: int) -> bool:
        self.db.execute(
            "delete from jugadores where id_persona = $1 and id_equipo = $2",
            id_persona,
            id_equipo,
        )
        return True


class EquiposJugadoresDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, equipo_jugador: EquipoJugador) -> int:
        """Link a player to a team, replacing any existing link; return the team id."""
        self.delete(equipo_jugador.id_equipos, equipo_jugador.id_jugadores)
        self.db.execute(
            "insert into equipos_jugadores (id_equipos, id_jugadores) values($1,$2)",
            equipo_jugador.id_equipos,
            equipo_jugador.id_jugadores,
        )
        return equipo_jugador.id_equipos

    def delete(self, id_equipos: int, id_jugadores: int) -> bool:
        self.db.execute(
            "delete from equipos_jugadores where id_equipos = $1 and id_jugadores = $2",
            id_equipos,
            id_jugadores,
        )
        return True