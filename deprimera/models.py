"""Row models for the league database tables and the shapes read from queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Union


@dataclass
class AppGrupo:
    """A user group (administrator, delegate, player, referee)."""

    TABLE: ClassVar[str] = "app_grupos"

    idgrupo: int = 0
    descripcion: str = ""


@dataclass
class AppGrupoPermiso:
    TABLE: ClassVar[str] = "app_grupos_permisos"

    id_grupo: int = 0
    id_permiso: Optional[int] = None


@dataclass
class AppPermiso:
    TABLE: ClassVar[str] = "app_permisos"

    id_permisos: int = 0
    descripcion: Optional[str] = None


@dataclass
class AppSession:
    TABLE: ClassVar[str] = "app_sessions"

    user_id: str = ""
    token: Optional[str] = None
    expire_date: Optional[datetime] = None


@dataclass
class AppUserGrupo:
    TABLE: ClassVar[str] = "app_users_grupos"

    user_id: str = ""
    id_grupo: Optional[int] = None


@dataclass
class Arbitro:
    TABLE: ClassVar[str] = "arbitros"

    id_arbitro: int = 0
    id_persona: int = 0
    id_campeonato: int = 0


@dataclass
class Asistente:
    TABLE: ClassVar[str] = "asistentes"

    id_asistente: int = 0
    id_persona: int = 0
    id_campeonato: int = 0


@dataclass
class Campeonato:
    TABLE: ClassVar[str] = "campeonatos"

    id_campeonato: int = 0
    id_liga: int = 0
    id_modelo: Optional[str] = None
    descripcion: str = ""
    fecha_inicio: Optional[datetime] = None
    fecha_fin: Optional[datetime] = None
    gen_fixture: bool = False
    gen_fixture_finish: bool = False


@dataclass
class Eliminatoria:
    TABLE: ClassVar[str] = "eliminatorias"

    id_eliminatoria: int = 0
    id_campeonato: int = 0
    id_partido: int = 0
    nro_llave: Optional[int] = None


@dataclass
class Equipo:
    TABLE: ClassVar[str] = "equipos"

    id_equipo: int = 0
    nombre: str = ""
    habilitado: bool = False
    foto: bytes = b""
    nro_equipo: int = 0
    id_campeonato: int = 0


@dataclass
class EquipoTablePos:
    """A team's line in a championship standings table."""

    id_equipo: int = 0
    id_campeonato: int = 0
    nombre: str = ""
    nro_equipo: str = ""
    puntos: int = 0
    partido_ganado: int = 0
    partido_empatado: int = 0
    partido_perdido: int = 0


@dataclass
class EquipoJugador:
    TABLE: ClassVar[str] = "equipos_jugadores"

    id_equipos: int = 0
    id_jugadores: int = 0


@dataclass
class Jugador:
    TABLE: ClassVar[str] = "jugadores"

    id_jugador: int = 0
    id_persona: int = 0
    id_equipo: int = 0
    nro_camiseta: int = 0


@dataclass
class JugadorPlantel:
    """A player as listed in a team's squad."""

    id_jugador: int = 0
    nombre: str = ""
    apellido: str = ""
    nro_camiseta: int = 0


@dataclass
class Liga:
    TABLE: ClassVar[str] = "ligas"

    id_liga: int = 0
    nombre: str = ""
    domicilio: str = ""
    cuit: Optional[str] = None
    mail_contacto: Optional[str] = None
    nombre_contacto: Optional[str] = None
    telefono: Optional[str] = None
    telefono_contacto: Optional[str] = None


@dataclass
class Notificacion:
    TABLE: ClassVar[str] = "notificaciones"

    id_notificacion: int = 0
    id_grupo: int = 0
    titulo: str = ""
    texto: str = ""


@dataclass
class Pais:
    TABLE: ClassVar[str] = "app_paises"

    id_pais: int = 0
    nombre: str = ""


@dataclass
class Partido:
    TABLE: ClassVar[str] = "partidos"

    id_partidos: int = 0
    id_liga: int = 0
    id_campeonato: int = 0
    id_equipo_local: int = 0
    id_equipo_visitante: int = 0
    id_arbitro: Optional[int] = None
    id_asistente: Optional[int] = None
    fecha_encuentro: Optional[datetime] = None
    resultado_local: int = 0
    resultado_visitante: int = 0
    suspendido: str = ""
    motivo_suspencion: Optional[str] = None
    observacion: Optional[str] = None
    iniciado: bool = False
    finalizado: bool = False


@dataclass
class PartidoResult:
    """The result of a match as reported after it is played."""

    id_partidos: int = 0
    resultado_local: int = 0
    goleador_local: int = 0
    sancion_amarillas_local: str = ""
    sancion_rojas_local: str = ""
    resultado_visitante: int = 0
    goleador_visitante: int = 0
    sancion_amarillas_visitante: str = ""
    sancion_rojas_visitante: str = ""
    iniciado: bool = False
    finalizado: bool = False
    suspendido: bool = False
    motivo: str = ""


@dataclass
class PartidoFromDate:
    """A match joined with the names of its league, championship and teams."""

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


@dataclass
class Persona:
    TABLE: ClassVar[str] = "personas"

    id_persona: int = 0
    nombre: str = ""
    apellido: str = ""
    domicilio: Optional[str] = None
    edad: Optional[int] = None
    localidad: str = ""
    id_pais: int = 0
    id_provincia: int = 0
    id_tipo_doc: int = 0
    nro_doc: int = 0


@dataclass
class Provincia:
    TABLE: ClassVar[str] = "app_provincias"

    id_provincia: int = 0
    id_pais: int = 0
    nombre: str = ""


@dataclass
class SancionEquipo:
    TABLE: ClassVar[str] = "sanciones_equipos"

    id_sanciones: int = 0
    id_equipo: int = 0
    id_campeonato: int = 0


@dataclass
class Sancion:
    TABLE: ClassVar[str] = "sanciones"

    id_sanciones: int = 0
    descripcion: Optional[str] = None
    observaciones: Optional[str] = None


@dataclass
class SancionJugador:
    TABLE: ClassVar[str] = "sanciones_jugadores"

    id_sanciones_jugadores: int = 0
    id_sanciones: int = 0
    id_jugador: int = 0
    id_campeonato: int = 0


@dataclass
class SancionJugadorFromCampeonato:
    """Card counts of a player within a championship."""

    nombre: str = ""
    apellido: str = ""
    e_nombre: str = ""
    c_rojas: int = 0
    c_amarillas: int = 0
    c_azules: int = 0


@dataclass
class User:
    TABLE: ClassVar[str] = "users"

    user_id: str = ""
    password: str = ""
    habilitado: bool = False
    telefono: Optional[str] = None


@dataclass
class ZonaEquipo:
    TABLE: ClassVar[str] = "zonas_equipos"

    id_equipo: int = 0
    id_zona: int = 0


@dataclass
class Zona:
    TABLE: ClassVar[str] = "zonas"

    id_zona: int = 0
    id_campeonato: int = 0
    nombre: Optional[str] = None


def table_name(model: Union[type, object]) -> str:
    """Return the table a model class or instance is stored in.

    Raises TypeError for models that are query results with no table of their own.
    """
    cls = model if isinstance(model, type) else type(model)
    name = getattr(cls, "TABLE", None)
    if not isinstance(name, str):
        raise TypeError(f"{cls.__name__} is not stored in a table")
    return name