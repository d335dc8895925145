"""Users, comments and notifications."""

from __future__ import annotations

from dataclasses import dataclass

from deprimera.database import Database
from deprimera.models import Notificacion, User


class AuthenticationDao:
    """Login, registration and password changes of application users."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def login(self, user: str, password: str) -> User:
        """Return the matching user, or a User with an empty user_id when none matches."""
        row = self.db.query_one(
            "select id_user, clave, habilitado, telefono from app_users "
            "where id_user = $1 and clave = $2;",
            user,
            password,
        )
        if row is None:
            return User()
        user_id, clave, habilitado, telefono = row
        return User(user_id=user_id, password=clave, habilitado=bool(habilitado), telefono=telefono)

    def register(self, user: User) -> str:
        """Store a new user and return its id."""
        self.db.execute(
            "insert into app_users (id_user, clave, habilitado, telefono) values($1,$2,$3,$4)",
            user.user_id,
            user.password,
            user.habilitado,
            user.telefono,
        )
        return user.user_id

    def reset_password(self, id_user: str, old_password: str, new_password: str) -> bool:
        """Replace the password of a user whose current password matches."""
        self.db.execute(
            "update app_users set clave =$1 where id_user =$2 and clave=$3",
            new_password,
            id_user,
            old_password,
        )
        return True


@dataclass
class Comentario:
    """Feedback left by a user."""

    id_comentario: int = 0
    mail: str = ""
    puntaje: int = 0
    comentario: str = ""


class ComentariosDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, comentario: Comentario) -> int:
        """Update an existing comment or insert a new one; return its id."""
        if comentario.id_comentario > 0:
            self.db.execute(
                "update comentarios set mail=$1, puntaje=$2, comentario=$3 "
                "where id_comentario = $4",
                comentario.mail,
                comentario.puntaje,
                comentario.comentario,
                comentario.id_comentario,
            )
        else:
            new_id = self.db.execute(
                "insert into comentarios (mail, puntaje, comentario) values($1,$2,$3)",
                comentario.mail,
                comentario.puntaje,
                comentario.comentario,
            )
            comentario.id_comentario = new_id or 0
        return comentario.id_comentario


class NotificacionesDao:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_all(self) -> list[Notificacion]:
        rows = self.db.query(
            "select id_notificacion, id_grupo, titulo, texto from notificaciones"
        )
        return [
            Notificacion(id_notificacion=id_, id_grupo=grupo, titulo=titulo, texto=texto)
            for id_, grupo, titulo, texto in rows
        ]

    def save(self, notificacion: Notificacion) -> int:
        """Update an existing notification or insert a new one; return its id."""
        if notificacion.id_notificacion > 0:
            self.db.execute(
                "update notificaciones set titulo=$1, texto=$2, id_grupo=$3 "
                "where id_notificacion = $4",
                notificacion.titulo,
                notificacion.texto,
                notificacion.id_grupo,
                notificacion.id_notificacion,
            )
        else:
            new_id = self.db.execute(
                "insert into notificaciones (titulo, texto, id_grupo) values($1,$2,$3)",
                notificacion.titulo,
                notificacion.texto,
                notificacion.id_grupo,
            )
            notificacion.id_notificacion = new_id or 0
        return notificacion.id_notificacion

    def delete(self, id_notificacion: int) -> bool:
        self.db.execute("delete from notificaciones where id_notificacion = $1", id_notificacion)
        return True