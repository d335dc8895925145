# deprimera

Data access objects for an amateur football league manager: leagues,
championships, people, players, referees, assistants, matches, knockout ties,
scorers, standings, notifications, comments and user accounts.

The package works with any DB-API 2.0 driver and has no dependencies of its
own. You give it a function that opens a connection and the placeholder style
your driver expects; every DAO takes the resulting `Database`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Connecting

```python
import sqlite3

from deprimera.database import Database, QueryDao

db = Database(lambda: sqlite3.connect("league.db"), sqlite3.paramstyle)
```

`Database(connect, paramstyle="qmark")` calls `connect()` for every
statement, commits on success, rolls back on error and always closes the
connection. Statements are written with `$1`, `$2`, ... placeholders and
translated to the driver's style:

| paramstyle | placeholders sent to the driver |
|------------|---------------------------------|
| `qmark`    | `?`                             |
| `format`   | `%s`                            |
| `numeric`  | `:1`, `:2`, ...                 |
| `dollar`   | `$1`, `$2`, ... unchanged       |

Any other style raises `ValueError`. The `Database` methods are:

- `execute(sql, *args)` – runs a statement and returns the driver's
  `lastrowid`, or `None` when it has none.
- `query(sql, *args)` – returns every row as a list of tuples.
- `query_one(sql, *args)` – returns the first row, or `None`.
- `connection()` – a context manager around one connection.

Failed connections and statements raise `deprimera.database.DatabaseError`.

## Usage

```python
from deprimera.accounts import AuthenticationDao
from deprimera.campeonatos import CampeonatosDao
from deprimera.database import QueryDao
from deprimera.partido_reports import PartidoReportsDao

sizes = QueryDao(db).configuraciones_size()
print(sizes.ligas, sizes.campeonatos, sizes.equipos, sizes.jugadores)

for campeonato in CampeonatosDao(db).get_for_user("someone", 3):
    print(campeonato.descripcion)

for fila in PartidoReportsDao(db).get_table_position(1):
    print(fila.nombre, fila.puntos, fila.partido_ganado)

user = AuthenticationDao(db).login("someone", "password")
if not user.user_id:
    print("unknown user or wrong password")
```

Lookups by id (`get`, `login`, `get_from_user`, ...) return an empty model
(ids of `0`, empty strings) when nothing matches rather than raising.
`save` methods update the row when the model's id is greater than zero and
insert it otherwise, and return the id.

User groups used by `CampeonatosDao.get_for_user` are `1` administrator
(every championship), `2` delegate, `3` player and `4` referee; any other
value raises `ValueError`.

## Modules

- `deprimera.models` – dataclasses for the tables (`Liga`, `Campeonato`,
  `Equipo`, `Jugador`, `Partido`, `Persona`, `Zona`, ...) and for query
  results (`EquipoTablePos`, `JugadorPlantel`, `PartidoFromDate`,
  `PartidoResult`, ...). `table_name(model)` returns a model's table and
  raises `TypeError` for query-result models.
- `deprimera.database` – `Database`, `DatabaseError`, `QueryDao` and
  `ConfiguracionSize`.
- `deprimera.accounts` – `AuthenticationDao` (login, register,
  reset_password), `Comentario` and `ComentariosDao`, `NotificacionesDao`.
- `deprimera.personnel` – `ArbitrosDao`, `AsistentesDao`, `JugadoresDao`,
  `EquiposJugadoresDao`.
- `deprimera.catalog` – `AppGruposDao`, `PaisesDao`, `ProvinciasDao`.
- `deprimera.competitions` – `LigasDao`, `EliminatoriasDao`.
- `deprimera.personas` – `PersonasDao`.
- `deprimera.campeonatos` – `CampeonatosDao`, `CampeonatoGoleador` and
  `format_timestamp`. `save_goleadores` takes the scorers of each side as
  space-separated shirt numbers; goals that cannot be recorded are logged
  and skipped.
- `deprimera.partidos` – `PartidosDao`, including `save_result`.
- `deprimera.partido_reports` – `PartidoReportsDao` and `PartidoDetalle`:
  matches by team, day or championship with scorers and cards, standings,
  and a team's match history.

## SQL dialect

Most statements are plain SQL. A few are not portable: the detailed match
reports in `partido_reports` use `string_agg`, and
`CampeonatosDao.save_goleadores` uses `on duplicate key update`. Use a
database that accepts them for those calls.

## What this package does not do

- It does not create the database schema or migrate it; the tables must
  already exist.
- It has no command-line program, no configuration parsing and no HTTP
  server; it is a library to be called from your own application.
- Teams cannot be created, edited or enrolled in championships; they appear
  only through reports, standings and the `Equipo` model.
- It does not generate fixtures or update standings after a match is
  finished.