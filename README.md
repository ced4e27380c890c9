# gobangserver

gobangserver is a small account server for a gobang (five-in-a-row) game.
Players sign up over HTTP. Accounts are kept in a SQLite database. It needs
nothing beyond the Python standard library.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Running the server

```
gobangserver
```

Options:

- `--host`: the address to listen on. The default is `0.0.0.0`, which means every interface.
- `--port`: the port to listen on. The default is `3221`.
- `--db`: the path of the SQLite user database. The default is `data/users.db`
  in the directory of the running program.

If the database file and its directory do not exist yet, the server creates
them, along with the `users` table. It then logs the address where the service
can be reached and handles requests until it is interrupted (Ctrl+C). It exits
with status 1 if the database cannot be opened or the port cannot be bound.

## HTTP interface

| Method | Path        | Body                                 | Reply                              |
|--------|-------------|--------------------------------------|------------------------------------|
| GET    | `/`         |                                      | `{"info":"Hello QGobang Service"}` |
| POST   | `/register` | `{"name": "...", "password": "..."}` | `{"code": n}`                      |
| POST   | `/login`    | `{"name": "...", "password": "..."}` | `{"code": n}`, same as `/register` |

`/login` is routed to the same handler as `/register`, so a request to it
registers the user. `code` is one of these values:

- `1`: the user was created
- `0`: a user with that name already exists
- `-1`: the database failed

A `name` or `password` that is missing or is not a string counts as the empty
string. A body that is not a JSON object gets an empty `400` reply. An unknown
method or path gets an empty `404` reply. The root reply is sent as
`text/plain`, and the `code` replies are sent as `application/json`.

## Using it as a library

```python
from gobangserver.users import UserDatabase
from gobangserver.service import HttpService

password = "password"

with UserDatabase("users.db") as db:
    db.add_user("alice", password)       # True if created, False if the name is taken
    info = db.get_user("alice")          # UserInfo, or None if there is no such user
    print(info.uid, info.name, info.level)

    service = HttpService(db)
    response = service.dispatch("POST", "/register", b'{"name": "bob", "password": "password"}')
    print(response.status, response.json())

    # Checks credentials directly; no HTTP route leads here.
    result = service.login(b'{"name": "alice", "password": "password"}')
    print(result.json())                 # {"code": 1, "uid": ..., "name": "alice", "level": 1}
```

- `gobangserver.users`:
  - `UserInfo` has the fields `uid`, `name`, `password` and `level`. New users
    start at level 1.
  - `UserDatabase(path)` provides `open()`, `close()`, `user_exists(name)`,
    `add_user(name, password)` and `get_user(name)`. Used as a context manager,
    it opens the database on entry and closes it on exit.
  - Using a database that is not open raises `DatabaseError`. `add_user` also
    raises it when the insert fails.
  - `default_db_path()` returns the default database location.
- `gobangserver.service`:
  - `HttpService(database)` has `dispatch(method, path, body)`, which returns a
    `Response` with `status`, `body` and `content_type`.
  - `Response.json()` decodes the body.
  - `listen(host, port)` binds a socket and raises `OSError` if that fails.
  - `serve_forever()` handles requests until `stop()` is called.
- `gobangserver.server`:
  - `main(argv)` is the command shown above.
  - `build_parser()` returns its argument parser.

## What it does not do

- It has no game play. There is no board, no move handling, no win check and no
  matchmaking.
- It has no client or user interface.
- The `/login` route does not log users in. It registers them, as described
  above. The credential check exists only as `HttpService.login`, which is
  called from Python.
- Passwords are stored as given, in plain text. There are no sessions or tokens.