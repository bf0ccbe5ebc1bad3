# userhex

User accounts and login, organised as ports and adapters.

The core of the package knows nothing about storage or transport.
Storage comes in through a port (`DBPort`), and requests come in through
handlers that take and return plain dataclasses. Either side can be replaced
without touching the core.

## Layers

| Module                | Contents                                                                  |
|-----------------------|---------------------------------------------------------------------------|
| `userhex.domain`      | `UserModel`, `Password`, `UserCredential`, `PasswordMismatchError`        |
| `userhex.application` | `DBPort` (the storage protocol) and `Application` (the user use cases)    |
| `userhex.db`          | `Adapter` (SQLite storage), `open_connection()`, `DuplicateEmailError`, `NotFoundError` |
| `userhex.handler`     | `UserHandler` and its request and response dataclasses                    |
| `userhex.auth`        | `Credential`, `AuthPort`, `AuthService`, `AuthHandler`, `LoginRequest`, `LoginResponse` |

## Installation

```
pip install userhex
```

The only runtime dependency is `bcrypt`. Storage uses the standard
library's `sqlite3`.

## Passwords

`Password.set(plaintext)` hashes the plaintext with bcrypt at cost 10 and
keeps both the plaintext and the hash. A plaintext longer than 72 bytes in
UTF-8 raises `ValueError`.

`UserCredential.compare(candidate, password_hash)` returns `True` when the
candidate matches the hash. A mismatch raises `PasswordMismatchError`; a
malformed hash raises `ValueError`.

```python
from userhex.domain import Password, UserCredential

password = "password"

stored = Password()
stored.set(password)

credential = UserCredential(email="alice@example.com", password=password)
credential.compare(password, stored.hash)   # True
```

`UserModel` holds `id`, `first_name`, `last_name`, `email`, `password`,
`version`, `activated` and `created_at`.

## User service

`Application` wraps a `DBPort` and offers:

- `register_user(user)` – returns `True` once stored;
- `update_user(user)` – returns `(id, new_version)`;
- `delete_user(user_id)` – returns `True`;
- `validate_user(credential)` – returns `(user_id, valid)`.

Errors from the port are passed on unchanged.

### SQLite adapter

`userhex.db.Adapter` implements `DBPort` over a `sqlite3` connection.
`open_connection()` opens the database file named by the `CONN_STR`
environment variable (an empty or unset value gives a private temporary
database) and creates the `users` table if it does not exist.

- `insert(user)` stores the user and fills in its `id`, `version` (starting
  at 1) and `created_at`. A second account with the same e-mail address
  raises `DuplicateEmailError`.
- `update(user)` uses optimistic locking: the row is changed only where both
  `id` and `version` match, and the version is then incremented. If nothing
  matches, `NotFoundError` is raised.
- `delete(user_id)` removes the row and returns `True`, whether or not a row
  existed.
- `validate_credential(credential)` looks the user up by e-mail
  (`NotFoundError` if absent) and checks the password with
  `UserCredential.compare`, so a wrong password raises
  `PasswordMismatchError`.

### Handler

`UserHandler` sits in front of `Application`:

| Method                | Request             | Response                        |
|-----------------------|---------------------|---------------------------------|
| `register_user`       | `RegisterRequest`   | `RegisterResponse(created)`     |
| `update_user`         | `UpdateRequest`     | `UpdateResponse(id, version)`   |
| `delete_user`         | `DeleteRequest`     | `DeleteResponse(deleted)`       |
| `validate_credential` | `ValidationRequest` | `ValidationResponse(user_id, valid)` |

`register_user` and `update_user` hash the request's password before it
reaches storage; their errors propagate. `validate_credential` never
raises: any failure gives `ValidationResponse(user_id=0, valid=False)`.

```python
from userhex.application import Application
from userhex.db import Adapter, open_connection
from userhex.handler import RegisterRequest, UserHandler, ValidationRequest

password = "password"
handler = UserHandler(Application(Adapter(open_connection())))
handler.register_user(
    RegisterRequest(firstname="Alice", lastname="Example",
                    email="alice@example.com", password=password)
)
handler.validate_credential(ValidationRequest(email="alice@example.com", password=password))
```

## Auth service

`AuthService.authenticate_user(credential)` passes a `Credential` to an
`AuthPort` and returns the token its `login` method gives back.
`AuthHandler.login(request)` turns a `LoginRequest` into a `LoginResponse`
carrying that token. Errors from the port propagate.

```python
from userhex.auth import AuthHandler, AuthService

handler = AuthHandler(AuthService(my_auth_port))
```

## What the package does not do

- It provides no network server and no command-line program; the handlers
  are plain Python objects for you to expose however you choose.
- It issues no tokens itself: `AuthPort` has no implementation in the
  package, so you supply one that validates credentials and returns a token.
- The only storage adapter is SQLite.

## Running the tests

```
pip install "userhex[test]"
pytest
```