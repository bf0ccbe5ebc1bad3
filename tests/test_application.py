import pytest

from userhex.application import Application
from userhex.domain import UserCredential, UserModel


class FakeDB:
    def __init__(self, fail=None):
        self.calls = []
        self.fail = fail

    def _record(self, name, arg):
        self.calls.append((name, arg))
        if self.fail is not None:
            raise self.fail

    def insert(self, user):
        self._record("insert", user)
        user.id = 7
        return True

    def update(self, user):
        self._record("update", user)
        return user.id, user.version + 1

    def delete(self, user_id):
        self._record("delete", user_id)
        return True

    def validate_credential(self, credential):
        self._record("validate", credential)
        return 42, True


def test_register_user_delegates():
    db = FakeDB()
    user = UserModel(email="ann@example.com")
    assert Application(db).register_user(user) is True
    assert db.calls == [("insert", user)]
    assert user.id == 7


def test_update_user_returns_id_and_version():
    db = FakeDB()
    user = UserModel(id=3, version=4)
    assert Application(db).update_user(user) == (3, 5)


def test_delete_user_passes_id():
    db = FakeDB()
    assert Application(db).delete_user(9) is True
    assert db.calls == [("delete", 9)]


def test_validate_user_returns_result():
    db = FakeDB()
    cred = UserCredential("ann@example.com", "password")
    assert Application(db).validate_user(cred) == (42, True)
    assert db.calls[0][1] is cred


@pytest.mark.parametrize(
    "call",
    [
        lambda app: app.register_user(UserModel()),
        lambda app: app.update_user(UserModel()),
        lambda app: app.delete_user(1),
        lambda app: app.validate_user(UserCredential()),
    ],
)
def test_errors_propagate(call):
    app = Application(FakeDB(fail=RuntimeError("boom")))
    with pytest.raises(RuntimeError, match="boom"):
        call(app)