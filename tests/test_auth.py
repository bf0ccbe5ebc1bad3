import pytest

from userhex.auth import AuthHandler, AuthService, Credential, LoginRequest


class FakePort:
    def __init__(self, fail=None):
        self.seen = []
        self.fail = fail

    def login(self, credential):
        self.seen.append(credential)
        if self.fail is not None:
            raise self.fail
        return "token"


def test_service_returns_port_token():
    port = FakePort()
    cred = Credential("ann@example.com", "password")
    assert AuthService(port).authenticate_user(cred) == "token"
    assert port.seen == [cred]


def test_service_propagates_error():
    with pytest.raises(PermissionError):
        AuthService(FakePort(fail=PermissionError("denied"))).authenticate_user(Credential())


def test_handler_login_builds_credential():
    port = FakePort()
    handler = AuthHandler(AuthService(port))
    resp = handler.login(LoginRequest("ann@example.com", "password"))
    assert resp.token == "token"
    assert port.seen == [Credential("ann@example.com", "password")]


def test_handler_login_propagates_error():
    handler = AuthHandler(AuthService(FakePort(fail=PermissionError("denied"))))
    with pytest.raises(PermissionError, match="denied"):
        handler.login(LoginRequest("ann@example.com", "secret"))