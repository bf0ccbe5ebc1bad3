"""Authentication service: exchanges credentials for a token via an AuthPort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Credential:
    """An e-mail address and password presented for login."""

    email: str = ""
    password: str = ""


class AuthPort(Protocol):
    """Backend that turns a credential into a token."""

    def login(self, credential: Credential) -> str:
        """Return a token for ``credential`` or raise on failure."""


class AuthService:
    """Authenticates users through an AuthPort."""

    def __init__(self, auth: AuthPort) -> None:
        self._auth = auth

    def authenticate_user(self, credential: Credential) -> str:
        """Return the token issued for ``credential``."""
        return self._auth.login(credential)


@dataclass
class LoginRequest:
    email: str = ""
    password: str = ""


@dataclass
class LoginResponse:
    token: str = ""


class AuthHandler:
    """Translates login requests into AuthService calls."""

    def __init__(self, service: AuthService) -> None:
        self._service = service

    def login(self, request: LoginRequest) -> LoginResponse:
        """Authenticate the request's credential and return its token."""
        credential = Credential(email=request.email, password=request.password)
        return LoginResponse(token=self._service.authenticate_user(credential))