"""Request handlers exposing the user application service."""

from __future__ import annotations

from dataclasses import dataclass

from userhex.application import Application
from userhex.domain import UserCredential, UserModel


@dataclass
class RegisterRequest:
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    password: str = ""


@dataclass
class RegisterResponse:
    created: bool = False


@dataclass
class UpdateRequest:
    id: int = 0
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    password: str = ""
    version: int = 0


@dataclass
class UpdateResponse:
    id: int = 0
    version: int = 0


@dataclass
class DeleteRequest:
    id: int = 0


@dataclass
class DeleteResponse:
    deleted: bool = False


@dataclass
class ValidationRequest:
    email: str = ""
    password: str = ""


@dataclass
class ValidationResponse:
    user_id: int = 0
    valid: bool = False


class UserHandler:
    """Translates user requests into application calls."""

    def __init__(self, service: Application) -> None:
        self._service = service

    def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """Hash the password and register a new user."""
        user = UserModel(
            first_name=request.firstname, last_name=request.lastname, email=request.email
        )
        user.password.set(request.password)
        return RegisterResponse(created=self._service.register_user(user))

    def update_user(self, request: UpdateRequest) -> UpdateResponse:
        """Hash the password and update an existing user."""
        user = UserModel(
            id=request.id,
            first_name=request.firstname,
            last_name=request.lastname,
            email=request.email,
            version=request.version,
        )
        user.password.set(request.password)
        user_id, version = self._service.update_user(user)
        return UpdateResponse(id=user_id, version=version)

    def delete_user(self, request: DeleteRequest) -> DeleteResponse:
        """Delete a user by id."""
        return DeleteResponse(deleted=self._service.delete_user(request.id))

    def validate_credential(self, request: ValidationRequest) -> ValidationResponse:
        """Check a credential; any failure yields an invalid response."""
        credential = UserCredential(email=request.email, password=request.password)
        try:
            user_id, valid = self._service.validate_user(credential)
        except Exception:
            return ValidationResponse(user_id=0, valid=False)
        return ValidationResponse(user_id=user_id, valid=valid)