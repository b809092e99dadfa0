from __future__ import annotations

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, BackendError, RegistrationError, ValidationError
from .model import AuthSession
from .repository import AuthGateway


class AuthService:
    """Use case: login / register / logout against the external provider.

    Provider errors are not classified: each operation fails with one generic message.
    """

    LOGIN_FAILED = "Login failed"
    REGISTRATION_FAILED = "Registration failed"

    def __init__(self, gateway: AuthGateway):
        self._gateway = gateway

    def login(self, email: str, password: str) -> AuthSession:
        try:
            email = require_non_empty(email, self.LOGIN_FAILED)
            require_non_empty(password, self.LOGIN_FAILED)
            return self._gateway.sign_in_with_password(email=email, password=password)
        except (ValidationError, BackendError) as e:
            raise AuthenticationError(self.LOGIN_FAILED) from e

    def register(self, email: str, password: str) -> None:
        try:
            email = require_non_empty(email, self.REGISTRATION_FAILED)
            require_non_empty(password, self.REGISTRATION_FAILED)
            self._gateway.sign_up(email=email, password=password)
        except (ValidationError, BackendError) as e:
            raise RegistrationError(self.REGISTRATION_FAILED) from e

    def logout(self) -> None:
        self._gateway.sign_out()
