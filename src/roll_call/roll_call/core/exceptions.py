class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are rejected or no user is signed in."""


class RegistrationError(DomainError):
    """Raised when the provider refuses a sign-up."""


class BackendError(DomainError):
    """Raised when the hosted backend reports a failure."""
