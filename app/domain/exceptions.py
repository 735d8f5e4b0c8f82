"""Domain exceptions for the carpooling backend.

Domain errors are business rule violations. Use cases return them inside
``Err(...)`` rather than raising; the presentation layer maps their ``code``
to an HTTP status through app.core.error_registry.
"""

from typing import Any


class CovoitException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (key of the error registry).
        details: Additional error context (e.g. field, resource id).
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as the ``error`` member of an API response body."""
        return {"code": self.code, "message": self.message}


class DomainError(CovoitException):
    """Base class for business rule violations (mapped to 4xx)."""

    def __init__(self, message: str, code: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code, details)


class UserAlreadyExistsError(DomainError):
    """A user with this email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f'A user with email "{email}" already exists',
            "USER_ALREADY_EXISTS",
            {"email": email},
        )


class InvalidCredentialsError(DomainError):
    """Login failed (unknown email or wrong password; never says which)."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password", "INVALID_CREDENTIALS")


class _NotFoundError(DomainError):
    """Shared shape of the ``<ENTITY>_NOT_FOUND`` errors."""

    entity: str = ""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"{self.entity} not found: {identifier}",
            f"{self.entity.upper()}_NOT_FOUND",
            {"identifier": identifier},
        )


class UserNotFoundError(_NotFoundError):
    entity = "User"


class BrandNotFoundError(_NotFoundError):
    entity = "Brand"


class CityNotFoundError(_NotFoundError):
    entity = "City"


class CarNotFoundError(_NotFoundError):
    entity = "Car"


class DriverNotFoundError(_NotFoundError):
    entity = "Driver"


class TripNotFoundError(_NotFoundError):
    entity = "Trip"


class TravelNotFoundError(_NotFoundError):
    entity = "Travel"


class InscriptionNotFoundError(_NotFoundError):
    entity = "Inscription"


class ColorNotFoundError(_NotFoundError):
    entity = "Color"


class CarAlreadyExistsError(DomainError):
    """A car with this registration plate already exists."""

    def __init__(self, immat: str) -> None:
        super().__init__(
            f'A car with immatriculation "{immat}" already exists',
            "CAR_ALREADY_EXISTS",
            {"immat": immat},
        )


class DriverAlreadyExistsError(DomainError):
    """The user already has a driver profile."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            f'A driver already exists for user "{user_id}"',
            "DRIVER_ALREADY_EXISTS",
            {"user_id": user_id},
        )


class AlreadyInscribedError(DomainError):
    """The user already holds an inscription on this trip."""

    def __init__(self, user_id: str, trip_id: str) -> None:
        super().__init__(
            f"User {user_id} is already inscribed to trip {trip_id}",
            "ALREADY_INSCRIBED",
            {"user_id": user_id, "trip_id": trip_id},
        )


class NoSeatsAvailableError(DomainError):
    """Every seat of the trip is taken."""

    def __init__(self, trip_id: str) -> None:
        super().__init__(
            f"No seats available on trip {trip_id}",
            "NO_SEATS_AVAILABLE",
            {"trip_id": trip_id},
        )


class ColorAlreadyExistsError(DomainError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Color already exists: {name}", "COLOR_ALREADY_EXISTS", {"name": name})
