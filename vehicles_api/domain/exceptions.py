"""Domain exceptions for the vehicles API."""


class VehiclesError(Exception):
    """Base class for vehicles API errors."""


class CarNotFoundError(VehiclesError):
    """Raised when no car exists for the requested identifier."""

    def __init__(self, car_id: int) -> None:
        super().__init__(f"Car {car_id} not found")
        self.car_id = car_id


class CarValidationError(VehiclesError):
    """Raised when a car payload violates an aggregate rule."""


class CarIdentifierAssignedError(CarValidationError):
    """Raised when a new car already carries an identifier."""

    def __init__(self, car_id: int) -> None:
        super().__init__(f"New cars must not carry an id (got {car_id})")
        self.car_id = car_id


class UnknownManufacturerError(CarValidationError):
    """Raised when a car references a manufacturer code that does not exist."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown manufacturer code {code}")
        self.code = code


class CollaboratorUnavailableError(VehiclesError):
    """Raised by collaborator clients when a remote service cannot answer."""

    def __init__(self, collaborator: str, reason: str) -> None:
        super().__init__(f"{collaborator} unavailable: {reason}")
        self.collaborator = collaborator
        self.reason = reason


class PersistenceError(VehiclesError):
    """Raised when the car store fails."""
