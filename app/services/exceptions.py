class FatalException(Exception):
    """Exception for non-recoverable errors (validation errors, missing records)."""

class VehicleDomainError(FatalException):
    """Base class for all vehicle domain errors."""

class VehiclesNotFoundError(VehicleDomainError):
    """Raised when the catalog is empty or no vehicle matches a query."""

class VehicleNotFoundError(VehicleDomainError):
    """Raised when an update or delete targets an id that does not exist."""

class VehicleIdAlreadyExistsError(VehicleDomainError):
    """Raised when an insert collides with the id about to be assigned."""


class InvalidVehicleError(VehicleDomainError):
    """Base class for field validation failures. `field` names the wire attribute."""

    field: str = ""

    def __init__(self, message: str = ""):
        super().__init__(message or f"invalid vehicle {self.field.replace('_', ' ')}")

class InvalidBrandError(InvalidVehicleError):
    field = "brand"

class InvalidModelError(InvalidVehicleError):
    field = "model"

class InvalidRegistrationError(InvalidVehicleError):
    field = "registration"

class InvalidYearError(InvalidVehicleError):
    field = "year"

class InvalidColorError(InvalidVehicleError):
    field = "color"

class InvalidMaxSpeedError(InvalidVehicleError):
    field = "max_speed"

class InvalidFuelTypeError(InvalidVehicleError):
    field = "fuel_type"

class InvalidTransmissionError(InvalidVehicleError):
    field = "transmission"

class InvalidPassengersError(InvalidVehicleError):
    field = "passengers"

class InvalidHeightError(InvalidVehicleError):
    field = "height"

class InvalidWidthError(InvalidVehicleError):
    field = "width"

class InvalidWeightError(InvalidVehicleError):
    field = "weight"
