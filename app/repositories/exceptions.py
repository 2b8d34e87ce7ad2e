class RepositoryError(Exception):
    """Base class for errors raised by the vehicle repository."""

class RepositoryVehiclesNotFoundError(RepositoryError):
    """Raised when the repository holds no vehicles at all."""

class RepositoryVehicleNotFoundError(RepositoryError):
    """Raised when no vehicle has the requested id."""

class RepositoryVehicleIdAlreadyExistsError(RepositoryError):
    """Raised when an inserted vehicle already carries the id about to be assigned."""
