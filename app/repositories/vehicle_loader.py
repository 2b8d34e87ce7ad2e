import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from models.vehicle import Vehicle
from repositories.exceptions import RepositoryError
from schemas.vehicle import VehicleOut

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(List[VehicleOut])


class VehicleLoaderError(RepositoryError):
    """Raised when the initial vehicle file is missing or malformed."""


@dataclass
class VehicleData:
    data: List[Vehicle] = field(default_factory=list)
    last_id: int = 0


def load_vehicles(path: Union[str, Path]) -> VehicleData:
    """
    Reads the initial catalog from a JSON array of vehicle objects.

    Each object uses the same keys as the API responses, `id` included.
    Returns the vehicles together with the highest id found, so the
    repository can keep assigning ids after it.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise VehicleLoaderError(f"Vehicle file not found: {path}") from e

    try:
        records = _records_adapter.validate_json(raw)
    except ValidationError as e:
        raise VehicleLoaderError(f"Invalid vehicle file {path}: {e}") from e

    vehicles = [record.to_domain() for record in records]
    last_id = max((v.id for v in vehicles), default=0)

    logger.info(f"Loaded {len(vehicles)} vehicles from {path} (last id {last_id})")
    return VehicleData(data=vehicles, last_id=last_id)
