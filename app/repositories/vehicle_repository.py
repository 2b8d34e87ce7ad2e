import copy
import logging
import threading
from typing import Iterable, List, Optional

from models.vehicle import Vehicle
from repositories.exceptions import (
    RepositoryVehiclesNotFoundError,
    RepositoryVehicleNotFoundError,
    RepositoryVehicleIdAlreadyExistsError,
)

logger = logging.getLogger(__name__)


class VehicleRepository:
    """
    In-memory vehicle repository backed by an ordered list.

    The repository is the only owner of the vehicle collection and of the
    id counter. Every value it hands out is a deep copy, so callers can never
    reach into its internal state.

    All reads and writes run under a single re-entrant lock.
    """

    def __init__(self, db: Optional[Iterable[Vehicle]] = None, last_id: int = 0):
        """
        Args:
            db: Initial vehicles, already valid and already carrying ids
            last_id: Highest id in use, so new ids resume after it
        """
        self._db: List[Vehicle] = [copy.deepcopy(v) for v in (db or [])]
        self._last_id = last_id
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._db)

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._last_id

    def find_all(self) -> List[Vehicle]:
        """Returns a snapshot of every stored vehicle."""
        with self._lock:
            if not self._db:
                raise RepositoryVehiclesNotFoundError("repository: vehicles not found")
            return [copy.deepcopy(v) for v in self._db]

    def insert(self, vehicle: Vehicle) -> Vehicle:
        with self._lock:
            return self._insert_one(vehicle)

    def insert_many(self, vehicles: Iterable[Vehicle]) -> List[Vehicle]:
        """
        Inserts vehicles one at a time, in order.

        A failure stops the batch; vehicles inserted before it stay in place.
        """
        with self._lock:
            return [self._insert_one(v) for v in vehicles]

    def update_max_speed_by_id(self, vehicle_id: int, max_speed: int) -> Vehicle:
        with self._lock:
            vehicle = self._get(vehicle_id)
            vehicle.attributes.max_speed = max_speed
            logger.info(f"Vehicle {vehicle_id} max speed set to {max_speed}")
            return copy.deepcopy(vehicle)

    def update_fuel_type_by_id(self, vehicle_id: int, fuel_type: str) -> Vehicle:
        with self._lock:
            vehicle = self._get(vehicle_id)
            vehicle.attributes.fuel_type = fuel_type
            logger.info(f"Vehicle {vehicle_id} fuel type set to {fuel_type}")
            return copy.deepcopy(vehicle)

    def delete(self, vehicle_id: int) -> None:
        with self._lock:
            for index, vehicle in enumerate(self._db):
                if vehicle.id == vehicle_id:
                    del self._db[index]
                    logger.info(f"Vehicle {vehicle_id} deleted")
                    return
            raise RepositoryVehicleNotFoundError(f"repository: vehicle {vehicle_id} not found")

    def _insert_one(self, vehicle: Vehicle) -> Vehicle:
        # Only the next id is checked, not every id already stored.
        next_id = self._last_id + 1
        if vehicle.id == next_id:
            raise RepositoryVehicleIdAlreadyExistsError(
                f"repository: vehicle id {next_id} already exists"
            )

        stored = copy.deepcopy(vehicle)
        stored.id = next_id
        self._db.append(stored)
        self._last_id = next_id
        logger.info(f"Vehicle {next_id} inserted")
        return copy.deepcopy(stored)

    def _get(self, vehicle_id: int) -> Vehicle:
        for vehicle in self._db:
            if vehicle.id == vehicle_id:
                return vehicle
        raise RepositoryVehicleNotFoundError(f"repository: vehicle {vehicle_id} not found")
