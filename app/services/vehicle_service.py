import logging
from typing import Callable, List

# Models
from models.vehicle import Vehicle

# Repository
from repositories.vehicle_repository import VehicleRepository
from repositories.exceptions import (
    RepositoryVehiclesNotFoundError,
    RepositoryVehicleNotFoundError,
    RepositoryVehicleIdAlreadyExistsError,
)

# Metrics
from core.metrics import track_performance
from core.prometheus_metrics import prometheus_collector

# Validation
from services.validators import BusinessRules

# Exceptions
from services.exceptions import (
    VehiclesNotFoundError,
    VehicleNotFoundError,
    VehicleIdAlreadyExistsError,
)

logger = logging.getLogger(__name__)


class VehicleService:
    """
    Business logic service for the vehicle catalog.

    This service provides:
    - Field-level validation for every write (first violation wins)
    - Filtered reads over a snapshot of the whole catalog
    - Per-brand aggregates (average max speed, average passenger capacity)
    - Targeted updates of max speed and fuel type
    - Translation of repository errors into domain errors

    Every read scans the full snapshot returned by the repository; the service
    never keeps a copy of the catalog between calls.
    """

    def __init__(self, repository: VehicleRepository):
        """
        Args:
            repository (VehicleRepository): Owner of the vehicle collection
        """
        self.repository = repository

    @track_performance(service_name="VehicleService")
    def find_all(self) -> List[Vehicle]:
        return self._snapshot()

    @track_performance(service_name="VehicleService")
    def insert(self, vehicle: Vehicle) -> Vehicle:
        BusinessRules.validate_vehicle(vehicle.attributes)

        try:
            inserted = self.repository.insert(vehicle)
        except RepositoryVehicleIdAlreadyExistsError as e:
            raise VehicleIdAlreadyExistsError(str(e)) from e

        self._record_catalog_size()
        return inserted

    @track_performance(service_name="VehicleService")
    def insert_many(self, vehicles: List[Vehicle]) -> List[Vehicle]:
        """
        Validates the whole batch before inserting anything.

        Once validation passes, a repository failure part-way through leaves
        the vehicles inserted before it in place.
        """
        for vehicle in vehicles:
            BusinessRules.validate_vehicle(vehicle.attributes)

        try:
            inserted = self.repository.insert_many(vehicles)
        except RepositoryVehicleIdAlreadyExistsError as e:
            logger.warning(f"Batch insert stopped part-way: {e}")
            raise VehicleIdAlreadyExistsError(str(e)) from e
        finally:
            self._record_catalog_size()

        logger.info(f"Inserted batch of {len(inserted)} vehicles")
        return inserted

    @track_performance(service_name="VehicleService")
    def find_all_by_color_and_year(self, color: str, year: int) -> List[Vehicle]:
        BusinessRules.validate_color(color)
        BusinessRules.validate_year(year)

        return self._filter(
            lambda v: v.attributes.color == color and v.attributes.year == year,
            "that color and year"
        )

    @track_performance(service_name="VehicleService")
    def find_all_by_brand_and_between_years(self, brand: str, start_year: int, end_year: int) -> List[Vehicle]:
        """Both year bounds are exclusive."""
        BusinessRules.validate_brand(brand)
        BusinessRules.validate_year_range(start_year, end_year)

        return self._filter(
            lambda v: v.attributes.brand == brand and start_year < v.attributes.year < end_year,
            "that brand and range of years"
        )

    @track_performance(service_name="VehicleService")
    def find_all_by_fuel_type(self, fuel_type: str) -> List[Vehicle]:
        BusinessRules.validate_fuel_type(fuel_type)

        return self._filter(lambda v: v.attributes.fuel_type == fuel_type, "that fuel type")

    @track_performance(service_name="VehicleService")
    def find_all_by_transmission(self, transmission: str) -> List[Vehicle]:
        BusinessRules.validate_transmission(transmission)

        return self._filter(lambda v: v.attributes.transmission == transmission, "that transmission")

    @track_performance(service_name="VehicleService")
    def find_all_by_dimensions(
        self,
        min_height: float,
        max_height: float,
        min_width: float,
        max_width: float
    ) -> List[Vehicle]:
        """All four bounds are exclusive."""
        BusinessRules.validate_height_range(min_height, max_height)
        BusinessRules.validate_width_range(min_width, max_width)

        return self._filter(
            lambda v: min_height < v.attributes.height < max_height
            and min_width < v.attributes.width < max_width,
            "those dimensions"
        )

    @track_performance(service_name="VehicleService")
    def find_all_by_weight(self, min_weight: float, max_weight: float) -> List[Vehicle]:
        """Both bounds are exclusive."""
        BusinessRules.validate_weight_range(min_weight, max_weight)

        return self._filter(lambda v: min_weight < v.attributes.weight < max_weight, "that weight")

    @track_performance(service_name="VehicleService")
    def calculate_average_speed_by_brand(self, brand: str) -> float:
        BusinessRules.validate_brand(brand)

        vehicles = self._filter(lambda v: v.attributes.brand == brand, "that brand")
        return sum(v.attributes.max_speed for v in vehicles) / len(vehicles)

    @track_performance(service_name="VehicleService")
    def calculate_average_capacity_by_brand(self, brand: str) -> float:
        BusinessRules.validate_brand(brand)

        vehicles = self._filter(lambda v: v.attributes.brand == brand, "that brand")
        return sum(v.attributes.passengers for v in vehicles) / len(vehicles)

    @track_performance(service_name="VehicleService")
    def update_max_speed_by_id(self, vehicle_id: int, max_speed: int) -> Vehicle:
        BusinessRules.validate_max_speed(max_speed)

        try:
            return self.repository.update_max_speed_by_id(vehicle_id, max_speed)
        except RepositoryVehicleNotFoundError as e:
            raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found.") from e

    @track_performance(service_name="VehicleService")
    def update_fuel_type_by_id(self, vehicle_id: int, fuel_type: str) -> Vehicle:
        BusinessRules.validate_fuel_type(fuel_type)

        try:
            return self.repository.update_fuel_type_by_id(vehicle_id, fuel_type)
        except RepositoryVehicleNotFoundError as e:
            raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found.") from e

    @track_performance(service_name="VehicleService")
    def delete(self, vehicle_id: int) -> None:
        try:
            self.repository.delete(vehicle_id)
        except RepositoryVehicleNotFoundError as e:
            raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found.") from e

        self._record_catalog_size()

    def _record_catalog_size(self):
        prometheus_collector.update_catalog_size(len(self.repository))

    def _snapshot(self) -> List[Vehicle]:
        try:
            return self.repository.find_all()
        except RepositoryVehiclesNotFoundError as e:
            raise VehiclesNotFoundError("vehicles not found") from e

    def _filter(self, predicate: Callable[[Vehicle], bool], criteria: str) -> List[Vehicle]:
        matches = [v for v in self._snapshot() if predicate(v)]
        if not matches:
            raise VehiclesNotFoundError(f"there are not any vehicles with {criteria}")
        return matches
