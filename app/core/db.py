import logging
from pathlib import Path

from fastapi import Depends, Request

from repositories.vehicle_loader import load_vehicles
from repositories.vehicle_repository import VehicleRepository
from services.vehicle_service import VehicleService

logger = logging.getLogger(__name__)


def build_repository(vehicles_file: Path) -> VehicleRepository:
    """
    Creates the in-memory repository seeded from the vehicles file.

    A missing file starts an empty catalog; a malformed one is an error.
    """
    if not vehicles_file.exists():
        logger.warning(f"Vehicles file {vehicles_file} not found, starting with an empty catalog")
        return VehicleRepository()

    data = load_vehicles(vehicles_file)
    return VehicleRepository(db=data.data, last_id=data.last_id)


def get_repository(request: Request) -> VehicleRepository:
    return request.app.state.vehicle_repository


def get_vehicle_service(repository: VehicleRepository = Depends(get_repository)) -> VehicleService:
    return VehicleService(repository)
