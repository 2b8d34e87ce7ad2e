from typing import List, Tuple

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import get_vehicle_service
from exceptions import ValidationError
from schemas.vehicle import (
    AverageResponse,
    UpdateFuelTypeRequest,
    UpdateMaxSpeedRequest,
    VehicleCreate,
    VehicleListResponse,
    VehicleOut,
    VehicleResponse,
)
from services.vehicle_service import VehicleService


router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def _list_response(message: str, vehicles) -> VehicleListResponse:
    return VehicleListResponse(message=message, data=[VehicleOut.from_domain(v) for v in vehicles])


def _parse_range(value: str, field: str) -> Tuple[float, float]:
    """Parses a 'min-max' query value such as '1.5-2.0'."""
    parts = value.split("-")
    if len(parts) != 2:
        raise ValidationError(f"invalid {field}", field)
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise ValidationError(f"invalid {field}", field)


@router.get("", response_model=VehicleListResponse)
async def get_all(svc: VehicleService = Depends(get_vehicle_service)):
    return _list_response("success to find vehicles", svc.find_all())


@router.post("", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED)
async def create(req: VehicleCreate, svc: VehicleService = Depends(get_vehicle_service)):
    vehicle = svc.insert(req.to_domain())
    return VehicleResponse(message="vehicle created", data=VehicleOut.from_domain(vehicle))


@router.post("/batch", response_model=VehicleListResponse, status_code=status.HTTP_201_CREATED)
async def create_many(req: List[VehicleCreate], svc: VehicleService = Depends(get_vehicle_service)):
    vehicles = svc.insert_many([item.to_domain() for item in req])
    return _list_response("vehicles created", vehicles)


@router.get("/color/{color}/year/{year}", response_model=VehicleListResponse)
async def get_all_by_color_and_year(color: str, year: int, svc: VehicleService = Depends(get_vehicle_service)):
    vehicles = svc.find_all_by_color_and_year(color, year)
    return _list_response("vehicles with that color and year were found", vehicles)


@router.get("/brand/{brand}/between/{start_year}/{end_year}", response_model=VehicleListResponse)
async def get_all_by_brand_and_between_years(
    brand: str,
    start_year: int,
    end_year: int,
    svc: VehicleService = Depends(get_vehicle_service)
):
    vehicles = svc.find_all_by_brand_and_between_years(brand, start_year, end_year)
    return _list_response("vehicles with that brand and range of years were found", vehicles)


@router.get("/average_speed/brand/{brand}", response_model=AverageResponse)
async def calculate_average_speed_by_brand(brand: str, svc: VehicleService = Depends(get_vehicle_service)):
    avg = svc.calculate_average_speed_by_brand(brand)
    return AverageResponse(message=f"the average max speed of {brand} vehicles is {avg:.2f}", data=avg)


@router.get("/average_capacity/brand/{brand}", response_model=AverageResponse)
async def calculate_average_capacity_by_brand(brand: str, svc: VehicleService = Depends(get_vehicle_service)):
    avg = svc.calculate_average_capacity_by_brand(brand)
    return AverageResponse(message=f"the average capacity of {brand} vehicles is {avg:.2f}", data=avg)


@router.get("/fuel_type/{fuel_type}", response_model=VehicleListResponse)
async def get_all_by_fuel_type(fuel_type: str, svc: VehicleService = Depends(get_vehicle_service)):
    vehicles = svc.find_all_by_fuel_type(fuel_type)
    return _list_response("vehicles with that fuel type were found", vehicles)


@router.get("/transmission/{transmission}", response_model=VehicleListResponse)
async def get_all_by_transmission(transmission: str, svc: VehicleService = Depends(get_vehicle_service)):
    vehicles = svc.find_all_by_transmission(transmission)
    return _list_response("vehicles with that transmission were found", vehicles)


@router.get("/dimensions", response_model=VehicleListResponse)
async def get_all_by_dimensions(
    height: str = Query(..., description="min-max, e.g. 1.5-2.0"),
    width: str = Query(..., description="min-max, e.g. 1.7-2.1"),
    svc: VehicleService = Depends(get_vehicle_service)
):
    min_height, max_height = _parse_range(height, "height")
    min_width, max_width = _parse_range(width, "width")

    vehicles = svc.find_all_by_dimensions(min_height, max_height, min_width, max_width)
    return _list_response("vehicles with those dimensions were found", vehicles)


@router.get("/weight", response_model=VehicleListResponse)
async def get_all_by_weight(
    min_weight: float = Query(..., alias="min"),
    max_weight: float = Query(..., alias="max"),
    svc: VehicleService = Depends(get_vehicle_service)
):
    vehicles = svc.find_all_by_weight(min_weight, max_weight)
    return _list_response("vehicles with that weight were found", vehicles)


@router.put("/{vehicle_id}/update_speed", response_model=VehicleResponse)
async def update_max_speed_by_id(
    vehicle_id: int,
    req: UpdateMaxSpeedRequest,
    svc: VehicleService = Depends(get_vehicle_service)
):
    vehicle = svc.update_max_speed_by_id(vehicle_id, req.max_speed)
    return VehicleResponse(message="updated max speed of vehicle", data=VehicleOut.from_domain(vehicle))


@router.put("/{vehicle_id}/update_fuel", response_model=VehicleResponse)
async def update_fuel_type_by_id(
    vehicle_id: int,
    req: UpdateFuelTypeRequest,
    svc: VehicleService = Depends(get_vehicle_service)
):
    vehicle = svc.update_fuel_type_by_id(vehicle_id, req.fuel_type)
    return VehicleResponse(message="updated fuel type of vehicle", data=VehicleOut.from_domain(vehicle))


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(vehicle_id: int, svc: VehicleService = Depends(get_vehicle_service)):
    svc.delete(vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
