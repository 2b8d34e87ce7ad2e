from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from models.vehicle import Vehicle, VehicleAttributes


class VehicleAttributesSchema(BaseModel):
    brand: str
    model: str
    registration: str
    year: int
    color: str
    max_speed: int
    fuel_type: str = Field(..., description="gasoline | gas | diesel | biodiesel")
    transmission: str = Field(..., description="automatic | semi-automatic | manual")
    passengers: int
    height: float
    width: float
    weight: float

    def to_attributes(self) -> VehicleAttributes:
        return VehicleAttributes(**self.model_dump(exclude={"id"}))


class VehicleCreate(VehicleAttributesSchema):
    # Request bodies are not coerced: "2020", 180.0 or true for an int is rejected
    model_config = ConfigDict(strict=True)

    # Never required; a client-supplied id only matters to the id-collision check.
    id: Optional[int] = None

    def to_domain(self) -> Vehicle:
        return Vehicle(attributes=self.to_attributes(), id=self.id or 0)


class VehicleOut(VehicleAttributesSchema):
    id: int

    @classmethod
    def from_domain(cls, vehicle: Vehicle) -> "VehicleOut":
        return cls(id=vehicle.id, **vars(vehicle.attributes))

    def to_domain(self) -> Vehicle:
        return Vehicle(attributes=self.to_attributes(), id=self.id)


class UpdateMaxSpeedRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    max_speed: int


class UpdateFuelTypeRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    fuel_type: str


class VehicleResponse(BaseModel):
    message: str
    data: VehicleOut


class VehicleListResponse(BaseModel):
    message: str
    data: List[VehicleOut]


class AverageResponse(BaseModel):
    message: str
    data: float
