from dataclasses import dataclass


@dataclass
class VehicleAttributes:
    brand: str
    model: str
    registration: str
    year: int
    color: str
    max_speed: int
    fuel_type: str  # 'gasoline' | 'gas' | 'diesel' | 'biodiesel'
    transmission: str  # 'automatic' | 'semi-automatic' | 'manual'
    passengers: int
    height: float
    width: float
    weight: float


@dataclass
class Vehicle:
    attributes: VehicleAttributes
    id: int = 0  # assigned by the repository on insert
