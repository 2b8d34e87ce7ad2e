from models.vehicle import VehicleAttributes
from services.exceptions import (
    InvalidBrandError,
    InvalidModelError,
    InvalidRegistrationError,
    InvalidYearError,
    InvalidColorError,
    InvalidMaxSpeedError,
    InvalidFuelTypeError,
    InvalidTransmissionError,
    InvalidPassengersError,
    InvalidHeightError,
    InvalidWidthError,
    InvalidWeightError,
)


class BusinessRules:
    MIN_YEAR = 1887  # first automobile
    MIN_MAX_SPEED = 1
    MAX_MAX_SPEED = 999
    MIN_PASSENGERS = 1
    MAX_PASSENGERS = 6
    MIN_DIMENSION = 1.0
    FUEL_TYPES = ("gasoline", "gas", "diesel", "biodiesel")
    TRANSMISSIONS = ("automatic", "semi-automatic", "manual")

    @staticmethod
    def validate_brand(brand: str):
        if not brand:
            raise InvalidBrandError()

    @staticmethod
    def validate_year(year: int):
        if year < BusinessRules.MIN_YEAR:
            raise InvalidYearError(f"Year must be at least {BusinessRules.MIN_YEAR}.")

    @staticmethod
    def validate_color(color: str):
        if not color:
            raise InvalidColorError()

    @staticmethod
    def validate_max_speed(max_speed: int):
        if max_speed < BusinessRules.MIN_MAX_SPEED or max_speed > BusinessRules.MAX_MAX_SPEED:
            raise InvalidMaxSpeedError(
                f"Max speed must be between {BusinessRules.MIN_MAX_SPEED} and {BusinessRules.MAX_MAX_SPEED}."
            )

    @staticmethod
    def validate_fuel_type(fuel_type: str):
        if fuel_type not in BusinessRules.FUEL_TYPES:
            raise InvalidFuelTypeError(f"Fuel type must be one of {', '.join(BusinessRules.FUEL_TYPES)}.")

    @staticmethod
    def validate_transmission(transmission: str):
        if transmission not in BusinessRules.TRANSMISSIONS:
            raise InvalidTransmissionError(
                f"Transmission must be one of {', '.join(BusinessRules.TRANSMISSIONS)}."
            )

    @staticmethod
    def validate_year_range(start_year: int, end_year: int):
        if start_year < BusinessRules.MIN_YEAR or end_year < start_year:
            raise InvalidYearError(
                f"Start year must be at least {BusinessRules.MIN_YEAR} and not after the end year."
            )

    @staticmethod
    def validate_height_range(min_height: float, max_height: float):
        if min_height < BusinessRules.MIN_DIMENSION or max_height < min_height:
            raise InvalidHeightError("Invalid height range.")

    @staticmethod
    def validate_width_range(min_width: float, max_width: float):
        if min_width < BusinessRules.MIN_DIMENSION or max_width < min_width:
            raise InvalidWidthError("Invalid width range.")

    @staticmethod
    def validate_weight_range(min_weight: float, max_weight: float):
        if min_weight < BusinessRules.MIN_DIMENSION or max_weight < min_weight:
            raise InvalidWeightError("Invalid weight range.")

    @staticmethod
    def validate_vehicle(attrs: VehicleAttributes):
        """
        Checks every attribute in a fixed order and raises on the first violation.

        Order: brand, model, registration, year, color, max_speed, fuel_type,
        transmission, passengers, height, width, weight.
        """
        BusinessRules.validate_brand(attrs.brand)
        if not attrs.model:
            raise InvalidModelError()
        if not attrs.registration:
            raise InvalidRegistrationError()
        BusinessRules.validate_year(attrs.year)
        BusinessRules.validate_color(attrs.color)
        BusinessRules.validate_max_speed(attrs.max_speed)
        BusinessRules.validate_fuel_type(attrs.fuel_type)
        BusinessRules.validate_transmission(attrs.transmission)
        if attrs.passengers < BusinessRules.MIN_PASSENGERS or attrs.passengers > BusinessRules.MAX_PASSENGERS:
            raise InvalidPassengersError(
                f"Passengers must be between {BusinessRules.MIN_PASSENGERS} and {BusinessRules.MAX_PASSENGERS}."
            )
        if attrs.height < BusinessRules.MIN_DIMENSION:
            raise InvalidHeightError()
        if attrs.width < BusinessRules.MIN_DIMENSION:
            raise InvalidWidthError()
        if attrs.weight < BusinessRules.MIN_DIMENSION:
            raise InvalidWeightError()
