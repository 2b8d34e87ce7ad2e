from .vehicle import Vehicle, VehicleAttributes
