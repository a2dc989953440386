from ..models import (
    Brand, CarModel, Category, Body, Engine,
    TransmissionType, DriveType, CarColor, FuelType, WheelSide,
)
from .crud import CrudRepository


class BrandRepository(CrudRepository):
    model = Brand


class CarModelRepository(CrudRepository):
    model = CarModel


class CategoryRepository(CrudRepository):
    model = Category


class BodyRepository(CrudRepository):
    model = Body


class EngineRepository(CrudRepository):
    model = Engine


class TransmissionTypeRepository(CrudRepository):
    model = TransmissionType


class DriveTypeRepository(CrudRepository):
    model = DriveType


class CarColorRepository(CrudRepository):
    model = CarColor


class FuelTypeRepository(CrudRepository):
    model = FuelType


class WheelSideRepository(CrudRepository):
    model = WheelSide
