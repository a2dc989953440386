from .crud import CrudRepository
from .reference import (
    BrandRepository, CarModelRepository, CategoryRepository, BodyRepository,
    EngineRepository, TransmissionTypeRepository, DriveTypeRepository,
    CarColorRepository, FuelTypeRepository, WheelSideRepository,
)
from .car import CarRepository
from .post import PostRepository
from .post_photo import PostPhotoRepository
from .user import UserRepository

__all__ = [
    "CrudRepository",
    "BrandRepository", "CarModelRepository", "CategoryRepository", "BodyRepository",
    "EngineRepository", "TransmissionTypeRepository", "DriveTypeRepository",
    "CarColorRepository", "FuelTypeRepository", "WheelSideRepository",
    "CarRepository", "PostRepository", "PostPhotoRepository", "UserRepository",
]
