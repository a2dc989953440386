"""
Сервисный слой: по одному фасаду на репозиторий.

Сервисы не добавляют логики и только передают вызовы репозиторию.
Контроллеры используют экземпляры, созданные внизу модуля.
"""
from .repositories import (
    BrandRepository, CarModelRepository, CategoryRepository, BodyRepository,
    EngineRepository, TransmissionTypeRepository, DriveTypeRepository,
    CarColorRepository, FuelTypeRepository, WheelSideRepository,
    CarRepository, PostRepository, PostPhotoRepository, UserRepository,
)


class CrudService:

    def __init__(self, repository):
        self.repository = repository

    def create(self, entity):
        return self.repository.create(entity)

    def update(self, entity):
        self.repository.update(entity)

    def delete(self, entity_id):
        self.repository.delete(entity_id)

    def find_all_order_by_id(self):
        return self.repository.find_all_order_by_id()

    def find_by_id(self, entity_id):
        return self.repository.find_by_id(entity_id)


class BrandService(CrudService):
    pass


class CarModelService(CrudService):
    pass


class CategoryService(CrudService):
    pass


class BodyService(CrudService):
    pass


class EngineService(CrudService):
    pass


class TransmissionTypeService(CrudService):
    pass


class DriveTypeService(CrudService):
    pass


class CarColorService(CrudService):
    pass


class FuelTypeService(CrudService):
    pass


class WheelSideService(CrudService):
    pass


class CarService(CrudService):
    pass


class PostService(CrudService):

    def find_active_posts_order_by_created_at_desc(self):
        return self.repository.find_active_posts_order_by_created_at_desc()

    def find_by_user_id(self, user_id):
        return self.repository.find_by_user_id(user_id)

    def find_all_with_photos(self):
        return self.repository.find_all_with_photos()

    def find_posts_for_last_day(self):
        return self.repository.find_posts_for_last_day()

    def find_posts_with_photo(self):
        return self.repository.find_posts_with_photo()

    def find_posts_by_brand(self, key):
        return self.repository.find_posts_by_brand(key)


class PostPhotoService(CrudService):

    def find_by_post_id(self, post_id):
        return self.repository.find_by_post_id(post_id)


class UserService(CrudService):

    def find_by_login(self, login):
        return self.repository.find_by_login(login)

    def find_by_login_and_password(self, login, password):
        return self.repository.find_by_login_and_password(login, password)

    def find_by_like_login(self, key):
        return self.repository.find_by_like_login(key)


brand_service = BrandService(BrandRepository())
car_model_service = CarModelService(CarModelRepository())
category_service = CategoryService(CategoryRepository())
body_service = BodyService(BodyRepository())
engine_service = EngineService(EngineRepository())
transmission_type_service = TransmissionTypeService(TransmissionTypeRepository())
drive_type_service = DriveTypeService(DriveTypeRepository())
car_color_service = CarColorService(CarColorRepository())
fuel_type_service = FuelTypeService(FuelTypeRepository())
wheel_side_service = WheelSideService(WheelSideRepository())

car_service = CarService(CarRepository())
post_service = PostService(PostRepository())
post_photo_service = PostPhotoService(PostPhotoRepository())
user_service = UserService(UserRepository())
