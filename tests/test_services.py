from unittest import mock

import pytest

from carads import services

CRUD_SERVICES = [
    services.BrandService, services.CarModelService, services.CategoryService,
    services.BodyService, services.EngineService, services.TransmissionTypeService,
    services.DriveTypeService, services.CarColorService, services.FuelTypeService,
    services.WheelSideService, services.CarService, services.PostService,
    services.PostPhotoService, services.UserService,
]


@pytest.mark.parametrize("service_class", CRUD_SERVICES, ids=lambda cls: cls.__name__)
def test_crud_calls_are_passed_through(service_class):
    repository = mock.Mock()
    service = service_class(repository)
    entity = object()

    assert service.create(entity) is repository.create.return_value
    assert service.find_by_id(7) is repository.find_by_id.return_value
    assert service.find_all_order_by_id() is repository.find_all_order_by_id.return_value
    service.update(entity)
    service.delete(7)

    repository.create.assert_called_once_with(entity)
    repository.find_by_id.assert_called_once_with(7)
    repository.update.assert_called_once_with(entity)
    repository.delete.assert_called_once_with(7)


@pytest.mark.parametrize("method, args", [
    ("find_active_posts_order_by_created_at_desc", ()),
    ("find_by_user_id", (3,)),
    ("find_all_with_photos", ()),
    ("find_posts_for_last_day", ()),
    ("find_posts_with_photo", ()),
    ("find_posts_by_brand", ("Toyota",)),
])
def test_post_service_queries_are_passed_through(method, args):
    repository = mock.Mock()
    service = services.PostService(repository)

    result = getattr(service, method)(*args)

    assert result is getattr(repository, method).return_value
    getattr(repository, method).assert_called_once_with(*args)


def test_post_photo_service_find_by_post_id():
    repository = mock.Mock()

    result = services.PostPhotoService(repository).find_by_post_id(5)

    assert result is repository.find_by_post_id.return_value
    repository.find_by_post_id.assert_called_once_with(5)


@pytest.mark.parametrize("method, args", [
    ("find_by_login", ("login",)),
    ("find_by_login_and_password", ("login", "password")),
    ("find_by_like_login", ("log",)),
])
def test_user_service_queries_are_passed_through(method, args):
    repository = mock.Mock()
    service = services.UserService(repository)

    result = getattr(service, method)(*args)

    assert result is getattr(repository, method).return_value
    getattr(repository, method).assert_called_once_with(*args)


def test_default_services_are_wired_to_repositories():
    assert isinstance(services.post_service.repository, services.PostRepository)
    assert isinstance(services.user_service.repository, services.UserRepository)
    assert isinstance(services.wheel_side_service.repository, services.WheelSideRepository)
