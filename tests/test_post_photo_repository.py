import pytest

from carads.extensions import db
from carads.models import PostPhoto
from carads.repositories import PostPhotoRepository


@pytest.fixture
def repository(app_ctx):
    return PostPhotoRepository()


@pytest.fixture
def post(factory):
    return factory.post(factory.user(), factory.car())


def test_create_and_find_by_id(repository, post):
    photo = repository.create(PostPhoto(photo_path='front.jpg', post=post))

    found = repository.find_by_id(photo.id)
    assert found.photo_path == 'front.jpg'
    assert found.post_id == post.id


def test_find_by_post_id_returns_photos_in_id_order(repository, factory, post):
    other_post = factory.post(factory.user('other'), factory.car('VIN00000000000009'))
    first = repository.create(PostPhoto(photo_path='1.jpg', post=post))
    repository.create(PostPhoto(photo_path='other.jpg', post=other_post))
    second = repository.create(PostPhoto(photo_path='2.jpg', post=post))

    photos = repository.find_by_post_id(post.id)

    assert [photo.id for photo in photos] == [first.id, second.id]
    assert all(photo.post_id == post.id for photo in photos)


def test_find_by_post_id_without_photos(repository, post):
    assert repository.find_by_post_id(post.id) == []


def test_update_changes_path(repository, post):
    photo = repository.create(PostPhoto(photo_path='old.jpg', post=post))
    photo.photo_path = 'new.jpg'

    repository.update(photo)

    db.session.expire_all()
    assert repository.find_by_id(photo.id).photo_path == 'new.jpg'


def test_delete(repository, post):
    photo_id = repository.create(PostPhoto(photo_path='gone.jpg', post=post)).id

    repository.delete(photo_id)

    assert repository.find_by_id(photo_id) is None
    assert repository.find_by_post_id(post.id) == []


def test_delete_missing_photo_does_not_raise(repository):
    repository.delete(555)


@pytest.mark.parametrize("photo_id", [0, -3, 42])
def test_find_by_invalid_id_returns_none(repository, photo_id):
    assert repository.find_by_id(photo_id) is None


def test_find_all_order_by_id(repository, post):
    created = [repository.create(PostPhoto(photo_path=f'{i}.jpg', post=post)).id for i in range(3)]

    assert [photo.id for photo in repository.find_all_order_by_id()] == created
