from datetime import datetime
from decimal import Decimal

import pytest

from carads import create_app
from carads.config import TestingConfig
from carads.extensions import db, password_hasher
from carads.models import (
    Brand, CarModel, Category, Body, Engine,
    TransmissionType, DriveType, CarColor, FuelType, WheelSide,
    Car, Post, PostPhoto, User,
)

REFERENCE_DEFAULTS = (
    ('brand', Brand, 'Toyota'),
    ('model', CarModel, 'Camry'),
    ('category', Category, 'Легковой'),
    ('body', Body, 'Седан'),
    ('engine', Engine, 'V6'),
    ('transmission_type', TransmissionType, 'Автомат'),
    ('drive_type', DriveType, 'Передний'),
    ('car_color', CarColor, 'Красный'),
    ('fuel_type', FuelType, 'Бензин'),
    ('wheel_side', WheelSide, 'Левый'),
)


class Factory:
    """Создает тестовые сущности в текущем контексте приложения."""

    def reference(self, model, name):
        entity = model(name=name)
        db.session.add(entity)
        db.session.commit()
        return entity

    def reference_set(self, **names):
        return {
            attr: self.reference(model, names.get(attr, default))
            for attr, model, default in REFERENCE_DEFAULTS
        }

    def user(self, login='testUser', password='password'):
        user = User(login=login, password=password_hasher.hash_password(password), name=login)
        db.session.add(user)
        db.session.commit()
        return user

    def car(self, vin='VIN12345678901234', refs=None, **fields):
        fields.setdefault('mileage', 50000)
        fields.setdefault('year_of_manufacture', 2020)
        fields.setdefault('count_owners', 1)
        car = Car(vin=vin, **(refs or self.reference_set()), **fields)
        db.session.add(car)
        db.session.commit()
        return car

    def post(self, user, car, status='active', price=Decimal('1000000.00'),
             created_at=None, description=None, photos=()):
        post = Post(
            user=user,
            car=car,
            status=status,
            price=price,
            description=description,
            created_at=created_at or datetime.now(),
        )
        post.photos = [PostPhoto(photo_path=path) for path in photos]
        db.session.add(post)
        db.session.commit()
        return post


@pytest.fixture
def app(tmp_path):
    app = create_app(TestingConfig)
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads' / 'images')

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def factory():
    return Factory()


def login_as(client, user_id):
    with client.session_transaction() as sess:
        sess['user_id'] = user_id
