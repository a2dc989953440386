from flask import current_app

from carads.extensions import db
from carads.models import (
    Brand, CarModel, Category, Body, Engine,
    TransmissionType, DriveType, CarColor, FuelType, WheelSide,
)

# Значения справочников по умолчанию
DEFAULT_REFERENCE_DATA = {
    Brand: ["Toyota", "BMW", "Mercedes-Benz", "Lada", "Kia", "Hyundai"],
    CarModel: ["Camry", "Corolla", "X5", "E-Class", "Vesta", "Rio", "Solaris"],
    Category: ["Легковой", "Грузовой", "Мотоцикл"],
    Body: ["Седан", "Хэтчбек", "Универсал", "Внедорожник", "Купе"],
    Engine: ["1.6", "2.0", "2.5", "3.0", "V6", "V8", "Электро"],
    TransmissionType: ["Механика", "Автомат", "Робот", "Вариатор"],
    DriveType: ["Передний", "Задний", "Полный"],
    CarColor: ["Белый", "Черный", "Серый", "Красный", "Синий"],
    FuelType: ["Бензин", "Дизель", "Гибрид", "Электро", "Газ"],
    WheelSide: ["Левый", "Правый"],
}


def seed_reference_data():
    """Заполняет пустые справочники значениями по умолчанию"""
    for model, names in DEFAULT_REFERENCE_DATA.items():
        if model.query.first() is not None:
            continue
        db.session.add_all(model(name=name) for name in names)
        current_app.logger.info("Справочник %s заполнен: %d значений", model.__tablename__, len(names))
    db.session.commit()
