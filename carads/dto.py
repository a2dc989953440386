from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from werkzeug.datastructures import FileStorage


@dataclass
class PostCreationDto:
    """Данные формы создания объявления: автомобиль, объявление и фотографии."""

    vin: str
    mileage: int
    year_of_manufacture: int
    count_owners: int

    brand_id: int
    model_id: int
    category_id: int
    body_id: int
    engine_id: int
    transmission_type_id: int
    drive_type_id: int
    car_color_id: int
    fuel_type_id: int
    wheel_side_id: int

    description: Optional[str] = None
    price: Optional[Decimal] = None

    photos: List[FileStorage] = field(default_factory=list)

    @classmethod
    def from_request(cls, form, files):
        """Разбирает multipart-форму. Отсутствующее или нечисловое поле - ValueError/KeyError."""
        price = form.get('price')
        return cls(
            vin=form['vin'],
            mileage=int(form['mileage']),
            year_of_manufacture=int(form['year_of_manufacture']),
            count_owners=int(form.get('count_owners') or 0),
            brand_id=int(form['brand_id']),
            model_id=int(form['model_id']),
            category_id=int(form['category_id']),
            body_id=int(form['body_id']),
            engine_id=int(form['engine_id']),
            transmission_type_id=int(form['transmission_type_id']),
            drive_type_id=int(form['drive_type_id']),
            car_color_id=int(form['car_color_id']),
            fuel_type_id=int(form['fuel_type_id']),
            wheel_side_id=int(form['wheel_side_id']),
            description=form.get('description'),
            price=Decimal(price) if price else None,
            photos=files.getlist('photos'),
        )
