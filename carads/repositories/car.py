from sqlalchemy.orm import joinedload

from ..models import Car, CAR_REFERENCES
from .crud import CrudRepository


class CarRepository(CrudRepository):
    model = Car

    def _query_by_id(self):
        # Все справочники одним запросом, чтобы они были доступны после закрытия сессии
        return Car.query.options(
            *[joinedload(getattr(Car, name)) for name in CAR_REFERENCES]
        )
