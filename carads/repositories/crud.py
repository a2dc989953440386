from ..extensions import db


class CrudRepository:
    """
    Общий шаблон репозитория поверх сессии Flask-SQLAlchemy.

    Каждая операция - отдельная единица работы: изменения фиксируются
    сразу, общей транзакции между репозиториями нет.
    Наследники задают ``model`` и при необходимости переопределяют
    ``_query_by_id`` для жадной загрузки связей.
    """
    model = None

    def create(self, entity):
        db.session.add(entity)
        db.session.commit()
        return entity

    def update(self, entity):
        # Несуществующий id - ничего не делаем, как и delete
        if entity.id is None or db.session.get(self.model, entity.id) is None:
            return
        db.session.merge(entity)
        db.session.commit()

    def delete(self, entity_id):
        self.model.query.filter(self.model.id == entity_id).delete()
        db.session.commit()

    def find_all_order_by_id(self):
        return self.model.query.order_by(self.model.id.asc()).all()

    def find_by_id(self, entity_id):
        if entity_id is None or entity_id <= 0:
            return None
        return self._query_by_id().filter(self.model.id == entity_id).first()

    def _query_by_id(self):
        return self.model.query
