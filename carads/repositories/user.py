import logging

from sqlalchemy.exc import IntegrityError

from ..extensions import db, password_hasher
from ..models import User
from .crud import CrudRepository

logger = logging.getLogger(__name__)


class UserRepository(CrudRepository):
    model = User

    def create(self, user):
        """Возвращает None, если логин уже занят (нарушение ограничения)."""
        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning("Не удалось сохранить пользователя %r: %s", user.login, e.orig)
            return None
        return user

    def find_by_login(self, login):
        return User.query.filter(User.login == login).first()

    def find_by_login_and_password(self, login, password):
        user = self.find_by_login(login)
        if user and password_hasher.verify_password(user.password, password):
            return user
        return None

    def find_by_like_login(self, key):
        return (
            User.query
            .filter(User.login.ilike(f"%{key}%"))
            .order_by(User.id.asc())
            .all()
        )
