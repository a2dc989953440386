import argon2
from argon2.exceptions import VerificationError, InvalidHashError
from functools import wraps
from flask import session, redirect, g


class PasswordHasher:
    """
    Хеширование паролей пользователей (argon2id).

    Параметры стоимости берутся из конфигурации приложения в init_app,
    до этого используются значения argon2 по умолчанию.
    """

    def __init__(self, app=None):
        self._argon2 = argon2.PasswordHasher()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._argon2 = argon2.PasswordHasher(
            time_cost=app.config['ARGON2_TIME_COST'],
            memory_cost=app.config['ARGON2_MEMORY_COST'],
            parallelism=app.config['ARGON2_PARALLELISM'],
        )

    def hash_password(self, password: str) -> str:
        return self._argon2.hash(password)

    def verify_password(self, password_hash: str, password: str) -> bool:
        # Битый или чужой хеш считаем несовпадением пароля
        try:
            return self._argon2.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False


def current_user():
    """Пользователь из сессии или None."""
    if 'current_user' not in g:
        from carads.services import user_service  # Локальный импорт чтобы избежать циклической зависимости

        user_id = session.get('user_id')
        g.current_user = user_service.find_by_id(user_id) if user_id else None
    return g.current_user


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_user() is None:
            return redirect('/auth/login')
        return f(*args, **kwargs)

    return decorated_function
