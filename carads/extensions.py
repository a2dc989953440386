from flask_sqlalchemy import SQLAlchemy

from .utils.security import PasswordHasher

# Расширения создаются без приложения и подключаются в create_app
db = SQLAlchemy()
password_hasher = PasswordHasher()
