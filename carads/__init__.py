from flask import Flask
from sqlalchemy import event


def create_app(config_class='carads.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.url_map.strict_slashes = False
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    from .extensions import db, password_hasher
    db.init_app(app)
    password_hasher.init_app(app)

    from carads.routes.index import index_bp
    from carads.routes.posts import posts_bp
    from carads.routes.auth import auth_bp
    from carads.routes.files import files_bp

    app.register_blueprint(index_bp)
    app.register_blueprint(posts_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(files_bp)

    with app.app_context():
        if db.engine.dialect.name == 'sqlite':
            event.listen(db.engine, 'connect', _sqlite_on_connect)

        from . import models  # noqa: F401
        db.create_all()

        if app.config['SEED_REFERENCE_DATA']:
            from .utils.seed import seed_reference_data
            seed_reference_data()

    return app


def _sqlite_on_connect(dbapi_connection, connection_record):
    # Каскадное удаление фотографий и LIKE с учетом регистра, как в серверной БД
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA case_sensitive_like=ON")
    cursor.close()
