import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'TEST_KEY_SECRET_EXAMPLE'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///cars.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Fill empty reference tables with default values on startup
    SEED_REFERENCE_DATA = True

    # File upload settings
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024  # 50MB per request
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or 'uploads/images'

    # Password hashing cost (argon2)
    ARGON2_TIME_COST = 3
    ARGON2_MEMORY_COST = 65536  # KiB
    ARGON2_PARALLELISM = 1


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_REFERENCE_DATA = False
    ARGON2_TIME_COST = 1
    ARGON2_MEMORY_COST = 8
