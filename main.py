import os

from carads import create_app

app = create_app(os.environ.get('APP_CONFIG') or 'carads.config.DevelopmentConfig')


if __name__ == '__main__':
    app.logger.info("Приложение запущено: http://localhost:5000")
    app.run()
