import logging

from flask import Flask
from .config import Config
from .extensions import cors, media, store
from .resources import RESOURCES


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO))

    # Extensions
    cors.init_app(app, origins=app.config["CORS_ORIGINS"])
    # Raises StoreLoadError when the backing document is missing or unreadable
    store.init_app(app)
    media.init_app(app)

    # Blueprints
    from .routes.collections import make_blueprint
    from .routes.api import bp as api
    from .routes.media_api import bp as media_api
    from .routes.uploads import bp as uploads

    for resource in RESOURCES:
        app.register_blueprint(make_blueprint(resource))
    app.register_blueprint(api, url_prefix="/api")
    app.register_blueprint(media_api, url_prefix="/api")
    app.register_blueprint(uploads, url_prefix=app.config["UPLOAD_URL_PREFIX"])

    return app
