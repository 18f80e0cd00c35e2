from flask import Flask
from .extensions import db, migrate, ma
from .config import Config
from babystore.utils.error_handlers import register_error_handlers
from babystore.routes import register_blueprints
from babystore.commands import register_commands


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(str(app.config.get("LOG_LEVEL", "INFO")).upper())

    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    # Make sure every model is mapped before create_all / migrations run
    from babystore import models  # noqa: F401

    register_blueprints(app)
    register_error_handlers(app)
    register_commands(app)

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app
