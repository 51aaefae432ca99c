from flask import Flask

from flask_app.app.config import load_address_templates, load_config
from flask_app.app.database import SqlPersonService
from flask_app.app.sql_models import make_engine, make_session_factory


def create_app(config=None):
    """Initialize Flask app"""
    app = Flask(__name__)

    settings = load_config(config)
    app.config.update(settings)

    registry = settings.get("ADDRESS_TEMPLATES")
    if registry is None:
        registry = load_address_templates(settings.get("ADDRESS_TEMPLATE_PATH"))

    # ✅ Engine lives on the app; call dispose_app_engine(app) when done with it
    engine = make_engine(settings.get("DATABASE_URL"))
    app.extensions["db_engine"] = engine

    # ✅ Collaborators are handed to the routes explicitly, not looked up globally
    app.extensions["address_templates"] = registry
    app.extensions["person_service"] = SqlPersonService(make_session_factory(engine))

    from flask_app.app.routes import main_bp
    app.register_blueprint(main_bp)

    return app


def dispose_app_engine(app):
    """Release the app's database connection pool."""
    engine = app.extensions.pop("db_engine", None)
    if engine is not None:
        engine.dispose()
