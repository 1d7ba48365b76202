"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from zinsrechner.app.api.routes import api_bp
from zinsrechner.config import Settings, load_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - [%(levelname)s] - %(message)s",
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).info("zinsrechner api ready (locale=%s)", settings.locale)
    return app
