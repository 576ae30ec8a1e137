"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from investcalc.app.api.routes import api_bp
from investcalc.app.config import AppSettings

LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or AppSettings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    app = Flask(__name__)
    app.config["INVESTCALC_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).debug("app created with origins %s", settings.cors_origins)
    return app
