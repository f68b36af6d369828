"""Application factory and app-wide configuration."""

import logging

from flask import Flask
from flask_cors import CORS

from pf_shortfall.app.api.routes import api_bp


def create_app() -> Flask:
    """Build the Flask app instance."""
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        )

    app = Flask(__name__)

    CORS(
        app,
        resources={r"/api/*": {"origins": ["http://localhost:5173"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
