from typing import Any, Mapping, Optional

from flask import Flask

from ..config import Config, configure_logging
from .routes import bp


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    configure_logging(app.config["LOG_LEVEL"])
    app.register_blueprint(bp)
    return app
