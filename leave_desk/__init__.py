from typing import Any, Mapping, Optional

from flask import Flask


from .config import DefaultConfig
from .routes import api_bp
from .storage import RecordStore



def create_app(config: Optional[Mapping[str, Any]] = None):
    """Application factory for the leave desk service."""
    app = Flask(__name__)

    app.config.from_object(DefaultConfig)
    if config:
        app.config.update(config)

    app.extensions["record_store"] = RecordStore(app.config["DATA_DIR"])
    app.register_blueprint(api_bp)

    return app


__all__ = ["create_app"]
