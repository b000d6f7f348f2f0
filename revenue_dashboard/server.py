import datetime as dt
import logging
from typing import Optional

from dash import Dash
from flask import Flask
from flask_caching import Cache

from .config import Settings, get_settings

logger = logging.getLogger(__name__)


class ServerFactory:
    """Builds the Flask server, its Cache and the Dash app from settings."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.settings.log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    def create_server(self) -> Flask:
        server = Flask(__name__)

        @server.route("/health")
        def health():
            return {"status": "ok", "time": dt.datetime.now(dt.timezone.utc).isoformat()}

        return server

    def create_cache(self, server: Flask) -> Cache:
        config = {
            "CACHE_TYPE": self.settings.cache_type,
            "CACHE_DEFAULT_TIMEOUT": self.settings.cache_timeout_seconds,
        }
        if self.settings.cache_type == "RedisCache":
            config["CACHE_REDIS_URL"] = self.settings.redis_url
        logger.info("Cache backend: %s", self.settings.cache_type)
        return Cache(server, config=config)

    def create_app(self, server: Flask) -> Dash:
        app = Dash(
            __name__,
            server=server,
            suppress_callback_exceptions=True,
            title=self.settings.app_title,
        )
        app._favicon = None
        return app


_factory = ServerFactory()


def configure_logging() -> None:
    _factory.configure_logging()


def create_server() -> Flask:
    return _factory.create_server()


def create_cache(server: Flask) -> Cache:
    return _factory.create_cache(server)


def create_app(server: Flask) -> Dash:
    return _factory.create_app(server)
