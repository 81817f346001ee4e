"""Composition root: Application + pricing context + OpenAPI."""
from __future__ import annotations

from cartrules import __version__
from cartrules.core.app import Application
from cartrules.core.config import Config
from cartrules.core.logging import setup_logging
from cartrules.pricing.dispatcher import DiscountDispatcher
from cartrules.pricing.module import pricing_module


def create_app(config: Config | None = None) -> Application:
    """
    Build the HTTP service. Config defaults to Config.from_env().
    The dispatcher is resolved eagerly: a bad CARTRULES_RULES fails at startup, not per request.
    """
    config = config if config is not None else Config.from_env()
    setup_logging(config.log_level, json_format=config.log_json)
    app = Application(config=config)
    app.register(pricing_module())
    app.container.resolve(DiscountDispatcher)
    app.openapi(title="cartrules", version=__version__)
    return app
