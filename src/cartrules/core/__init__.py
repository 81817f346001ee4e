from cartrules.core.app import Application
from cartrules.core.config import Config
from cartrules.core.container import Container
from cartrules.core.logging import get_logger, setup_logging
from cartrules.core.module import Module

__all__ = [
    "Application",
    "Config",
    "Container",
    "Module",
    "get_logger",
    "setup_logging",
]
