# Utils module
from .logging import setup_logging
from .observability import Logger, StructlogConfig, initialize_observability

__all__ = [
    "setup_logging",
    "Logger",
    "StructlogConfig",
    "initialize_observability",
]
