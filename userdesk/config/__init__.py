"""Configuration module for UserDesk.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

log_startup_info() -> None
    Log the active configuration at startup

Usage:
------
```python
from userdesk.config import get_logger, settings

logger = get_logger(__name__)
logger.info("Using database {}", settings.database.url)
```
"""

from .logging import get_logger, log_startup_info, setup_loguru_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "get_logger",
    "log_startup_info",
    "settings",
    "setup_loguru_logger",
]
