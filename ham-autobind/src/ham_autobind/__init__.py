from .descriptors import autobind
from .log import get_logger, enable_console_logging, disable_console_logging
from .utils import install, is_autobound

__all__ = ["autobind", "install", "is_autobound", "get_logger", "enable_console_logging", "disable_console_logging"]
