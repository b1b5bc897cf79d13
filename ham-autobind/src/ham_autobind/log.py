import logging
from typing import Optional

ROOT_LOGGER_NAME = "ham_autobind"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_NULL_HANDLER_NAME = f"{ROOT_LOGGER_NAME}-null"
_CONSOLE_HANDLER_NAME = f"{ROOT_LOGGER_NAME}-console"

# level the package logger had before the console handler was attached
_level_before_console: Optional[int] = None
_console_level: Optional[int] = None


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # silent unless the application opts in (idempotent)
    if not any(h.get_name() == _NULL_HANDLER_NAME for h in root.handlers):
        nh = logging.NullHandler()
        nh.set_name(_NULL_HANDLER_NAME)
        root.addHandler(nh)
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for a module name.

    Args:
        name: dotted module name; names outside the package are nested under it
    """
    root = _root()
    if not name or name == ROOT_LOGGER_NAME:
        return root
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return root.getChild(name)


def enable_console_logging(level: int = logging.DEBUG, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again only updates the level and format of the existing handler.

    Args:
        level: minimum level for console output
        fmt: log message format string
    """
    global _level_before_console, _console_level
    root = _root()

    for h in root.handlers:
        if h.get_name() == _CONSOLE_HANDLER_NAME:
            h.setLevel(level)
            h.setFormatter(logging.Formatter(fmt))
            root.setLevel(level)
            _console_level = level
            return root

    try:
        ch = logging.StreamHandler()
        ch.set_name(_CONSOLE_HANDLER_NAME)
        ch.setLevel(level)
        ch.setFormatter(logging.Formatter(fmt))
    except (TypeError, ValueError) as e:
        raise RuntimeError(f"Failed to create console handler: {e}")
    _level_before_console = root.level
    root.addHandler(ch)
    root.setLevel(level)
    _console_level = level
    return root


def disable_console_logging() -> None:
    """Remove the console handler added by enable_console_logging, if any.

    The logger level is restored only if it is still the one
    enable_console_logging set.
    """
    global _level_before_console, _console_level
    root = _root()
    removed = False
    for h in list(root.handlers):
        if h.get_name() == _CONSOLE_HANDLER_NAME:
            root.removeHandler(h)
            h.close()
            removed = True
    if removed and _level_before_console is not None and root.level == _console_level:
        root.setLevel(_level_before_console)
    _level_before_console = _console_level = None
