"""Package logging for stash_labels.

Every module logs through a child of the ``stash_labels`` logger. Only that
package logger carries handlers, so LOG_LEVEL, LOG_FILE or the CLI's
``--log-level`` switch change all stages at once.
"""

import logging
import os
from typing import Optional, Union

PACKAGE_LOGGER = "stash_labels"

_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_HANDLER_MARK = "_stash_labels_handler"


def parse_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """Map "debug", "WARN", 10, ... to a logging level; unknown values give default."""
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        name = value.strip().upper()
        if name == "WARN":
            name = "WARNING"
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
    return default


def _own_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]


def configure_logging(level: Union[str, int, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """(Re)configure the package logger and return it.

    level and log_file default to LOG_LEVEL (INFO when unset) and LOG_FILE.
    Handlers installed by an earlier call are closed and replaced, so the
    CLI can raise verbosity after modules have already fetched loggers.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER)
    for h in _own_handlers(pkg):
        pkg.removeHandler(h)
        h.close()

    lvl = parse_level(level if level is not None else os.environ.get("LOG_LEVEL"))
    pkg.setLevel(lvl)
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    handlers = [logging.StreamHandler()]
    path = log_file if log_file is not None else os.environ.get("LOG_FILE")
    file_error = None
    if path:
        try:
            handlers.append(logging.FileHandler(path, encoding="utf-8"))
        except OSError as e:
            file_error = e
    for h in handlers:
        h.setFormatter(formatter)
        setattr(h, _HANDLER_MARK, True)
        pkg.addHandler(h)

    pkg.propagate = False
    if file_error is not None:
        pkg.warning(f"Log file {path} could not be opened ({file_error}); logging to stderr only")
    return pkg


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, nested under the package logger.

    Accepts a dotted module path (``__name__``) or a short stage name; the
    package logger is configured from the environment on first use.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER)
    if not _own_handlers(pkg):
        configure_logging()
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return pkg.getChild(name)
