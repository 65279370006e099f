"""Logger plumbing for polygraph.

Modules log under the ``polygraph`` namespace. The namespace logger owns a
single stdout handler and does not propagate, so an application embedding
polygraph keeps full control of the process root logger. Until
``configure_logging`` is called the namespace level comes from the
``POLYGRAPH_LOG_LEVEL`` environment variable (WARNING when unset).
"""
from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

NAMESPACE = 'polygraph'
LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'
LEVEL_ENV = 'POLYGRAPH_LOG_LEVEL'

Level = Union[str, int]


def parse_level(level: Optional[Level], default: int = logging.INFO) -> int:
    """Numeric logging level; names are case-insensitive and unknown names give ``default``."""
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else default


def _namespace_logger() -> logging.Logger:
    log = logging.getLogger(NAMESPACE)
    if all(isinstance(h, logging.NullHandler) for h in log.handlers):
        for h in list(log.handlers):
            log.removeHandler(h)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        if log.level == logging.NOTSET:
            log.setLevel(parse_level(os.environ.get(LEVEL_ENV), logging.WARNING))
    log.propagate = False
    return log


def configure_logging(level: Level = 'INFO', stream: Optional[IO[str]] = None,
                      fmt: Optional[str] = None) -> logging.Logger:
    """Set the namespace level and, optionally, where and how its handler prints.

    Only console handlers are redirected; file handlers keep their target.
    Returns the ``polygraph`` logger.
    """
    log = _namespace_logger()
    log.setLevel(parse_level(level))
    for handler in log.handlers:
        if not isinstance(handler, logging.StreamHandler) or isinstance(handler, logging.FileHandler):
            continue
        if stream is not None:
            handler.setStream(stream)
        if fmt is not None:
            handler.setFormatter(logging.Formatter(fmt))
    return log


def get_logger(name: str, level: Optional[Level] = None) -> logging.Logger:
    """Logger ``name`` inside the polygraph namespace.

    Bare names are prefixed, so ``'dual'`` becomes ``'polygraph.dual'``.
    Without ``level`` the logger inherits from the namespace logger.
    """
    _namespace_logger()
    if name != NAMESPACE and not name.startswith(NAMESPACE + '.'):
        name = f'{NAMESPACE}.{name}'
    log = logging.getLogger(name)
    log.setLevel(logging.NOTSET if level is None else parse_level(level))
    return log


__all__ = ['get_logger', 'configure_logging', 'parse_level', 'LEVEL_ENV']
