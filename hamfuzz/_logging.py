"""Centralized logging helpers."""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "hamfuzz"

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(component: str | None = None) -> logging.Logger:
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    return logging.getLogger(name)
