# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Central logging utilities for the premium engine.

Every module obtains its logger through :func:`get_logger` so that the root
logger is configured exactly once, with the level taken from
:class:`~premium_engine.core.config.Settings` unless the caller overrides it.
"""

from __future__ import annotations

import logging
from typing import Final

from beartype import beartype

from .config import get_settings

__all__: Final = [
    "configure_logging",
    "get_logger",
]

_DEFAULT_LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_is_configured: bool = False


@beartype
def configure_logging(
    *, level: int | None = None, fmt: str = _DEFAULT_LOG_FORMAT
) -> None:
    """Configure the root logger exactly once.

    Calling this function multiple times is safe; only the first call has an
    effect.
    """
    global _is_configured
    if _is_configured:
        return

    if level is None:
        level = get_settings().log_level_number
    logging.basicConfig(level=level, format=fmt)
    _is_configured = True


@beartype
def get_logger(name: str | None = None, *, level: int | None = None) -> logging.Logger:
    """Return a module-scoped logger that is guaranteed to be configured."""
    configure_logging()
    logger = logging.getLogger(name or "premium_engine")
    if level is not None:
        logger.setLevel(level)
    return logger
