# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Core infrastructure: configuration, logging, result types and coercion."""

from .coercion import coerce_amount, non_negative_amount, optional_date, parse_insurance_date
from .config import Settings, clear_settings_cache, get_settings
from .logging_utils import configure_logging, get_logger
from .result_types import Err, Ok, Result

__all__ = [
    "Err",
    "Ok",
    "Result",
    "Settings",
    "clear_settings_cache",
    "coerce_amount",
    "configure_logging",
    "get_logger",
    "get_settings",
    "non_negative_amount",
    "optional_date",
    "parse_insurance_date",
]
