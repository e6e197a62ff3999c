# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Base Pydantic model configuration for all engine models.

Two flavours exist: :class:`BaseModelConfig` for values the engine produces,
which are strict and immutable, and :class:`RecordModel` for records handed in
by collaborators, which ignore unknown keys and accept camelCase input.
Both serialise with camelCase aliases.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseModelConfig(BaseModel):
    """Base model with strict configuration for all derived values.

    Enforces:
    - Immutability (frozen=True)
    - No extra fields allowed (extra="forbid")
    - camelCase serialisation aliases, population by field name
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RecordModel(BaseModel):
    """Base model for externally supplied records.

    Unknown keys are dropped so that records carrying UI or persistence
    fields (organization, object type, audit columns) can be passed through
    unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        validate_default=True,
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
