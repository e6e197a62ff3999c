# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Result types for reporting coercion failures without exceptions."""

from collections.abc import Callable
from typing import Generic, NoReturn, TypeVar, Union

from attrs import frozen
from beartype import beartype

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@frozen
class Ok(Generic[T]):
    """Successful result container."""

    value: T

    @beartype
    def is_ok(self) -> bool:
        """Check if result is Ok."""
        return True

    @beartype
    def is_err(self) -> bool:
        """Check if result is Err."""
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the success value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise ValueError as this is Ok."""
        raise ValueError("Called unwrap_err on Ok value")

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value."""
        return Ok(func(self.value))


@frozen
class Err(Generic[E]):
    """Error result container."""

    error: E

    @beartype
    def is_ok(self) -> bool:
        """Check if result is Ok."""
        return False

    @beartype
    def is_err(self) -> bool:
        """Check if result is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise ValueError as this is Err."""
        raise ValueError(f"Called unwrap on Err value: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_err(self) -> E:
        """Get the error value."""
        return self.error

    def map(self, func: Callable[[object], object]) -> "Err[E]":
        """No-op for Err values."""
        return self


Result = Union[Ok[T], Err[E]]
