"""Typed errors raised by the composition core."""

from __future__ import annotations


class CompositionError(Exception):
    """Base error for the composition core."""


class InvalidDirectionError(CompositionError, ValueError):
    """A direction vector was zero (or non-finite), so it has no direction."""


class EmptyInputError(CompositionError, ValueError):
    """An operation with no meaningful result on empty input got one."""


class DimensionMismatchError(CompositionError, ValueError):
    """Operands live in spaces of different dimension."""
