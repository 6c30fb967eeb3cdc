"""Excepciones del motor de expresiones."""

from __future__ import annotations

from .types import ErrorKind


class InvalidExpressionError(ValueError):
    """La expresión postfija no se reduce a exactamente un valor finito."""

    kind = ErrorKind.INVALID_EXPRESSION
