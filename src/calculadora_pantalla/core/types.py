"""
Tipos compartidos por la máquina de estados de entrada y la calculadora.

Los botones de la interfaz generan eventos InputEvent con una categoría y un
símbolo fijos; la máquina de estados decide qué categorías se admiten a
continuación (Allowed) y, si rechaza un evento, informa el tipo de error
(ErrorKind).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InputCategory(str, Enum):
    """Categorías de botón (mismo marcado que el panel original: num/mod/op/act)."""
    NUMBER_DIGIT = "num"
    MODIFIER = "mod"
    OPERATOR = "op"
    ACTION = "act"


class Allowed(Enum):
    """Entradas admisibles para la siguiente pulsación."""
    NUMBER = "number"
    SIGN = "sign"
    DECIMAL_POINT = "decimal_point"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    OPERATOR = "operator"


class ErrorKind(str, Enum):
    """Una regla gramatical incumplida por cada valor."""
    EXPECTED_NUMBER = "expected_number"
    EXPECTED_OPERATOR = "expected_operator"
    SIGN_CHANGE_NOT_ALLOWED = "sign_change_not_allowed"
    DECIMAL_POINT_ALREADY_PLACED = "decimal_point_already_placed"
    OPEN_BRACKET_NOT_ALLOWED = "open_bracket_not_allowed"
    CLOSE_BRACKET_NOT_ALLOWED = "close_bracket_not_allowed"
    OPERATOR_NOT_ALLOWED = "operator_not_allowed"
    UNBALANCED_BRACKETS = "unbalanced_brackets"
    INVALID_EXPRESSION = "invalid_expression"


# Símbolos de los botones
DECIMAL_POINT = ","
SIGN_TOGGLE = "±"
OPEN_BRACKET = "("
CLOSE_BRACKET = ")"
ARITHMETIC_OPERATORS = ("+", "-", "×", "÷")
CLEAR = "C"
EVALUATE = "="


@dataclass(frozen=True)
class InputEvent:
    """Pulsación de un botón: categoría y símbolo fijados al crear el panel."""
    category: InputCategory
    symbol: str

    @classmethod
    def digit(cls, symbol: str) -> "InputEvent":
        return cls(InputCategory.NUMBER_DIGIT, symbol)

    @classmethod
    def modifier(cls, symbol: str) -> "InputEvent":
        return cls(InputCategory.MODIFIER, symbol)

    @classmethod
    def operator(cls, symbol: str) -> "InputEvent":
        return cls(InputCategory.OPERATOR, symbol)

    @classmethod
    def action(cls, symbol: str) -> "InputEvent":
        return cls(InputCategory.ACTION, symbol)

    @classmethod
    def from_symbol(cls, symbol: str) -> "InputEvent":
        """
        Construye el evento a partir del texto de un botón.

        Raises:
            ValueError: Si el símbolo no corresponde a ningún botón
        """
        if symbol.isdigit() and len(symbol) == 1:
            return cls.digit(symbol)
        if symbol in (DECIMAL_POINT, SIGN_TOGGLE):
            return cls.modifier(symbol)
        if symbol in ARITHMETIC_OPERATORS or symbol in (OPEN_BRACKET, CLOSE_BRACKET):
            return cls.operator(symbol)
        if symbol in (CLEAR, EVALUATE):
            return cls.action(symbol)
        raise ValueError(f"Símbolo de botón desconocido: {symbol!r}")
