"""
Máquina de estados de entrada de la calculadora.

Cada pulsación se valida contra el estado actual y produce un estado nuevo;
los estados son inmutables y el llamador conserva la única copia viva. Un
evento rechazado devuelve el mismo estado junto con el tipo de error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from .types import (
    ARITHMETIC_OPERATORS,
    CLOSE_BRACKET,
    DECIMAL_POINT,
    OPEN_BRACKET,
    SIGN_TOGGLE,
    Allowed,
    ErrorKind,
    InputCategory,
    InputEvent,
)

logger = logging.getLogger(__name__)


# Error que se informa cuando falla cada puerta de validación
GATE_ERRORS = {
    Allowed.NUMBER: ErrorKind.EXPECTED_NUMBER,
    Allowed.SIGN: ErrorKind.SIGN_CHANGE_NOT_ALLOWED,
    Allowed.DECIMAL_POINT: ErrorKind.DECIMAL_POINT_ALREADY_PLACED,
    Allowed.OPEN_BRACKET: ErrorKind.OPEN_BRACKET_NOT_ALLOWED,
    Allowed.CLOSE_BRACKET: ErrorKind.CLOSE_BRACKET_NOT_ALLOWED,
    Allowed.OPERATOR: ErrorKind.OPERATOR_NOT_ALLOWED,
}


def compute_allowed(current_number, has_decimal_point, open_bracket_count, last_token=None):
    """
    Calcula las entradas admisibles a partir de los campos del estado.

    Args:
        current_number (str): Número pendiente ("" si no hay)
        has_decimal_point (bool): Si el número pendiente ya tiene punto
        open_bracket_count (int): Paréntesis abiertos sin cerrar
        last_token (str | None): Último token finalizado

    Returns:
        frozenset[Allowed]

    Reglas:
        - Sin número pendiente: número y "(" (")" si hay paréntesis abiertos)
        - Tras ")": el grupo cerrado es un operando completo, se admite
          operador (y ")" si quedan abiertos)
        - Número pendiente: número, signo, operador, punto si aún no hay,
          ")" si hay abiertos; nunca "(" a mitad de número
        - Número terminado en punto: solo dígito o signo
    """
    allowed = set()
    if current_number:
        allowed.update((Allowed.NUMBER, Allowed.SIGN))
        if current_number.endswith("."):
            return frozenset(allowed)
        if not has_decimal_point:
            allowed.add(Allowed.DECIMAL_POINT)
        allowed.add(Allowed.OPERATOR)
    elif last_token == CLOSE_BRACKET:
        allowed.add(Allowed.OPERATOR)
    else:
        allowed.update((Allowed.NUMBER, Allowed.OPEN_BRACKET))

    if open_bracket_count > 0:
        allowed.add(Allowed.CLOSE_BRACKET)
    return frozenset(allowed)


@dataclass(frozen=True)
class CalculatorState:
    """
    Estado de la expresión en construcción.

    Atributos:
        - current_number: Dígitos del operando pendiente (con punto como ".")
        - current_sign: 1 o -1, se aplica al finalizar el operando
        - has_decimal_point: Si el operando pendiente tiene punto
        - open_bracket_count: Paréntesis "(" sin cerrar
        - allowed_next: Entradas admisibles (derivado de los demás campos)
        - tokens: Operandos, operadores y paréntesis ya finalizados
    """
    current_number: str = ""
    current_sign: int = 1
    has_decimal_point: bool = False
    open_bracket_count: int = 0
    allowed_next: frozenset = field(
        default_factory=lambda: frozenset((Allowed.NUMBER, Allowed.OPEN_BRACKET))
    )
    tokens: tuple = ()

    @property
    def last_token(self):
        return self.tokens[-1] if self.tokens else None

    def allows(self, entry: Allowed) -> bool:
        return entry in self.allowed_next


@dataclass(frozen=True)
class InputResult:
    """Resultado de una transición: estado siguiente o error con el estado previo."""
    state: CalculatorState
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def reset() -> CalculatorState:
    """Estado vacío: sin número, signo +1, sin paréntesis ni tokens."""
    return CalculatorState()


def format_operand(number: str, sign: int) -> str:
    """Formatea el operando: "N" si es positivo, "(-N)" si es negativo."""
    if not number:
        return ""
    if sign > 0:
        return number
    return f"(-{number})"


def _recompute(state: CalculatorState) -> CalculatorState:
    return replace(
        state,
        allowed_next=compute_allowed(
            state.current_number,
            state.has_decimal_point,
            state.open_bracket_count,
            state.last_token,
        ),
    )


def finalize_operand(state: CalculatorState) -> CalculatorState:
    """Cierra el operando pendiente (si existe) y lo añade a los tokens."""
    if not state.current_number:
        return state
    return replace(
        state,
        tokens=state.tokens + (format_operand(state.current_number, state.current_sign),),
        current_number="",
        current_sign=1,
        has_decimal_point=False,
    )


def _gate(state: CalculatorState, entry: Allowed):
    if state.allows(entry):
        return None
    # Tras ")" solo cabe un operador: un dígito o "(" piden operador
    if (
        entry in (Allowed.NUMBER, Allowed.OPEN_BRACKET)
        and not state.current_number
        and state.last_token == CLOSE_BRACKET
    ):
        return InputResult(state, ErrorKind.EXPECTED_OPERATOR)
    return InputResult(state, GATE_ERRORS[entry])


# ============================================================================
# MANEJADORES DE ENTRADA
# ============================================================================
def _input_digit(state, digit):
    return replace(state, current_number=state.current_number + digit)


def _input_sign(state):
    return replace(state, current_sign=state.current_sign * -1)


def _input_decimal_point(state):
    return replace(state, current_number=state.current_number + ".", has_decimal_point=True)


def _input_open_bracket(state):
    state = finalize_operand(state)
    return replace(
        state,
        tokens=state.tokens + (OPEN_BRACKET,),
        open_bracket_count=state.open_bracket_count + 1,
    )


def _input_close_bracket(state):
    state = finalize_operand(state)
    return replace(
        state,
        tokens=state.tokens + (CLOSE_BRACKET,),
        open_bracket_count=state.open_bracket_count - 1,
    )


def _input_operator(state, symbol):
    state = finalize_operand(state)
    return replace(state, tokens=state.tokens + (symbol,))


def _route(event: InputEvent):
    """Devuelve (entrada requerida, manejador) para el evento."""
    category, symbol = event.category, event.symbol
    if category == InputCategory.NUMBER_DIGIT:
        if len(symbol) == 1 and symbol.isdigit():
            return Allowed.NUMBER, lambda s: _input_digit(s, symbol)
    elif category == InputCategory.MODIFIER:
        if symbol == DECIMAL_POINT:
            return Allowed.DECIMAL_POINT, _input_decimal_point
        if symbol == SIGN_TOGGLE:
            return Allowed.SIGN, _input_sign
    elif category == InputCategory.OPERATOR:
        if symbol == OPEN_BRACKET:
            return Allowed.OPEN_BRACKET, _input_open_bracket
        if symbol == CLOSE_BRACKET:
            return Allowed.CLOSE_BRACKET, _input_close_bracket
        if symbol in ARITHMETIC_OPERATORS:
            return Allowed.OPERATOR, lambda s: _input_operator(s, symbol)
    elif category == InputCategory.ACTION:
        raise ValueError(f"La acción {symbol!r} no es una transición de entrada")
    raise ValueError(f"Evento desconocido: {category!r} {symbol!r}")


def apply_input(state: CalculatorState, event: InputEvent) -> InputResult:
    """
    Valida y aplica una pulsación.

    Args:
        state (CalculatorState): Estado actual
        event (InputEvent): Pulsación (dígito, modificador u operador)

    Returns:
        InputResult: Estado siguiente, o el mismo estado con el ErrorKind de
        la regla incumplida

    Raises:
        ValueError: Si el evento es una acción (C, =) o un símbolo desconocido
    """
    required, handler = _route(event)
    rejected = _gate(state, required)
    if rejected is not None:
        logger.debug("rejected %s: %s", event.symbol, rejected.error.value)
        return rejected

    next_state = _recompute(handler(state))
    logger.debug("state change on %s: %s", event.symbol, next_state)
    return InputResult(next_state)


# ============================================================================
# RENDERIZADO DEL ESTADO
# ============================================================================
def render_equation(state: CalculatorState) -> str:
    """Expresión para el display: tokens seguidos del operando pendiente."""
    return "".join(state.tokens) + format_operand(state.current_number, state.current_sign)


def _flatten(token: str) -> str:
    # "(-5)" → "-5"; los paréntesis estructurales se conservan
    if token in (OPEN_BRACKET, CLOSE_BRACKET):
        return token
    return token.replace(OPEN_BRACKET, "").replace(CLOSE_BRACKET, "")


def render_postfix_source(state: CalculatorState) -> list[str]:
    """Tokens infijos listos para convertir, con los negativos aplanados."""
    items = list(state.tokens)
    if state.current_number:
        items.append(format_operand(state.current_number, state.current_sign))
    return [_flatten(token) for token in items]


def has_expression(state: CalculatorState) -> bool:
    return bool(state.tokens) or bool(state.current_number)


def is_balanced(state: CalculatorState) -> bool:
    return state.open_bracket_count == 0
