"""
Motor de expresiones: conversión infija → postfija y evaluación postfija.

Los operadores deben coincidir con los símbolos de los botones de la
interfaz (× y ÷, no * y /).
"""

from __future__ import annotations

import logging
import math
import operator

from .errors import InvalidExpressionError

logger = logging.getLogger(__name__)


# Prioridad de operadores (todos asociativos por la izquierda)
PRECEDENCE = {
    "+": 1,
    "-": 1,
    "×": 2,
    "÷": 2,
}

OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "×": operator.mul,
    "÷": operator.truediv,
}


def _split(tokens):
    """Acepta una secuencia de tokens o una cadena separada por espacios."""
    if isinstance(tokens, str):
        return tokens.split()
    return [token for token in tokens if token]


def is_number(token: str) -> bool:
    """True si el token es un número finito (admite signo y punto decimal)."""
    try:
        value = float(token)
    except (TypeError, ValueError):
        return False
    return math.isfinite(value)


# ============================================================================
# ALGORITMO "SHUNTING-YARD" DE DIJKSTRA
# ============================================================================
def convert_infix_to_postfix(tokens) -> list[str]:
    """
    Convierte una expresión infija en notación postfija (polaca inversa).

    Args:
        tokens: Números, operadores y paréntesis en orden de entrada. Los
            números negativos llegan ya aplanados ("-5", nunca "( -5 )").

    Returns:
        list[str]: Tokens en orden postfijo

    Ejemplo:
        "3 + 5 × ( 2 - 8 )" → ["3", "5", "2", "8", "-", "×", "+"]

    Raises:
        InvalidExpressionError: Si aparece un ")" sin su "(" correspondiente
    """
    output = []
    operators = []

    for token in _split(tokens):
        if is_number(token):
            output.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise InvalidExpressionError("Paréntesis de cierre sin apertura")
            operators.pop()  # descartar "("
        else:
            while (
                operators
                and operators[-1] != "("
                and PRECEDENCE.get(operators[-1], 0) >= PRECEDENCE.get(token, 0)
            ):
                output.append(operators.pop())
            operators.append(token)

    while operators:
        output.append(operators.pop())

    logger.debug("convert to postfix: %s", " ".join(output))
    return output


def evaluate_postfix(tokens) -> float:
    """
    Evalúa una expresión en notación postfija.

    Args:
        tokens: Secuencia de tokens postfijos (o cadena separada por espacios)

    Returns:
        float: Resultado numérico

    Raises:
        InvalidExpressionError: Pila vacía, operandos insuficientes o
            sobrantes, token desconocido, o resultado no finito (p. ej.
            división por cero)
    """
    stack = []

    for token in _split(tokens):
        if is_number(token):
            stack.append(float(token))
        elif token in OPERATIONS:
            if len(stack) < 2:
                raise InvalidExpressionError(f"Operandos insuficientes para {token!r}")
            b = stack.pop()
            a = stack.pop()
            try:
                value = OPERATIONS[token](a, b)
            except ZeroDivisionError as exc:
                raise InvalidExpressionError("División por cero") from exc
            if not math.isfinite(value):
                raise InvalidExpressionError(f"Resultado no finito: {value}")
            stack.append(value)
        else:
            raise InvalidExpressionError(f"Token desconocido: {token!r}")

    if len(stack) != 1:
        raise InvalidExpressionError(
            f"Expresión postfija inválida: quedan {len(stack)} valores en la pila"
        )

    logger.debug("evaluate postfix: %s = %s", " ".join(_split(tokens)), stack[0])
    return stack[0]
