"""
Módulo core con la lógica principal de entrada y cálculo.
Contiene la máquina de estados, el motor postfijo y la calculadora.
"""

from .types import Allowed, ErrorKind, InputCategory, InputEvent
from .errors import InvalidExpressionError
from .rpn import convert_infix_to_postfix, evaluate_postfix
from .state import (
    CalculatorState,
    InputResult,
    apply_input,
    compute_allowed,
    render_equation,
    render_postfix_source,
    reset,
)
from .calculator import Calculator, format_result

__all__ = [
    'Allowed', 'ErrorKind', 'InputCategory', 'InputEvent',
    'InvalidExpressionError',
    'convert_infix_to_postfix', 'evaluate_postfix',
    'CalculatorState', 'InputResult', 'apply_input', 'compute_allowed',
    'render_equation', 'render_postfix_source', 'reset',
    'Calculator', 'format_result',
]
