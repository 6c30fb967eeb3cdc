"""
Lógica de calculadora aritmética con validación por pulsación.

Este módulo contiene la clase Calculator que conserva el estado de la
expresión en construcción, enruta las acciones C e = y mantiene los tres
canales de salida que dibuja la interfaz (error, expresión y resultado).
"""

import logging

from .errors import InvalidExpressionError
from .rpn import convert_infix_to_postfix, evaluate_postfix
from .state import (
    apply_input,
    has_expression,
    is_balanced,
    render_equation,
    render_postfix_source,
    reset,
)
from .types import CLEAR, EVALUATE, ErrorKind, InputCategory, InputEvent

logger = logging.getLogger(__name__)


def format_result(value, decimals=2):
    """
    Formatea el resultado para el display.

    Args:
        value (float): Resultado numérico
        decimals (int): Decimales cuando el resultado es fraccionario

    Returns:
        str: "-15" si es entero, "3.50" si es fraccionario

    El cero negativo se muestra como "0".
    """
    if value == 0:
        value = 0.0
    if float(value).is_integer():
        return f"{value:.0f}"
    return f"{value:.{decimals}f}"


# ============================================================================
# CLASE: Calculator
# Propósito: Sesión de calculadora controlada por botones
# Responsabilidades:
#   - Conservar la única copia viva del estado de entrada
#   - Validar cada pulsación con la máquina de estados
#   - Evaluar la expresión (infija → postfija → valor)
#   - Mantener los canales error / expresión / resultado
# ============================================================================
class Calculator:
    """
    Calculadora aritmética con construcción incremental validada.

    Modelo de operación:
        1. Cada botón genera un InputEvent (categoría + símbolo)
        2. C limpia todo sin validar nada
        3. = evalúa si los paréntesis están equilibrados
        4. El resto pasa por apply_input(); si se rechaza, el estado se
           conserva y el canal de error muestra el mensaje configurado

    Variables de estado:
        - state: CalculatorState actual
        - error: Texto de error ("" si no hay)
        - equation: Expresión en curso o última evaluada
        - result: Último resultado formateado
        - calculated: True si result corresponde a un cálculo terminado
        - last_postfix: Última expresión postfija evaluada (panel de depuración)
    """

    def __init__(self, config=None):
        """Inicializa calculadora en estado vacío."""
        if config is None:
            from ..config import CalculatorConfig
            config = CalculatorConfig()
        self.config = config
        self.state = reset()
        self.error = ""
        self.equation = ""
        self.result = ""
        self.calculated = False
        self.last_postfix = ""

    def message_for(self, kind):
        """Texto legible configurado para un ErrorKind."""
        return self.config.error_messages.get(kind, kind.value)

    def _set_error(self, kind):
        self.error = self.message_for(kind)
        return False, self.error

    def _set_result(self, value=""):
        self.result = value
        self.calculated = bool(value)

    def press(self, event):
        """
        Procesa la pulsación de un botón.

        Args:
            event (InputEvent): Evento del botón pulsado

        Returns:
            tuple: (éxito: bool, mensaje: str)
                - (True, "(-9)"): Entrada aceptada, mensaje = expresión
                - (True, "3.50"): Cálculo exitoso, mensaje = resultado
                - (False, "ya hay un punto decimal"): Entrada rechazada
                - (False, ""): = sin nada que evaluar
        """
        logger.debug("button pressed: %s => %s", event.category, event.symbol)

        if event.category == InputCategory.ACTION:
            if event.symbol == CLEAR:
                self.clear_all()
                return True, ""
            if event.symbol == EVALUATE:
                return self.calculate()
            raise ValueError(f"Acción desconocida: {event.symbol!r}")

        # Una expresión nueva borra el resultado anterior
        if not self.state.tokens:
            self._set_result()

        outcome = apply_input(self.state, event)
        if not outcome.ok:
            return self._set_error(outcome.error)

        self.state = outcome.state
        self.equation = render_equation(self.state)
        self.error = ""
        return True, self.equation

    def press_symbol(self, symbol):
        """Atajo: pulsa el botón cuyo texto es symbol."""
        return self.press(InputEvent.from_symbol(symbol))

    def calculate(self):
        """
        Evalúa la expresión completa.

        Returns:
            tuple: (éxito: bool, resultado: str)

        Proceso:
            1. Sin nada escrito: no hace nada
            2. Paréntesis sin cerrar: error, el estado se conserva
            3. Convierte a postfija y evalúa
            4. Éxito: muestra el resultado y reinicia el estado (la expresión
               evaluada se queda en el display marcada como calculada)
            5. Expresión inválida: error, el estado se conserva para que el
               usuario pueda corregirla
        """
        if not has_expression(self.state):
            return False, ""

        if not is_balanced(self.state):
            return self._set_error(ErrorKind.UNBALANCED_BRACKETS)

        infix = render_postfix_source(self.state)
        logger.debug("convert to infix: %s", " ".join(infix))
        try:
            postfix = convert_infix_to_postfix(infix)
            value = evaluate_postfix(postfix)
        except InvalidExpressionError as exc:
            logger.debug("evaluation failed: %s", exc)
            return self._set_error(ErrorKind.INVALID_EXPRESSION)

        self.last_postfix = " ".join(postfix)
        self.equation = render_equation(self.state)
        self._set_result(format_result(value, self.config.result_decimals))
        self.error = ""
        self.state = reset()
        logger.info("calculated %s = %s", self.equation, self.result)
        return True, self.result

    def clear_all(self):
        """
        Borra TODO el estado de la calculadora (C = Clear).

        Resetea el estado de entrada y los tres canales del display.
        """
        self.state = reset()
        self.error = ""
        self.equation = ""
        self._set_result()
        self.last_postfix = ""

    def get_expression(self):
        """Expresión en curso o última evaluada."""
        return self.equation
