"""
Configuración de la calculadora en pantalla.

Este módulo centraliza los textos de error, el formato de resultados, las
opciones del display y las preferencias del feedback por voz.
"""

import os

from ..core.types import ErrorKind


# Textos de error mostrados en el display (datos de configuración)
DEFAULT_ERROR_MESSAGES = {
    ErrorKind.EXPECTED_NUMBER: "se espera un número",
    ErrorKind.EXPECTED_OPERATOR: "tras cerrar paréntesis se espera un operador",
    ErrorKind.SIGN_CHANGE_NOT_ALLOWED: "no se puede cambiar el signo",
    ErrorKind.DECIMAL_POINT_ALREADY_PLACED: "el separador decimal ya está puesto",
    ErrorKind.OPEN_BRACKET_NOT_ALLOWED: "ahora no se puede abrir paréntesis",
    ErrorKind.CLOSE_BRACKET_NOT_ALLOWED: "ahora no se puede cerrar paréntesis",
    ErrorKind.OPERATOR_NOT_ALLOWED: "ahora no se puede introducir un operador",
    ErrorKind.UNBALANCED_BRACKETS: "paréntesis sin cerrar",
    ErrorKind.INVALID_EXPRESSION: "expresión incorrecta",
}


def _parse_bool(value):
    """Interpreta cadenas booleanas habituales."""
    if isinstance(value, bool):
        return value
    if value.lower() in ("true", "1", "yes", "si", "sí"):
        return True
    if value.lower() in ("false", "0", "no"):
        return False
    raise ValueError(f"No se puede interpretar '{value}' como booleano")


def _parse_int(value, name):
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} debe ser un entero. Valor: {value}") from exc


def _parse_float(value, name):
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} debe ser un número. Valor: {value}") from exc


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Preferencias de la calculadora
# Responsabilidades:
#   - Textos de error por regla gramatical
#   - Formato de resultados (decimales)
#   - Tamaño y opciones de la ventana
#   - Preferencias de voz (volumen, velocidad, idioma)
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Mensajes de error configurables (uno por ErrorKind)
        - Decimales del resultado fraccionario
        - Ventana: título, tamaño, panel de depuración postfija
        - Feedback por voz configurable (volumen, velocidad, idioma)
        - Logging en modo DEBUG
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # MENSAJES Y FORMATO
        # ====================================================================
        self.error_messages = dict(DEFAULT_ERROR_MESSAGES)
        self.result_decimals = 2            # Decimales si el resultado es fraccionario

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.width = 480                    # Ancho de la ventana en píxeles
        self.height = 720                   # Alto de la ventana en píxeles
        self.show_postfix = False           # Mostrar la última expresión postfija

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = False          # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        self.debug = False                  # Logging DEBUG (transiciones y conversiones)

    @classmethod
    def from_env(cls, environ=None):
        """
        Crea la configuración aplicando variables de entorno CALCULADORA_*.

        Args:
            environ (dict): Entorno a leer (por defecto os.environ)

        Variables:
            CALCULADORA_DEBUG, CALCULADORA_VOICE, CALCULADORA_SHOW_POSTFIX,
            CALCULADORA_VOICE_VOLUME, CALCULADORA_VOICE_RATE,
            CALCULADORA_VOICE_LANGUAGE, CALCULADORA_DECIMALS,
            CALCULADORA_WIDTH, CALCULADORA_HEIGHT

        Raises:
            ValueError: Si algún valor no es válido
        """
        env = os.environ if environ is None else environ
        config = cls()

        if "CALCULADORA_DEBUG" in env:
            config.debug = _parse_bool(env["CALCULADORA_DEBUG"])
        if "CALCULADORA_VOICE" in env:
            config.voice_enabled = _parse_bool(env["CALCULADORA_VOICE"])
        if "CALCULADORA_SHOW_POSTFIX" in env:
            config.show_postfix = _parse_bool(env["CALCULADORA_SHOW_POSTFIX"])
        if "CALCULADORA_VOICE_LANGUAGE" in env:
            config.voice_language = env["CALCULADORA_VOICE_LANGUAGE"].strip() or config.voice_language
        if "CALCULADORA_VOICE_RATE" in env:
            config.voice_rate = _parse_int(env["CALCULADORA_VOICE_RATE"], "CALCULADORA_VOICE_RATE")
        if "CALCULADORA_VOICE_VOLUME" in env:
            config.voice_volume = _parse_float(env["CALCULADORA_VOICE_VOLUME"], "CALCULADORA_VOICE_VOLUME")
        if "CALCULADORA_DECIMALS" in env:
            config.result_decimals = _parse_int(env["CALCULADORA_DECIMALS"], "CALCULADORA_DECIMALS")
        if "CALCULADORA_WIDTH" in env:
            config.width = _parse_int(env["CALCULADORA_WIDTH"], "CALCULADORA_WIDTH")
        if "CALCULADORA_HEIGHT" in env:
            config.height = _parse_int(env["CALCULADORA_HEIGHT"], "CALCULADORA_HEIGHT")

        config.validate()
        return config

    def validate(self):
        """Comprueba rangos; lanza ValueError si algo no es válido."""
        if not 0.0 <= self.voice_volume <= 1.0:
            raise ValueError(f"voice_volume debe estar entre 0 y 1, valor: {self.voice_volume}")
        if self.voice_rate <= 0:
            raise ValueError(f"voice_rate debe ser mayor que cero, valor: {self.voice_rate}")
        if self.result_decimals < 0:
            raise ValueError(f"result_decimals no puede ser negativo, valor: {self.result_decimals}")
        if self.width < 240 or self.height < 360:
            raise ValueError(f"Ventana demasiado pequeña: {self.width}x{self.height}")
