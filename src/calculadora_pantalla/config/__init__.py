"""
Módulo de configuración para la calculadora en pantalla.
Contiene los textos de error y las preferencias de ventana y voz.
"""

from .calculator_config import CalculatorConfig, DEFAULT_ERROR_MESSAGES

__all__ = ['CalculatorConfig', 'DEFAULT_ERROR_MESSAGES']
