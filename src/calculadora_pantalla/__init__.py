"""
Calculadora en pantalla con validación por pulsación.

Cada botón genera un InputEvent; la máquina de estados de core.state decide
si se admite y el motor de core.rpn evalúa la expresión terminada.
"""

from .core import Calculator, InputCategory, InputEvent
from .config import CalculatorConfig

__version__ = "1.0.0"

__all__ = ['Calculator', 'CalculatorConfig', 'InputCategory', 'InputEvent']
