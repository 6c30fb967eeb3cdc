"""
Módulo de interfaz de usuario.
Contiene el teclado en pantalla; el renderizador (OpenCV) está en ui.renderer.
"""

from .keypad import Button, KEYPAD_LAYOUT, build_keypad, button_at

__all__ = ['Button', 'KEYPAD_LAYOUT', 'build_keypad', 'button_at']
