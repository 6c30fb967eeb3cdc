"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el display y el teclado
de la calculadora sobre un lienzo de OpenCV.
"""

import unicodedata

import cv2
import numpy as np

from .keypad import build_keypad


# Colores BGR por categoría de botón
BUTTON_COLORS = {
    "num": (70, 70, 70),
    "mod": (90, 90, 90),
    "op": (0, 140, 255),
    "act": (60, 60, 200),
}

ERROR_COLOR = (80, 80, 255)         # Rojo
EQUATION_COLOR = (180, 180, 180)    # Gris
CALCULATED_COLOR = (100, 255, 100)  # Verde


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica de la calculadora.

    Componentes visuales:
        1. Display: línea de error, expresión y resultado
        2. Teclado: rejilla de botones con resaltado del último pulsado
        3. Feedback: mensaje temporal en la parte inferior
        4. Línea postfija opcional (depuración)
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        if config is None:
            from ..config import CalculatorConfig
            config = CalculatorConfig()
        self.width = width
        self.height = height
        self.config = config
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)   # Color del feedback
        self.pressed_label = None            # Botón resaltado
        self.pressed_timer = 0

        # Zonas: display arriba (~30%), teclado debajo
        self.display_rect = (20, 20, width - 40, int(height * 0.28))
        keypad_top = self.display_rect[1] + self.display_rect[3] + 20
        self.buttons = build_keypad(20, keypad_top, width - 40, height - keypad_top - 60)

    def new_canvas(self):
        """Lienzo vacío del tamaño de la ventana."""
        return np.full((self.height, self.width, 3), 25, dtype=np.uint8)

    def show_feedback(self, msg, color=(0, 255, 0), duration=40):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration

    def mark_pressed(self, label, duration=6):
        self.pressed_label = label
        self.pressed_timer = duration

    def draw_display(self, img, calc):
        """
        Dibuja el display de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            calc (Calculator): Calculadora con los canales actuales

        Componentes:
            1. Línea de error (roja) en la parte superior
            2. Expresión: gris en curso, verde cuando ya está calculada
            3. Resultado grande en la parte inferior
        """
        x, y, w, h = self.display_rect
        cv2.rectangle(img, (x, y), (x + w, y + h), (35, 35, 35), -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 200, 255), 2)

        if calc.error:
            cv2.putText(img, _hershey_label(calc.error), (x + 15, y + 30),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, ERROR_COLOR, 2)

        equation = calc.get_expression()
        if equation:
            color = CALCULATED_COLOR if calc.calculated else EQUATION_COLOR
            scale = 0.9 if len(equation) < 22 else 0.6
            cv2.putText(img, _hershey_label(equation), (x + 15, y + 75),
                        cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2)

        if calc.result:
            scale = 2.2 if len(calc.result) < 10 else 1.4
            text_w = cv2.getTextSize(calc.result, cv2.FONT_HERSHEY_DUPLEX, scale, 3)[0][0]
            cv2.putText(img, calc.result, (x + w - 15 - text_w, y + h - 25),
                        cv2.FONT_HERSHEY_DUPLEX, scale, (255, 255, 255), 3)

        if self.config.show_postfix and calc.last_postfix:
            cv2.putText(img, f"RPN: {calc.last_postfix}", (x + 15, y + h - 8),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.45, (150, 150, 150), 1)

    def draw_keypad(self, img):
        """Dibuja los botones; el último pulsado se aclara unos frames."""
        if self.pressed_timer > 0:
            self.pressed_timer -= 1

        for button in self.buttons:
            color = BUTTON_COLORS.get(button.category.value, (70, 70, 70))
            if self.pressed_timer > 0 and button.label == self.pressed_label:
                color = tuple(min(c + 80, 255) for c in color)
            x, y, w, h = button.x, button.y, button.w, button.h
            cv2.rectangle(img, (x, y), (x + w, y + h), color, -1)
            cv2.rectangle(img, (x, y), (x + w, y + h), (120, 120, 120), 1)

            # Los símbolos no ASCII se dibujan con la fuente Hershey como texto aproximado
            text = _hershey_label(button.label)
            size = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, 1.1, 2)[0]
            cv2.putText(img, text, (x + (w - size[0]) // 2, y + (h + size[1]) // 2),
                        cv2.FONT_HERSHEY_DUPLEX, 1.1, (255, 255, 255), 2)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la parte inferior.

        Efecto:
            - Fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 20.0, 1.0)

            x, y = 20, self.height - 20
            overlay = img.copy()
            cv2.rectangle(overlay, (x - 10, y - 30), (self.width - 10, y + 10), (40, 40, 40), -1)
            cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, _hershey_label(self.feedback_msg), (x, y),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)

    def render(self, calc):
        """Dibuja un frame completo y lo devuelve."""
        img = self.new_canvas()
        self.draw_display(img, calc)
        self.draw_keypad(img)
        self.draw_feedback(img)
        return img


# Las fuentes Hershey de OpenCV solo cubren ASCII
_ASCII_LABELS = {"×": "x", "÷": "/", "±": "+/-"}


def _hershey_label(text):
    for symbol, ascii_text in _ASCII_LABELS.items():
        text = text.replace(symbol, ascii_text)
    # "número" → "numero"
    return unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
