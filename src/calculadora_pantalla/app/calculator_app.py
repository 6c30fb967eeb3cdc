"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp: ventana de OpenCV con el
display y el teclado, clics de ratón convertidos en pulsaciones de botón.
"""

import cv2

from ..config import CalculatorConfig
from ..core.calculator import Calculator
from ..core.types import CLEAR, EVALUATE, InputCategory
from ..ui.keypad import button_at
from ..ui.renderer import UIRenderer
from ..voice.feedback import VoiceFeedback


# Colores BGR del feedback según el resultado de la pulsación
FEEDBACK_OK = (100, 255, 100)
FEEDBACK_RESULT = (0, 255, 255)
FEEDBACK_ERROR = (80, 80, 255)
FEEDBACK_CLEAR = (255, 200, 0)


# ============================================================================
class CalculatorApp:
    """
    Aplicación de calculadora en pantalla.

    Arquitectura:
        - Calculator: máquina de estados de entrada y evaluación
        - UIRenderer: display y teclado dibujados con OpenCV
        - VoiceFeedback: anuncios opcionales por voz
        - CalculatorApp: coordinador, callback de ratón y bucle principal
    """

    def __init__(self, config=None, voice=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
            voice (VoiceFeedback): Feedback por voz ya creado (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.width = self.config.width
        self.height = self.config.height

        self.calc = Calculator(self.config)
        self.ui = UIRenderer(self.width, self.height, self.config)
        self.voice = voice if voice is not None else VoiceFeedback(self.config)
        self.running = False

        if self.config.voice_enabled:
            print("✓ Feedback por voz ACTIVADO")

    def handle_click(self, x, y):
        """
        Procesa un clic sobre la ventana.

        Args:
            x, y (int): Coordenadas del clic en píxeles

        Returns:
            tuple | None: (éxito, mensaje) de la pulsación, o None si el clic
            no cae sobre ningún botón
        """
        button = button_at(self.ui.buttons, x, y)
        if button is None:
            return None
        self.ui.mark_pressed(button.label)
        return self.press(button.event)

    def press(self, event):
        """
        Envía una pulsación a la calculadora y genera el feedback.

        Feedback:
            - Verde: entrada aceptada
            - Cian: resultado de cálculo
            - Rojo: entrada rechazada o expresión inválida
            - Amarillo: todo borrado
        """
        success, message = self.calc.press(event)

        if event.category == InputCategory.ACTION and event.symbol == CLEAR:
            self.ui.show_feedback("TODO BORRADO", FEEDBACK_CLEAR)
            self.voice.speak_symbol(CLEAR)
        elif event.category == InputCategory.ACTION and event.symbol == EVALUATE:
            if success:
                self.ui.show_feedback(f"= {message}", FEEDBACK_RESULT, 60)
                self.voice.speak_result(message)
            elif message:
                self.ui.show_feedback(message, FEEDBACK_ERROR)
                self.voice.speak_error(message)
        elif success:
            self.ui.show_feedback(f"OK {event.symbol}", FEEDBACK_OK)
            self.voice.speak_symbol(event.symbol)
        else:
            self.ui.show_feedback(message, FEEDBACK_ERROR)
            self.voice.speak_error(message)

        return success, message

    def toggle_voice(self):
        """Activa o desactiva el feedback por voz (tecla 'v')."""
        self.config.voice_enabled = not self.config.voice_enabled
        status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
        print(f"🔊 Voz: {status}")
        self.ui.show_feedback(f"VOZ {status}", FEEDBACK_RESULT, 60)
        if self.config.voice_enabled:
            self.voice.speak("voz activada")

    def render(self):
        """Frame actual de la ventana."""
        frame = self.ui.render(self.calc)
        if self.config.voice_enabled:
            cv2.putText(frame, "VOZ: ON", (self.width - 110, self.height - 45),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, (0, 255, 0), 1)
        return frame

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.handle_click(x, y)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Dibujar display y teclado
            2. Mostrar frame y procesar teclas de control
            3. Los clics llegan por el callback de ratón
            4. Repetir hasta ESC, 'q' o cerrar la ventana

        Controles de teclado:
            - ESC o 'q': Salir de la aplicación
            - 'v': Activar/desactivar voz
        """
        title = self.config.window_title

        print("\n" + "=" * 50)
        print("CALCULADORA EN PANTALLA")
        print("=" * 50)
        print("\nHaz clic en los botones para escribir la expresión")
        print("Presiona ESC o 'q' para salir")
        print("Presiona 'v' para activar/desactivar voz\n")
        print("=" * 50 + "\n")

        cv2.namedWindow(title)
        cv2.setMouseCallback(title, self._on_mouse)
        self.running = True

        while self.running:
            cv2.imshow(title, self.render())

            key = cv2.waitKey(30) & 0xFF
            if key == 27 or key == ord('q'):
                break
            elif key == ord('v'):
                self.toggle_voice()

            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                break

        self.running = False
        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
