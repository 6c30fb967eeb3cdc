"""
Sistema de feedback por voz usando pyttsx3.

Este módulo anuncia en voz alta los botones aceptados, los resultados y los
errores de la calculadora, en un hilo aparte para no bloquear la ventana.
"""

import threading
from collections import deque

import pyttsx3


# Nombres en español de los símbolos del teclado
SYMBOL_NAMES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve",
    "+": "más",
    "-": "menos",
    "×": "por",
    "÷": "entre",
    "(": "abre paréntesis",
    ")": "cierra paréntesis",
    ",": "coma",
    "±": "cambio de signo",
    "C": "todo borrado",
}


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Anunciar símbolos, resultados y errores en español
#   - Ejecutar en hilo separado para no bloquear la interfaz
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Feedback por voz de la calculadora.

    Características:
        - Ejecución asíncrona (hilo daemon)
        - Cola acotada de mensajes (los más antiguos se descartan)
        - Volumen y velocidad desde CalculatorConfig
        - Si el motor no arranca, la voz queda desactivada
    """

    def __init__(self, config, engine_factory=None):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (CalculatorConfig): Configuración de la calculadora
            engine_factory (callable): Crea el motor (pyttsx3.init por defecto)
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()

        factory = engine_factory or pyttsx3.init
        try:
            self.engine = factory()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        """Aplica volumen, velocidad y, si existe, una voz del idioma configurado."""
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        prefix = f"{self.config.voice_language}-"
        for voice in self.engine.getProperty('voices') or []:
            languages = " ".join(
                lang.decode(errors="ignore") if isinstance(lang, bytes) else str(lang)
                for lang in (getattr(voice, "languages", None) or [])
            ).lower()
            if prefix in voice.id.lower() or self.config.voice_language in languages:
                self.engine.setProperty('voice', voice.id)
                print(f"✓ Voz seleccionada: {voice.name}")
                return

        print("⚠ No se encontró voz para el idioma configurado. Usando voz predeterminada.")

    @property
    def enabled(self):
        return bool(self.config.voice_enabled and self.engine)

    def speak(self, text):
        """
        Reproduce un mensaje de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.enabled or not text:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def speak_symbol(self, symbol):
        """Pronuncia el nombre de un botón (dígito, operador, paréntesis...)."""
        self.speak(SYMBOL_NAMES.get(symbol, symbol))

    def speak_result(self, result):
        """
        Reproduce el resultado de un cálculo.

        Args:
            result (str): Resultado formateado ("3.50", "-15")
        """
        text = str(result).replace("-", "menos ").replace(".", " coma ")
        self.speak(f"igual a {text}")

    def speak_error(self, message):
        self.speak(f"error, {message}")
