"""
Punto de entrada: python -m calculadora_pantalla
"""

import logging
import traceback

from .config import CalculatorConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug=False):
    """Logging de la aplicación; DEBUG traza transiciones y conversiones."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
    )


def main():
    """
    Arranca la calculadora con la configuración del entorno.

    Manejo de errores:
        - Configuración inválida: mensaje y código 2
        - KeyboardInterrupt (Ctrl+C): cierre limpio
        - Exception general: muestra el traceback y código 1
    """
    try:
        config = CalculatorConfig.from_env()
    except ValueError as e:
        print(f"Error de configuración: {e}")
        return 2

    configure_logging(config.debug)

    # OpenCV solo se importa al abrir la ventana
    from .app import CalculatorApp

    try:
        app = CalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
