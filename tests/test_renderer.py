import unittest
from unittest.mock import patch

import pytest

pytest.importorskip("cv2")

from calculadora_pantalla.config import DEFAULT_ERROR_MESSAGES
from calculadora_pantalla.core.calculator import Calculator
from calculadora_pantalla.ui.renderer import UIRenderer, _hershey_label


class TestHersheyLabel(unittest.TestCase):
    def test_operator_symbols(self):
        self.assertEqual(_hershey_label("3×(2÷1)"), "3x(2/1)")
        self.assertEqual(_hershey_label("±"), "+/-")

    def test_error_messages_are_readable(self):
        for kind, message in DEFAULT_ERROR_MESSAGES.items():
            with self.subTest(kind=kind):
                label = _hershey_label(message)
                self.assertNotIn("?", label)
                self.assertTrue(label.isascii())
                self.assertEqual(len(label), len(message))

    def test_accents_are_stripped(self):
        self.assertEqual(_hershey_label("expresión incorrecta"), "expresion incorrecta")
        self.assertEqual(_hershey_label("paréntesis sin cerrar"), "parentesis sin cerrar")


class TestUIRenderer(unittest.TestCase):
    def test_error_line_drawn_without_accents(self):
        calc = Calculator()
        for symbol in ["5", ",", ","]:
            calc.press_symbol(symbol)
        ui = UIRenderer(480, 720)
        with patch("calculadora_pantalla.ui.renderer.cv2.putText") as put_text:
            ui.draw_display(ui.new_canvas(), calc)
        texts = [call.args[1] for call in put_text.call_args_list]
        self.assertIn("el separador decimal ya esta puesto", texts)

    def test_render_frame_shape(self):
        calc = Calculator()
        calc.press_symbol("7")
        frame = UIRenderer(480, 720).render(calc)
        self.assertEqual(frame.shape, (720, 480, 3))


if __name__ == "__main__":
    unittest.main()
