import unittest

from calculadora_pantalla.core.types import InputCategory, InputEvent
from calculadora_pantalla.ui.keypad import KEYPAD_LAYOUT, build_keypad, button_at


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.buttons = build_keypad(0, 0, 400, 500, gap=10)

    def test_every_layout_entry_is_a_button(self):
        self.assertEqual(len(self.buttons), sum(len(row) for row in KEYPAD_LAYOUT))
        labels = {button.label for button in self.buttons}
        for symbol in list("0123456789") + ["+", "-", "×", "÷", "(", ")", ",", "±", "C", "="]:
            with self.subTest(symbol=symbol):
                self.assertIn(symbol, labels)

    def test_button_events_match_symbol_categories(self):
        for button in self.buttons:
            with self.subTest(label=button.label):
                self.assertEqual(button.event, InputEvent.from_symbol(button.label))

    def test_grid_geometry(self):
        first = self.buttons[0]
        self.assertEqual((first.x, first.y, first.w, first.h), (0, 0, 92, 92))
        last = self.buttons[-1]
        self.assertEqual((last.x, last.y), (306, 408))

    def test_button_at(self):
        self.assertEqual(button_at(self.buttons, 5, 5).label, "C")
        self.assertEqual(button_at(self.buttons, 310, 410).label, "=")
        self.assertEqual(button_at(self.buttons, 310, 410).category, InputCategory.ACTION)

    def test_click_outside_buttons(self):
        self.assertIsNone(button_at(self.buttons, 96, 5))
        self.assertIsNone(button_at(self.buttons, 1000, 1000))


if __name__ == "__main__":
    unittest.main()
