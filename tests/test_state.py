import random
import unittest

from calculadora_pantalla.core.state import (
    CalculatorState,
    apply_input,
    compute_allowed,
    format_operand,
    render_equation,
    render_postfix_source,
    reset,
)
from calculadora_pantalla.core.types import Allowed, ErrorKind, InputEvent

A = Allowed


def _feed(symbols, state=None):
    """Aplica los símbolos en orden; falla si alguno se rechaza."""
    state = state or reset()
    for symbol in symbols:
        outcome = apply_input(state, InputEvent.from_symbol(symbol))
        if not outcome.ok:
            raise AssertionError(f"{symbol!r} rechazado: {outcome.error}")
        state = outcome.state
    return state


class TestComputeAllowed(unittest.TestCase):
    def test_no_pending_operand(self):
        self.assertEqual(compute_allowed("", False, 0), {A.NUMBER, A.OPEN_BRACKET})
        self.assertEqual(
            compute_allowed("", False, 2, "("),
            {A.NUMBER, A.OPEN_BRACKET, A.CLOSE_BRACKET},
        )

    def test_pending_operand(self):
        self.assertEqual(
            compute_allowed("12", False, 0),
            {A.NUMBER, A.SIGN, A.DECIMAL_POINT, A.OPERATOR},
        )
        self.assertEqual(
            compute_allowed("12", False, 1),
            {A.NUMBER, A.SIGN, A.DECIMAL_POINT, A.OPERATOR, A.CLOSE_BRACKET},
        )

    def test_pending_operand_with_point(self):
        self.assertEqual(compute_allowed("1.5", True, 0), {A.NUMBER, A.SIGN, A.OPERATOR})

    def test_operand_ending_with_point_needs_digit(self):
        self.assertEqual(compute_allowed("1.", True, 1), {A.NUMBER, A.SIGN})

    def test_after_close_bracket(self):
        self.assertEqual(compute_allowed("", False, 0, ")"), {A.OPERATOR})
        self.assertEqual(compute_allowed("", False, 1, ")"), {A.OPERATOR, A.CLOSE_BRACKET})


class TestReset(unittest.TestCase):
    def test_empty_state(self):
        state = reset()
        self.assertEqual(state.current_number, "")
        self.assertEqual(state.current_sign, 1)
        self.assertFalse(state.has_decimal_point)
        self.assertEqual(state.open_bracket_count, 0)
        self.assertEqual(state.allowed_next, {A.NUMBER, A.OPEN_BRACKET})
        self.assertEqual(state.tokens, ())
        self.assertEqual(state, CalculatorState())


class TestApplyInput(unittest.TestCase):
    def test_digits_are_rendered_in_order(self):
        state = _feed("90210")
        self.assertEqual(render_equation(state), "90210")
        self.assertEqual(state.tokens, ())

    def test_sign_flip(self):
        state = _feed(["4", "2", "±"])
        self.assertEqual(state.current_sign, -1)
        self.assertEqual(render_equation(state), "(-42)")
        state = _feed(["±"], state)
        self.assertEqual(render_equation(state), "42")

    def test_decimal_point(self):
        state = _feed(["5", ","])
        self.assertTrue(state.has_decimal_point)
        self.assertEqual(state.current_number, "5.")
        self.assertEqual(state.allowed_next, {A.NUMBER, A.SIGN})

        outcome = apply_input(state, InputEvent.modifier(","))
        self.assertEqual(outcome.error, ErrorKind.DECIMAL_POINT_ALREADY_PLACED)
        self.assertIs(outcome.state, state)
        self.assertEqual(render_equation(outcome.state), "5.")

    def test_second_point_rejected_until_operand_finalized(self):
        state = _feed(["1", ",", "5"])
        outcome = apply_input(state, InputEvent.modifier(","))
        self.assertEqual(outcome.error, ErrorKind.DECIMAL_POINT_ALREADY_PLACED)

        state = _feed(["+", "2", ","], state)
        self.assertEqual(render_equation(state), "1.5+2.")

    def test_operator_finalizes_operand(self):
        state = _feed(["7", "±", "×"])
        self.assertEqual(state.tokens, ("(-7)", "×"))
        self.assertEqual(state.current_number, "")
        self.assertEqual(state.current_sign, 1)
        self.assertFalse(state.has_decimal_point)
        self.assertEqual(state.allowed_next, {A.NUMBER, A.OPEN_BRACKET})

    def test_brackets(self):
        state = _feed(["(", "(", "2"])
        self.assertEqual(state.open_bracket_count, 2)
        state = _feed([")"], state)
        self.assertEqual(state.tokens, ("(", "(", "2", ")"))
        self.assertEqual(state.open_bracket_count, 1)
        self.assertEqual(state.allowed_next, {A.OPERATOR, A.CLOSE_BRACKET})

    def test_rejections(self):
        cases = [
            ([], "+", ErrorKind.OPERATOR_NOT_ALLOWED),
            ([], "±", ErrorKind.SIGN_CHANGE_NOT_ALLOWED),
            ([], ")", ErrorKind.CLOSE_BRACKET_NOT_ALLOWED),
            ([], ",", ErrorKind.DECIMAL_POINT_ALREADY_PLACED),
            (["5"], "(", ErrorKind.OPEN_BRACKET_NOT_ALLOWED),
            (["5"], ")", ErrorKind.CLOSE_BRACKET_NOT_ALLOWED),
            (["5", "+"], "×", ErrorKind.OPERATOR_NOT_ALLOWED),
            (["(", "2", ")"], "3", ErrorKind.EXPECTED_OPERATOR),
            (["(", "2", ")"], "(", ErrorKind.EXPECTED_OPERATOR),
            (["(", "2", ")", "+"], ")", ErrorKind.CLOSE_BRACKET_NOT_ALLOWED),
            (["("], "-", ErrorKind.OPERATOR_NOT_ALLOWED),
            (["2", ","], "+", ErrorKind.OPERATOR_NOT_ALLOWED),
        ]
        for prefix, symbol, kind in cases:
            with self.subTest(prefix=prefix, symbol=symbol):
                state = _feed(prefix)
                outcome = apply_input(state, InputEvent.from_symbol(symbol))
                self.assertFalse(outcome.ok)
                self.assertEqual(outcome.error, kind)
                self.assertIs(outcome.state, state)

    def test_actions_are_not_transitions(self):
        with self.assertRaises(ValueError):
            apply_input(reset(), InputEvent.action("="))
        with self.assertRaises(ValueError):
            apply_input(reset(), InputEvent.action("C"))

    def test_unknown_symbols(self):
        for event in [InputEvent.digit("x"), InputEvent.modifier("%"), InputEvent.operator("^")]:
            with self.subTest(event=event):
                with self.assertRaises(ValueError):
                    apply_input(reset(), event)

    def test_prior_state_is_not_mutated(self):
        state = _feed(["3"])
        _feed(["+", "4"], state)
        self.assertEqual(state.tokens, ())
        self.assertEqual(state.current_number, "3")

    def test_invariants_hold_on_random_walk(self):
        symbols = list("0123456789") + [",", "±", "(", ")", "+", "-", "×", "÷"]
        rng = random.Random(1234)
        for _ in range(20):
            state = reset()
            for _ in range(40):
                outcome = apply_input(state, InputEvent.from_symbol(rng.choice(symbols)))
                if not outcome.ok:
                    self.assertIs(outcome.state, state)
                    continue
                state = outcome.state
                self.assertEqual(
                    state.open_bracket_count,
                    state.tokens.count("(") - state.tokens.count(")"),
                )
                self.assertGreaterEqual(state.open_bracket_count, 0)
                self.assertEqual(
                    state.allowed_next,
                    compute_allowed(
                        state.current_number,
                        state.has_decimal_point,
                        state.open_bracket_count,
                        state.last_token,
                    ),
                )
                if state.has_decimal_point:
                    self.assertIn(".", state.current_number)


class TestRendering(unittest.TestCase):
    def test_format_operand(self):
        self.assertEqual(format_operand("", -1), "")
        self.assertEqual(format_operand("5", 1), "5")
        self.assertEqual(format_operand("5", -1), "(-5)")

    def test_render_equation(self):
        state = _feed(["3", "+", "5", "±", "×", "(", "2", "-", "8"])
        self.assertEqual(render_equation(state), "3+(-5)×(2-8")

    def test_render_postfix_source_flattens_negatives(self):
        state = _feed(["(", "5", "±", "-", "3", ")", "×", "2", "±"])
        self.assertEqual(
            render_postfix_source(state),
            ["(", "-5", "-", "3", ")", "×", "-2"],
        )

    def test_render_empty(self):
        self.assertEqual(render_equation(reset()), "")
        self.assertEqual(render_postfix_source(reset()), [])


if __name__ == "__main__":
    unittest.main()
