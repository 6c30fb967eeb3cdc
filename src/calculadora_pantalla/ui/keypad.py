"""
Teclado en pantalla: disposición de botones y detección de clics.

Cada botón lleva un par (categoría, símbolo) fijo; un clic dentro de su
rectángulo produce el InputEvent correspondiente.
"""

from ..core.types import InputCategory, InputEvent


# Disposición 5x4 (fila a fila)
KEYPAD_LAYOUT = [
    [("C", InputCategory.ACTION), ("(", InputCategory.OPERATOR),
     (")", InputCategory.OPERATOR), ("÷", InputCategory.OPERATOR)],
    [("7", InputCategory.NUMBER_DIGIT), ("8", InputCategory.NUMBER_DIGIT),
     ("9", InputCategory.NUMBER_DIGIT), ("×", InputCategory.OPERATOR)],
    [("4", InputCategory.NUMBER_DIGIT), ("5", InputCategory.NUMBER_DIGIT),
     ("6", InputCategory.NUMBER_DIGIT), ("-", InputCategory.OPERATOR)],
    [("1", InputCategory.NUMBER_DIGIT), ("2", InputCategory.NUMBER_DIGIT),
     ("3", InputCategory.NUMBER_DIGIT), ("+", InputCategory.OPERATOR)],
    [("±", InputCategory.MODIFIER), ("0", InputCategory.NUMBER_DIGIT),
     (",", InputCategory.MODIFIER), ("=", InputCategory.ACTION)],
]


class Button:
    """Botón rectangular del teclado."""

    def __init__(self, label, category, x, y, w, h):
        self.label = label
        self.category = category
        self.x, self.y, self.w, self.h = x, y, w, h

    @property
    def event(self):
        return InputEvent(self.category, self.label)

    def contains(self, px, py):
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    def __repr__(self):
        return f"<Button {self.label!r} at ({self.x}, {self.y})>"


def build_keypad(x, y, width, height, gap=10, layout=None):
    """
    Crea los botones repartiendo el área en una rejilla.

    Args:
        x, y (int): Esquina superior izquierda del teclado
        width, height (int): Tamaño total del teclado
        gap (int): Separación entre botones en píxeles
        layout (list): Filas de (etiqueta, categoría); KEYPAD_LAYOUT por defecto

    Returns:
        list[Button]
    """
    layout = layout or KEYPAD_LAYOUT
    rows = len(layout)
    cols = max(len(row) for row in layout)
    bw = (width - gap * (cols - 1)) // cols
    bh = (height - gap * (rows - 1)) // rows

    buttons = []
    for r, row in enumerate(layout):
        for c, (label, category) in enumerate(row):
            bx = x + c * (bw + gap)
            by = y + r * (bh + gap)
            buttons.append(Button(label, category, bx, by, bw, bh))
    return buttons


def button_at(buttons, px, py):
    """Botón bajo el punto (px, py), o None si el clic cae fuera."""
    for button in buttons:
        if button.contains(px, py):
            return button
    return None
