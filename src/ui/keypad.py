"""
Distribución del teclado en pantalla.

Este módulo calcula la posición de cada botón y resuelve qué tecla hay
bajo un punto (clic del ratón).
"""

from collections import namedtuple

from core.keys import (
    CLEAR, TOGGLE_SIGN, PERCENT, DIVIDE, MULTIPLY, SUBTRACT, ADD,
    DOT, EQUAL, DIGITS,
)


# Filas del teclado clásico de calculadora (None = celda ocupada por el 0 doble)
ROWS = (
    (CLEAR, TOGGLE_SIGN, PERCENT, DIVIDE),
    (DIGITS[7], DIGITS[8], DIGITS[9], MULTIPLY),
    (DIGITS[4], DIGITS[5], DIGITS[6], SUBTRACT),
    (DIGITS[1], DIGITS[2], DIGITS[3], ADD),
    (DIGITS[0], None, DOT, EQUAL),
)
COLUMNS = 4


class Button(namedtuple("Button", ["key", "x", "y", "w", "h"])):
    """Botón rectangular del teclado (coordenadas en píxeles)."""

    __slots__ = ()

    def contains(self, px, py):
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def center(self):
        return self.x + self.w // 2, self.y + self.h // 2


# ============================================================================
# CLASE: KeypadLayout
# Propósito: Geometría del teclado en pantalla
# ============================================================================
class KeypadLayout:
    """
    Teclado de 5 filas x 4 columnas bajo el display.

    Args:
        width (int): Ancho de la ventana
        height (int): Alto de la ventana
        top (int): Coordenada Y donde empieza el teclado
        margin (int): Separación entre botones
    """

    def __init__(self, width, height, top, margin=10):
        if top >= height:
            raise ValueError("El teclado no cabe en la ventana")
        self.width = width
        self.height = height
        self.top = top
        self.margin = margin
        self.buttons = self._build()

    def _build(self):
        cell_w = (self.width - self.margin) // COLUMNS
        cell_h = (self.height - self.top - self.margin) // len(ROWS)
        buttons = []
        for row, keys in enumerate(ROWS):
            for col, key in enumerate(keys):
                if key is None:
                    continue
                span = 2 if key == DIGITS[0] else 1
                x = self.margin + col * cell_w
                y = self.top + self.margin + row * cell_h
                buttons.append(Button(
                    key, x, y,
                    span * cell_w - self.margin,
                    cell_h - self.margin,
                ))
        return buttons

    def hit_test(self, x, y):
        """
        Retorna la tecla bajo el punto (x, y), o None si no hay botón.
        """
        for button in self.buttons:
            if button.contains(x, y):
                return button.key
        return None

    def button_for(self, key):
        for button in self.buttons:
            if button.key == key:
                return button
        return None
