"""
Definición de las teclas de la calculadora.

Este módulo contiene la clase Key (valor inmutable que representa una tecla
pulsada) y el mapeo de códigos de teclado de OpenCV a teclas.
"""

from collections import namedtuple


# Tipos de tecla reconocidos
CLEAR_KIND = "clear"
TOGGLE_SIGN_KIND = "toggle_sign"
NUMBER_KIND = "number"
DOT_KIND = "dot"
PERCENT_KIND = "percent"
EQUAL_KIND = "equal"
ADD_KIND = "add"
SUBTRACT_KIND = "subtract"
MULTIPLY_KIND = "multiply"
DIVIDE_KIND = "divide"

ARITHMETIC_KINDS = (ADD_KIND, SUBTRACT_KIND, MULTIPLY_KIND, DIVIDE_KIND)

# Texto de cada tecla (solo ASCII: las fuentes Hershey de OpenCV no dibujan × ni ÷)
_LABELS = {
    CLEAR_KIND: "C",
    TOGGLE_SIGN_KIND: "+/-",
    DOT_KIND: ".",
    PERCENT_KIND: "%",
    EQUAL_KIND: "=",
    ADD_KIND: "+",
    SUBTRACT_KIND: "-",
    MULTIPLY_KIND: "x",
    DIVIDE_KIND: "/",
}


# ============================================================================
# CLASE: Key
# Propósito: Valor inmutable de una tecla pulsada
# Responsabilidades:
#   - Identificar el tipo de tecla (dígito, operación, control)
#   - Proveer el texto de la tecla (etiqueta y glifo para el display)
#   - Convertir desde/hacia identificadores de texto ("num_5", "add")
# ============================================================================
class Key(namedtuple("Key", ["kind", "digit"])):
    """
    Tecla de la calculadora.

    Atributos:
        - kind: Tipo de tecla ("number", "add", "equal", ...)
        - digit: Dígito 0-9 si kind == "number", None en otro caso

    Identificadores de texto:
        "num_0".."num_9", "dot", "toggle_sign", "percent", "clear",
        "equal", "add", "subtract", "multiply", "divide"
    """

    __slots__ = ()

    @classmethod
    def number(cls, digit):
        """
        Crea la tecla de un dígito.

        Args:
            digit (int): Dígito 0-9

        Raises:
            ValueError: Si el dígito está fuera de rango
        """
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"Dígito inválido: {digit!r}")
        return cls(NUMBER_KIND, digit)

    @classmethod
    def from_id(cls, key_id):
        """
        Convierte un identificador de texto en tecla.

        Args:
            key_id (str): Identificador (ej: "num_5", "add", "equal")

        Returns:
            Key: Tecla correspondiente

        Raises:
            ValueError: Si el identificador no corresponde a ninguna tecla
        """
        if key_id.startswith("num_"):
            suffix = key_id[len("num_"):]
            if len(suffix) == 1 and suffix.isdigit():
                return cls.number(int(suffix))
        elif key_id in _LABELS:
            return cls(key_id, None)
        raise ValueError(f"Tecla desconocida: {key_id!r}")

    @property
    def id(self):
        if self.kind == NUMBER_KIND:
            return f"num_{self.digit}"
        return self.kind

    @property
    def label(self):
        """Texto dibujado sobre el botón del teclado."""
        if self.kind == NUMBER_KIND:
            return str(self.digit)
        return _LABELS.get(self.kind, "?")

    @property
    def glyph(self):
        """Texto canónico que la tecla escribe en el display."""
        return self.label

    @property
    def is_arithmetic(self):
        return self.kind in ARITHMETIC_KINDS

    def __repr__(self):
        return f"Key({self.id})"


# Teclas predefinidas
CLEAR = Key(CLEAR_KIND, None)
TOGGLE_SIGN = Key(TOGGLE_SIGN_KIND, None)
DOT = Key(DOT_KIND, None)
PERCENT = Key(PERCENT_KIND, None)
EQUAL = Key(EQUAL_KIND, None)
ADD = Key(ADD_KIND, None)
SUBTRACT = Key(SUBTRACT_KIND, None)
MULTIPLY = Key(MULTIPLY_KIND, None)
DIVIDE = Key(DIVIDE_KIND, None)
DIGITS = tuple(Key.number(d) for d in range(10))

ALL_KEYS = DIGITS + (CLEAR, TOGGLE_SIGN, DOT, PERCENT, EQUAL, ADD, SUBTRACT, MULTIPLY, DIVIDE)


# ============================================================================
# MAPEO DE TECLADO - Códigos devueltos por cv2.waitKey(...) & 0xFF
# ============================================================================
KEYBOARD_MAP = {
    ord("."): DOT,
    ord(","): DOT,
    ord("+"): ADD,
    ord("-"): SUBTRACT,
    ord("*"): MULTIPLY,
    ord("x"): MULTIPLY,
    ord("/"): DIVIDE,
    ord("%"): PERCENT,
    ord("="): EQUAL,
    13: EQUAL,          # Enter
    10: EQUAL,          # Enter (Linux)
    ord("c"): CLEAR,
    8: CLEAR,           # Backspace
    127: CLEAR,         # Delete / Backspace (macOS)
    ord("n"): TOGGLE_SIGN,
}
KEYBOARD_MAP.update({ord(str(d)): DIGITS[d] for d in range(10)})


def key_from_keycode(code):
    """
    Traduce un código de teclado de OpenCV a una tecla.

    Returns:
        Key o None si el código no tiene tecla asociada
    """
    return KEYBOARD_MAP.get(code)


def key_from_token(token):
    """
    Traduce un token de texto (etiqueta o identificador) a una tecla.

    Acepta etiquetas ("5", "+", "x", "=", "+/-", "C") y también "*",
    además de cualquier identificador válido para Key.from_id.

    Raises:
        ValueError: Si el token no corresponde a ninguna tecla
    """
    for key in ALL_KEYS:
        if token == key.label:
            return key
    if token == "*":
        return MULTIPLY
    if token in ("c", "AC"):
        return CLEAR
    return Key.from_id(token)
