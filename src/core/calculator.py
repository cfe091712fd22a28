"""
Lógica de calculadora aritmética de cuatro operaciones.

Este módulo contiene la clase CalculatorEngine que reduce una secuencia de
teclas pulsadas a un acumulador numérico y a un texto de display.
"""

import math

from .keys import (
    CLEAR_KIND, TOGGLE_SIGN_KIND, NUMBER_KIND, DOT_KIND, PERCENT_KIND,
    EQUAL_KIND, ADD_KIND, SUBTRACT_KIND, MULTIPLY_KIND, DIVIDE_KIND,
    ADD, SUBTRACT, MULTIPLY, DIVIDE, DOT,
)


# Operaciones aritméticas pendientes
ADDITION = "addition"
SUBTRACTION = "subtraction"
MULTIPLICATION = "multiplication"
DIVISION = "division"

_OPERATION_BY_KIND = {
    ADD_KIND: ADDITION,
    SUBTRACT_KIND: SUBTRACTION,
    MULTIPLY_KIND: MULTIPLICATION,
    DIVIDE_KIND: DIVISION,
}

_GLYPH_BY_OPERATION = {
    ADDITION: ADD.glyph,
    SUBTRACTION: SUBTRACT.glyph,
    MULTIPLICATION: MULTIPLY.glyph,
    DIVISION: DIVIDE.glyph,
}


def operation_from_key(key):
    """Retorna la operación asociada a una tecla aritmética, o None."""
    return _OPERATION_BY_KIND.get(key.kind)


def operation_glyph(operation):
    """Glifo de una operación ('+', '-', 'x', '/'), o cadena vacía si no hay."""
    return _GLYPH_BY_OPERATION.get(operation, "")


def apply_operation(operation, first, second):
    """
    Aplica una operación aritmética a dos operandos.

    Args:
        operation (str): ADDITION, SUBTRACTION, MULTIPLICATION o DIVISION
        first (float): Primer operando (acumulador)
        second (float): Segundo operando

    Returns:
        float: Resultado. La división entre cero sigue IEEE-754
               (inf, -inf o nan), no se trata como error.

    Raises:
        AssertionError: Si no hay operación (violación de contrato)
    """
    if operation is None:
        raise AssertionError("Intento de operación indefinida")

    if operation == ADDITION:
        return first + second
    if operation == SUBTRACTION:
        return first - second
    if operation == MULTIPLICATION:
        return first * second
    if operation == DIVISION:
        if second == 0:
            # Python lanza ZeroDivisionError; el display muestra inf/nan
            if first == 0 or math.isnan(first):
                return math.nan
            return math.copysign(math.inf, first) * math.copysign(1.0, second)
        return first / second
    raise AssertionError(f"Operación desconocida: {operation!r}")


def is_number(text):
    """True si el texto es un literal numérico válido."""
    try:
        float(text)
    except ValueError:
        return False
    return True


# ============================================================================
# CLASE: EngineState
# Propósito: Estado mutable de la calculadora
# ============================================================================
class EngineState:
    """
    Estado de la calculadora.

    Variables de estado:
        - display_text: Texto mostrado (número en edición o resultado)
        - pending_operation: Operación esperando su segundo operando
        - accumulator: Resultado acumulado de la cadena de operaciones
        - last_operand: Segundo operando del último "=" (se repite con "=" "=")
        - decimal_entered: Ya se escribió el punto decimal en el número actual
        - result_finalized: Recién se pulsó "=" o "%", el próximo dígito
          empieza un número nuevo
    """

    DEFAULT_TEXT = "0"

    def __init__(self):
        self.reset()

    def reset(self):
        """Vuelve al estado inicial (equivalente a la tecla C)."""
        self.display_text = self.DEFAULT_TEXT
        self.pending_operation = None
        self.accumulator = 0.0
        self.last_operand = 0.0
        self.decimal_entered = False
        self.result_finalized = False

    def as_dict(self):
        return {
            "display_text": self.display_text,
            "pending_operation": self.pending_operation,
            "accumulator": self.accumulator,
            "last_operand": self.last_operand,
            "decimal_entered": self.decimal_entered,
            "result_finalized": self.result_finalized,
        }


# ============================================================================
# CLASE: CalculatorEngine
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir números dígito por dígito (con signo y punto decimal)
#   - Encadenar operaciones (5 + 3 x 2 se evalúa de izquierda a derecha)
#   - Repetir la última operación al pulsar "=" varias veces
#   - Calcular porcentajes
# ============================================================================
class CalculatorEngine:
    """
    Calculadora de cuatro operaciones controlada por teclas.

    Modelo de operación:
        1. Usuario pulsa dígitos → se acumulan en el display
        2. Usuario pulsa una operación → el display pasa al acumulador
           (o se resuelve la operación pendiente) y muestra el glifo
        3. Usuario pulsa dígitos del segundo operando
        4. Usuario pulsa = → se aplica la operación; pulsar = otra vez
           repite la misma operación con el mismo segundo operando
    """

    def __init__(self, config=None):
        """
        Inicializa la calculadora en estado vacío.

        Args:
            config (CalculatorConfig): Preferencias (opcional). Solo se usa
                strip_trailing_zero para formatear resultados.
        """
        self.config = config
        self.state = EngineState()

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    @property
    def display_text(self):
        return self.state.display_text

    @property
    def accumulator(self):
        return self.state.accumulator

    @property
    def pending_operation(self):
        return self.state.pending_operation

    @property
    def result_finalized(self):
        return self.state.result_finalized

    def get_display(self):
        """Texto a mostrar en el display principal."""
        return self.state.display_text

    def is_error(self):
        """True si el display muestra un resultado no finito (inf, nan)."""
        text = self.state.display_text
        return is_number(text) and not math.isfinite(float(text))

    def format_value(self, value):
        """
        Convierte el acumulador en texto para el display.

        Formateo de resultados:
            - 8.0 → "8.0" (o "8" si config.strip_trailing_zero)
            - inf → "inf", nan → "nan"
        """
        text = str(float(value))
        if self.config is not None and self.config.strip_trailing_zero:
            if text.endswith(".0"):
                text = text[:-2]
        return text

    # ------------------------------------------------------------------
    # Transiciones
    # ------------------------------------------------------------------
    def clear(self):
        self.state.reset()

    def handle(self, key):
        """
        Procesa una tecla y actualiza el estado.

        Args:
            key (Key): Tecla pulsada

        Returns:
            str: Nuevo texto del display

        Teclas no reconocidas no modifican el estado.
        """
        kind = key.kind

        if kind == CLEAR_KIND:
            self.clear()
        elif kind == TOGGLE_SIGN_KIND:
            self._toggle_sign()
        elif kind == NUMBER_KIND:
            self._digit(key)
        elif kind == DOT_KIND:
            self._dot()
        elif kind == PERCENT_KIND:
            self._percent()
        elif kind == EQUAL_KIND:
            self._equal()
        elif kind in _OPERATION_BY_KIND:
            self._operator(key)

        return self.state.display_text

    def press_sequence(self, keys):
        """
        Procesa varias teclas seguidas.

        Returns:
            list: Texto del display tras cada tecla
        """
        return [self.handle(key) for key in keys]

    def _toggle_sign(self):
        state = self.state
        if not is_number(state.display_text):
            return
        sign = SUBTRACT.glyph
        if state.display_text.startswith(sign):
            state.display_text = state.display_text[len(sign):]
        else:
            state.display_text = sign + state.display_text

    def _digit(self, key):
        state = self.state
        sign = SUBTRACT.glyph

        if state.display_text == EngineState.DEFAULT_TEXT:
            state.display_text = key.glyph
        elif state.display_text == sign + EngineState.DEFAULT_TEXT:
            state.display_text = sign + key.glyph
        elif state.result_finalized:
            self.clear()
            state.display_text = key.glyph
        elif is_number(state.display_text):
            state.display_text += key.glyph
        else:
            # El display muestra un glifo de operación
            state.display_text = key.glyph
        state.result_finalized = False

    def _dot(self):
        state = self.state
        zero_dot = EngineState.DEFAULT_TEXT + DOT.glyph

        if state.display_text == "" or state.result_finalized:
            self.clear()
            state.decimal_entered = True
            state.display_text = zero_dot
        elif not state.decimal_entered and is_number(state.display_text):
            state.decimal_entered = True
            state.display_text += DOT.glyph
        elif not state.decimal_entered:
            state.display_text = zero_dot
            state.decimal_entered = True

    def _percent(self):
        state = self.state
        if is_number(state.display_text):
            current = float(state.display_text)
            if state.pending_operation is not None and not state.result_finalized:
                state.accumulator = apply_operation(
                    state.pending_operation, state.accumulator, current) / 100
            else:
                state.accumulator = current / 100
            state.display_text = self.format_value(state.accumulator)

        state.pending_operation = None
        state.result_finalized = True
        state.decimal_entered = True

    def _equal(self):
        state = self.state
        if not is_number(state.display_text) or state.pending_operation is None:
            return

        if not state.result_finalized:
            state.last_operand = float(state.display_text)
            state.result_finalized = True

        state.accumulator = apply_operation(
            state.pending_operation, state.accumulator, state.last_operand)
        state.display_text = self.format_value(state.accumulator)

    def _operator(self, key):
        state = self.state
        if is_number(state.display_text):
            current = float(state.display_text)
            if state.pending_operation is not None and not state.result_finalized:
                state.accumulator = apply_operation(
                    state.pending_operation, state.accumulator, current)
            else:
                state.accumulator = current
                state.decimal_entered = False

        state.pending_operation = operation_from_key(key)
        state.display_text = key.glyph
        state.result_finalized = False
