"""
Preferencias de la calculadora.

Este módulo contiene la configuración centralizada de voz, formato del
display y ventana. Los valores por defecto pueden sobrescribirse con
variables de entorno con prefijo CALCULADORA_.
"""

import os


ENV_PREFIX = "CALCULADORA_"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _parse_bool(name, value):
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name}: valor booleano inválido {value!r}")


def _parse_number(name, value, cast):
    try:
        return cast(value.strip())
    except ValueError:
        raise ValueError(f"{name}: valor numérico inválido {value!r}") from None


def _check_range(name, value, minimum=None, maximum=None):
    # "not >=" también rechaza nan
    if (minimum is not None and not value >= minimum) or (maximum is not None and not value <= maximum):
        low = "" if minimum is None else minimum
        high = "" if maximum is None else maximum
        raise ValueError(f"{name}: valor fuera de rango {value!r} (esperado [{low}, {high}])")
    return value


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Preferencias de usuario de la calculadora
# Responsabilidades:
#   - Almacenar preferencias de voz (volumen, velocidad, idioma)
#   - Configurar el formato de resultados en el display
#   - Configurar dimensiones de la ventana y mensajes de feedback
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Feedback por voz configurable (volumen, velocidad, idioma)
        - Formato de resultados (quitar ".0" final)
        - Tamaño de ventana y duración de mensajes de feedback
    """

    # Variable de entorno → (atributo, conversor)
    ENV_OVERRIDES = {
        "VOICE_ENABLED": ("voice_enabled", bool),
        "VOICE_VOLUME": ("voice_volume", float),
        "VOICE_RATE": ("voice_rate", int),
        "VOICE_LANGUAGE": ("voice_language", str),
        "STRIP_TRAILING_ZERO": ("strip_trailing_zero", bool),
        "WINDOW_WIDTH": ("window_width", int),
        "WINDOW_HEIGHT": ("window_height", int),
    }

    # Atributo → (mínimo, máximo) aceptados desde el entorno
    ENV_RANGES = {
        "voice_volume": (0.0, 1.0),
        "voice_rate": (1, None),
        "window_width": (1, None),
        "window_height": (1, None),
    }

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = False          # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.strip_trailing_zero = False    # "8.0" → "8" tras = y %
        self.max_display_chars = 12         # Caracteres con fuente grande + reducida

        # ====================================================================
        # VENTANA Y FEEDBACK
        # ====================================================================
        self.window_width = 480
        self.window_height = 720
        self.show_feedback_overlay = True   # Mostrar mensajes temporales
        self.feedback_duration = 40         # Frames (~1.3 segundos @ 30fps)

    @classmethod
    def from_env(cls, environ=None):
        """
        Crea una configuración aplicando variables de entorno.

        Args:
            environ (dict): Entorno a leer (por defecto os.environ)

        Returns:
            CalculatorConfig: Configuración con los valores sobrescritos

        Raises:
            ValueError: Si alguna variable tiene un valor inválido
        """
        environ = os.environ if environ is None else environ
        config = cls()
        for suffix, (attr, cast) in cls.ENV_OVERRIDES.items():
            name = ENV_PREFIX + suffix
            value = environ.get(name)
            if value is None:
                continue
            if cast is bool:
                setattr(config, attr, _parse_bool(name, value))
            elif cast is str:
                setattr(config, attr, value.strip())
            else:
                number = _parse_number(name, value, cast)
                setattr(config, attr, _check_range(name, number, *cls.ENV_RANGES.get(attr, ())))
        return config

    def get_font_scale(self, text):
        """
        Calcula la escala de fuente del display según la longitud del texto.

        Números cortos (<8 caracteres) usan fuente grande; los largos se
        reducen hasta max_display_chars y más allá se encogen proporcionalmente.
        """
        if len(text) < 8:
            return 2.2
        if len(text) <= self.max_display_chars:
            return 1.5
        return max(0.6, 1.5 * self.max_display_chars / len(text))
