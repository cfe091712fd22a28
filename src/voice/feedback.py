"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para leer en voz alta las teclas
pulsadas y los resultados, ejecutándose de forma asíncrona para no
bloquear la interfaz.
"""

import re
import threading
import pyttsx3
from collections import deque

from core.calculator import is_number


NUMBERS_ES = {
    0: "cero", 1: "uno", 2: "dos", 3: "tres", 4: "cuatro",
    5: "cinco", 6: "seis", 7: "siete", 8: "ocho", 9: "nueve"
}

KEYS_ES = {
    "add": "más",
    "subtract": "menos",
    "multiply": "por",
    "divide": "dividido",
    "clear": "borrar",
    "dot": "coma",
    "toggle_sign": "cambio de signo",
    "percent": "por ciento",
}


def matches_language(voice, language):
    """
    True si la voz corresponde al idioma (ej: "es").

    El idioma debe aparecer como etiqueta completa: "es", "es-MX", "es_ES",
    "roa/es"; "synthesis" o "english" no cuentan como "es".
    """
    tag = re.compile(r"(^|[^a-z])" + re.escape(language.lower()) + r"([-_.]|$)")
    if tag.search(voice.id.lower()):
        return True
    for lang in getattr(voice, "languages", None) or []:
        if isinstance(lang, bytes):
            # espeak antepone un byte de prioridad: b"\x05es"
            lang = lang.decode("utf-8", "ignore")
        lang = re.sub(r"^[^a-z]+", "", str(lang).lower())
        if tag.match(lang):
            return True
    return False


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez, máximo 5 pendientes)
        - Configuración de volumen y velocidad
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (CalculatorConfig): Preferencias de la calculadora
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self.lock = threading.Lock()         # Protege is_speaking y la cola

        if self.config.voice_enabled:
            self._start_engine()

    def _start_engine(self):
        """Crea el motor pyttsx3; si falla, desactiva la voz."""
        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        """
        Configura el motor de voz con las preferencias del usuario.
        Selecciona la primera voz cuyo id o idioma coincide con voice_language.
        """
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        language = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices'):
            if matches_language(voice, language):
                self.engine.setProperty('voice', voice.id)
                print(f"✓ Voz seleccionada: {voice.name}")
                return

        print(f"⚠ No se encontró voz para '{language}'. Usando voz predeterminada.")

    def set_enabled(self, enabled):
        """
        Activa o desactiva la voz, inicializando el motor si hace falta.

        Returns:
            bool: Estado final (False si el motor no pudo inicializarse)
        """
        self.config.voice_enabled = enabled
        if enabled and self.engine is None:
            self._start_engine()
        return self.config.voice_enabled

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine:
            return

        with self.lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            # is_speaking solo baja con el lock tomado y la cola vacía
            with self.lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def key_phrase(self, key):
        """Texto hablado para una tecla ("" para "=", que se lee con el resultado)."""
        if key.kind == "number":
            return NUMBERS_ES[key.digit]
        return KEYS_ES.get(key.kind, "")

    def result_phrase(self, display):
        """
        Texto hablado para un resultado.

        Ejemplos:
            "8.0" → "igual a 8"
            "2.5" → "igual a 2 coma 5"
            "inf" → "error"
        """
        if not is_number(display) or display.lstrip("-") in ("inf", "nan"):
            return "error"
        text = display[:-2] if display.endswith(".0") else display
        if text.startswith("-"):
            text = "menos " + text[1:]
        return "igual a " + text.replace(".", " coma ")

    def speak_key(self, key):
        phrase = self.key_phrase(key)
        if phrase:
            self.speak(phrase)

    def speak_result(self, display):
        self.speak(self.result_phrase(display))
