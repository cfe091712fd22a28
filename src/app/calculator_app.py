"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from config.preferences import CalculatorConfig
from core.calculator import CalculatorEngine, is_number
from core.keys import key_from_keycode
from ui.keypad import KeypadLayout
from ui.renderer import UIRenderer, DISPLAY_HEIGHT
from voice.feedback import VoiceFeedback


WINDOW_NAME = 'Calculadora'

# Colores de feedback por tipo de tecla
FEEDBACK_COLORS = {
    "number": (100, 255, 100),
    "add": (0, 255, 0),
    "subtract": (255, 150, 0),
    "multiply": (255, 100, 255),
    "divide": (150, 100, 255),
    "equal": (0, 255, 255),
    "percent": (0, 255, 255),
    "clear": (255, 50, 50),
}


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - CalculatorEngine: Lógica aritmética y estado
        - KeypadLayout: Posición de los botones en pantalla
        - UIRenderer: Renderizado de interfaz gráfica
        - VoiceFeedback: Lectura en voz alta (opcional)
        - CalculatorApp: Coordinador y loop principal

    Entradas:
        - Clic izquierdo sobre un botón
        - Teclado: 0-9 . + - * x / % = Enter, c/Backspace (borrar), n (signo)
    """

    def __init__(self, config=None, voice=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Preferencias (opcional)
            voice (VoiceFeedback): Sistema de voz (opcional, se crea si falta)
        """
        self.config = config if config else CalculatorConfig()
        self.width = self.config.window_width
        self.height = self.config.window_height

        self.engine = CalculatorEngine(self.config)
        self.keypad = KeypadLayout(self.width, self.height, DISPLAY_HEIGHT)
        self.ui = UIRenderer(self.width, self.height, self.config)
        self.voice = voice if voice else VoiceFeedback(self.config)

        self.highlighted = None         # Última tecla pulsada
        self.running = False

    def press(self, key):
        """
        Procesa una tecla y actualiza feedback visual y de voz.

        Args:
            key (Key): Tecla pulsada

        Returns:
            str: Nuevo texto del display
        """
        committed = self._commits_result(key)
        display = self.engine.handle(key)
        self.highlighted = key

        color = FEEDBACK_COLORS.get(key.kind, (200, 200, 200))
        if committed:
            if self.engine.is_error():
                self.ui.show_feedback("Error", (255, 50, 50), 60)
            else:
                self.ui.show_feedback(f"= {display}", color, 60)
            self.voice.speak_result(display)
        elif key.kind == "clear":
            self.ui.show_feedback("TODO BORRADO", color)
            self.voice.speak_key(key)
        else:
            self.ui.show_feedback(f"OK {key.label}", color)
            self.voice.speak_key(key)
        return display

    def _commits_result(self, key):
        """
        True si la tecla va a producir un resultado.

        "=" solo calcula con una operación pendiente y un número en el
        display; "%" solo calcula con un número en el display.
        """
        display = self.engine.get_display()
        if key.kind == "equal":
            return self.engine.pending_operation is not None and is_number(display)
        if key.kind == "percent":
            return is_number(display)
        return False

    def handle_keycode(self, code):
        """
        Procesa una tecla del teclado físico.

        Args:
            code (int): Código de cv2.waitKey(...) & 0xFF

        Returns:
            bool: False si se pidió salir (ESC o 'q'), True en otro caso
        """
        if code == 255:                 # Sin tecla pulsada
            return True
        if code == 27 or code == ord('q'):
            return False

        if code == ord('v'):
            enabled = self.voice.set_enabled(not self.config.voice_enabled)
            status = "ACTIVADA" if enabled else "DESACTIVADA"
            print(f"🔊 Voz: {status}")
            self.ui.show_feedback(f"VOZ {status}", (0, 255, 255), 60)
            self.voice.speak("voz activada")
            return True

        key = key_from_keycode(code)
        if key is None:
            print(f"⚠ Tecla no reconocida: {code}")
            return True

        self.press(key)
        return True

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: clic izquierdo pulsa el botón."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        key = self.keypad.hit_test(x, y)
        if key is not None:
            self.press(key)

    def frame(self):
        """Renderiza el estado actual."""
        return self.ui.render(self.engine, self.keypad, self.highlighted)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar display y teclado
            2. Mostrar frame y esperar teclado (~30 FPS)
            3. Procesar tecla; los clics llegan por on_mouse
            4. Repetir hasta ESC o 'q'
        """
        print("\n" + "=" * 70)
        print("CALCULADORA")
        print("=" * 70)
        print("\nClic en los botones o usa el teclado:")
        print("Numeros: 0-9  Punto: .  Signo: n  Porcentaje: %")
        print("Operaciones: + - * /  Calcular: = o Enter  Borrar: c")
        if self.config.voice_enabled:
            print("\n🔊 FEEDBACK POR VOZ: Activado")
        print("\nPresiona ESC o 'q' para salir")
        print("Presiona 'v' para activar/desactivar voz\n")
        print("=" * 70 + "\n")

        cv2.namedWindow(WINDOW_NAME)
        cv2.setMouseCallback(WINDOW_NAME, self.on_mouse)
        self.running = True
        try:
            while self.running:
                cv2.imshow(WINDOW_NAME, self.frame())
                code = cv2.waitKey(33) & 0xFF
                self.running = self.handle_keycode(code)
        finally:
            cv2.destroyAllWindows()
            print("\nOK Aplicacion cerrada correctamente")
