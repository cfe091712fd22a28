"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el display, el teclado
y los mensajes de feedback sobre un lienzo de OpenCV.
"""

import cv2
import numpy as np

from config.preferences import CalculatorConfig
from core.calculator import operation_glyph


# Colores BGR
BACKGROUND = (20, 20, 20)
DISPLAY_BG = (35, 35, 35)
TEXT_WHITE = (255, 255, 255)
TEXT_RESULT = (100, 255, 100)       # Verde: resultado de cálculo
TEXT_ERROR = (100, 100, 255)        # Rojo: inf / nan
DIGIT_BG = (70, 70, 70)
CONTROL_BG = (160, 160, 160)
OPERATOR_BG = (0, 150, 255)         # Naranja
EQUAL_BG = (0, 200, 120)

DISPLAY_HEIGHT = 200


# ============================================================================
# CLASE: UIRenderer
# Propósito: Dibujar la calculadora en una ventana de OpenCV
# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: Número en edición o resultado
        2. Indicador de operación pendiente (esquina superior)
        3. Teclado: Botones de dígitos, control y operaciones
        4. Feedback: Mensajes temporales de confirmación
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Preferencias (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else CalculatorConfig()
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback

    def new_canvas(self):
        """Crea un lienzo BGR vacío del tamaño de la ventana."""
        canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        canvas[:] = BACKGROUND
        return canvas

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto config.feedback_duration)
        """
        if not self.config.show_feedback_overlay:
            return
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_duration

    def display_color(self, engine):
        """
        Color del texto del display.

        Colores del display:
            - Blanco: Número en edición
            - Verde: Resultado de = o %
            - Rojo: Resultado no finito (división entre cero)
        """
        if engine.is_error():
            return TEXT_ERROR
        if engine.result_finalized:
            return TEXT_RESULT
        return TEXT_WHITE

    def draw_display(self, img, engine):
        """
        Dibuja el display principal de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            engine (CalculatorEngine): Calculadora con estado actual
        """
        x, y, w, h = 10, 10, self.width - 20, DISPLAY_HEIGHT - 20

        cv2.rectangle(img, (x, y), (x + w, y + h), DISPLAY_BG, -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 200, 255), 2)

        # Operación pendiente en la esquina superior izquierda
        glyph = operation_glyph(engine.pending_operation)
        if glyph:
            cv2.putText(img, glyph, (x + 15, y + 40),
                        cv2.FONT_HERSHEY_SIMPLEX, 1.0, (180, 180, 180), 2)

        # Texto alineado a la derecha, fuente reducida si es largo
        display = engine.get_display()
        font_scale = self.config.get_font_scale(display)
        thickness = 3
        text_w = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, font_scale, thickness)[0][0]
        tx = max(x + 15, x + w - 15 - text_w)
        cv2.putText(img, display, (tx, y + h - 30),
                    cv2.FONT_HERSHEY_DUPLEX, font_scale, self.display_color(engine), thickness)

    def button_color(self, key):
        if key.is_arithmetic:
            return OPERATOR_BG
        if key.kind == "equal":
            return EQUAL_BG
        if key.kind in ("clear", "toggle_sign", "percent"):
            return CONTROL_BG
        return DIGIT_BG

    def draw_keypad(self, img, keypad, highlighted=None):
        """
        Dibuja los botones del teclado.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            keypad (KeypadLayout): Distribución de botones
            highlighted (Key): Última tecla pulsada (se dibuja más clara)
        """
        for button in keypad.buttons:
            color = self.button_color(button.key)
            if button.key == highlighted:
                color = tuple(min(255, c + 70) for c in color)
            x, y, w, h = button.x, button.y, button.w, button.h
            cv2.rectangle(img, (x, y), (x + w, y + h), color, -1)
            cv2.rectangle(img, (x, y), (x + w, y + h), (90, 90, 90), 1)

            label = button.key.label
            size = cv2.getTextSize(label, cv2.FONT_HERSHEY_DUPLEX, 1.1, 2)[0]
            cx, cy = button.center
            cv2.putText(img, label, (cx - size[0] // 2, cy + size[1] // 2),
                        cv2.FONT_HERSHEY_DUPLEX, 1.1, TEXT_WHITE, 2)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la parte inferior del display.

        Efecto:
            - Desaparece con fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer <= 0:
            return
        self.feedback_timer -= 1
        alpha = min(self.feedback_timer / 20.0, 1.0)

        x, y = 25, DISPLAY_HEIGHT - 10
        overlay = img.copy()
        cv2.rectangle(overlay, (x - 10, y - 30), (self.width - 25, y + 5), (40, 40, 40), -1)
        cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

        color = tuple(int(c * alpha) for c in self.feedback_color)
        cv2.putText(img, self.feedback_msg, (x, y - 5),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)

    def render(self, engine, keypad, highlighted=None):
        """Dibuja un frame completo y lo retorna."""
        frame = self.new_canvas()
        self.draw_display(frame, engine)
        self.draw_keypad(frame, keypad, highlighted)
        self.draw_feedback(frame)
        return frame
