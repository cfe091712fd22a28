"""
Módulo de interfaz de usuario.
Contiene el renderizador de UI y la distribución del teclado.
"""

from .keypad import KeypadLayout
from .renderer import UIRenderer

__all__ = ['KeypadLayout', 'UIRenderer']
