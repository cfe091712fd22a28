"""
Módulo de configuración de la calculadora.
Contiene las preferencias de voz, display y ventana.
"""

from .preferences import CalculatorConfig

__all__ = ['CalculatorConfig']
