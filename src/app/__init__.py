"""
Módulo de la aplicación principal.
Contiene la clase que conecta calculadora, teclado, renderizado y voz.
"""

from .calculator_app import CalculatorApp

__all__ = ['CalculatorApp']
