"""
Módulo core con la lógica principal de la calculadora.
Contiene las teclas y la máquina de estados del cálculo.
"""

from .keys import Key
from .calculator import CalculatorEngine, EngineState

__all__ = ['Key', 'CalculatorEngine', 'EngineState']
