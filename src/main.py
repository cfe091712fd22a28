"""
Punto de entrada de la calculadora.

Uso:
    python main.py                      # Ventana de OpenCV con teclado
    python main.py --keys "5 + 3 ="     # Modo guion, sin ventana
    python main.py --voice --strip-zeros
"""

import argparse
import sys

from config.preferences import CalculatorConfig
from core.calculator import CalculatorEngine
from core.keys import key_from_token


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"debe ser positivo: {text}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(prog="calculadora", description="Calculadora de cuatro operaciones")
    parser.add_argument(
        "--keys",
        type=str,
        help='Secuencia de teclas separadas por espacios (ej: "5 + 3 = =")',
    )
    parser.add_argument("--voice", action="store_true", help="Activar feedback por voz")
    parser.add_argument(
        "--strip-zeros",
        action="store_true",
        help='Mostrar "8" en lugar de "8.0" tras = y %%',
    )
    parser.add_argument("--width", type=positive_int, help="Ancho de la ventana en píxeles")
    parser.add_argument("--height", type=positive_int, help="Alto de la ventana en píxeles")
    return parser


def build_config(args, environ=None):
    """Combina variables de entorno y argumentos de línea de comandos."""
    config = CalculatorConfig.from_env(environ)
    if args.voice:
        config.voice_enabled = True
    if args.strip_zeros:
        config.strip_trailing_zero = True
    if args.width:
        config.window_width = args.width
    if args.height:
        config.window_height = args.height
    return config


def run_script(tokens, config):
    """
    Ejecuta una secuencia de teclas sin ventana e imprime el display.

    Returns:
        int: 0 si todo fue bien, 2 si algún token no es una tecla
    """
    try:
        keys = [key_from_token(token) for token in tokens]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    engine = CalculatorEngine(config)
    for token, key in zip(tokens, keys):
        print(f"{token} -> {engine.handle(key)}")
    return 0


def main(argv=None):
    """
    Ejecuta la calculadora.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre por usuario (código 130)
        - Exception general: Muestra el error (código 1)
    """
    args = build_parser().parse_args(argv)
    try:
        config = build_config(args)
        if args.keys is not None:
            return run_script(args.keys.split(), config)

        # Importado aquí: el modo guion no necesita ventana
        from app.calculator_app import CalculatorApp
        CalculatorApp(config).run()
        return 0
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
        return 130
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    sys.exit(main())
