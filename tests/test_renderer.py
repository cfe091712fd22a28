"""Tests for the OpenCV renderer (drawing onto NumPy canvases, no window)."""

import numpy as np
import pytest

from config.preferences import CalculatorConfig
from core.calculator import CalculatorEngine
from core.keys import ADD, CLEAR, DIGITS, DIVIDE, EQUAL
from ui.keypad import KeypadLayout
from ui.renderer import (
    BACKGROUND, DISPLAY_HEIGHT, OPERATOR_BG, DIGIT_BG, EQUAL_BG, CONTROL_BG,
    TEXT_ERROR, TEXT_RESULT, TEXT_WHITE, UIRenderer,
)


@pytest.fixture
def renderer():
    return UIRenderer(480, 720)


@pytest.fixture
def keypad():
    return KeypadLayout(480, 720, DISPLAY_HEIGHT)


def test_new_canvas(renderer):
    canvas = renderer.new_canvas()
    assert canvas.shape == (720, 480, 3)
    assert canvas.dtype == np.uint8
    assert tuple(canvas[0, 0]) == BACKGROUND


def test_render_draws_display_and_keypad(renderer, keypad):
    engine = CalculatorEngine()
    frame = renderer.render(engine, keypad)
    assert frame.shape == (720, 480, 3)
    blank = renderer.new_canvas()
    assert not np.array_equal(frame[:DISPLAY_HEIGHT], blank[:DISPLAY_HEIGHT])
    assert not np.array_equal(frame[DISPLAY_HEIGHT:], blank[DISPLAY_HEIGHT:])


def test_highlighted_button_is_brighter(renderer, keypad):
    engine = CalculatorEngine()
    button = keypad.button_for(DIGITS[5])
    corner = (button.y + 3, button.x + 3)
    plain = renderer.render(engine, keypad)
    lit = renderer.render(engine, keypad, highlighted=DIGITS[5])
    assert lit[corner].sum() > plain[corner].sum()


def test_display_colors(renderer):
    engine = CalculatorEngine()
    engine.handle(DIGITS[1])
    assert renderer.display_color(engine) == TEXT_WHITE
    engine.press_sequence([ADD, DIGITS[1], EQUAL])
    assert renderer.display_color(engine) == TEXT_RESULT
    engine.press_sequence([DIVIDE, DIGITS[0], EQUAL])
    assert renderer.display_color(engine) == TEXT_ERROR


def test_button_colors(renderer):
    assert renderer.button_color(ADD) == OPERATOR_BG
    assert renderer.button_color(EQUAL) == EQUAL_BG
    assert renderer.button_color(DIGITS[3]) == DIGIT_BG
    assert renderer.button_color(CLEAR) == CONTROL_BG


def test_long_result_still_renders(renderer, keypad):
    engine = CalculatorEngine()
    for _ in range(15):
        engine.handle(DIGITS[9])
    frame = renderer.render(engine, keypad)
    assert frame.shape == (720, 480, 3)


def test_feedback_fades_out(renderer):
    renderer.show_feedback("OK 5", duration=2)
    img = renderer.new_canvas()
    renderer.draw_feedback(img)
    assert renderer.feedback_timer == 1
    renderer.draw_feedback(img)
    renderer.draw_feedback(img)
    assert renderer.feedback_timer == 0


def test_feedback_disabled_by_config():
    config = CalculatorConfig()
    config.show_feedback_overlay = False
    renderer = UIRenderer(480, 720, config)
    renderer.show_feedback("OK 5")
    assert renderer.feedback_timer == 0


def test_feedback_uses_configured_duration(renderer):
    renderer.show_feedback("OK")
    assert renderer.feedback_timer == renderer.config.feedback_duration
