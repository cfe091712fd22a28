"""Tests for CalculatorApp input handling (no window is opened)."""

import cv2
import pytest

from app.calculator_app import CalculatorApp
from config.preferences import CalculatorConfig
from core.keys import ADD, CLEAR, DIGITS, EQUAL, PERCENT


@pytest.fixture
def app(fake_voice):
    return CalculatorApp(CalculatorConfig(), voice=fake_voice)


def type_codes(app, text):
    return [app.handle_keycode(ord(ch)) for ch in text]


def test_keyboard_input(app):
    assert all(type_codes(app, "12+3="))
    assert app.engine.get_display() == "15.0"
    assert app.highlighted == EQUAL


def test_enter_key_computes(app):
    type_codes(app, "6*7")
    app.handle_keycode(13)
    assert app.engine.get_display() == "42.0"


def test_exit_keys(app):
    assert app.handle_keycode(27) is False
    assert app.handle_keycode(ord("q")) is False


def test_no_key_pressed(app):
    assert app.handle_keycode(255) is True
    assert app.highlighted is None


def test_unmapped_key_is_reported(app, capsys):
    assert app.handle_keycode(ord("z")) is True
    assert app.engine.get_display() == "0"
    assert "no reconocida" in capsys.readouterr().out


def test_voice_toggle(app, fake_voice):
    assert app.handle_keycode(ord("v")) is True
    assert fake_voice.enabled is True
    assert app.ui.feedback_msg == "VOZ ACTIVADA"


def test_press_speaks_keys_and_results(app, fake_voice):
    for key in (DIGITS[4], ADD, DIGITS[4], EQUAL, CLEAR):
        app.press(key)
    assert fake_voice.spoken == ["num_4", "add", "num_4", "result:8.0", "clear"]


def test_repeated_equals_announces_each_result(app, fake_voice):
    type_codes(app, "5+5==")
    assert fake_voice.spoken[-2:] == ["result:10.0", "result:15.0"]


@pytest.mark.parametrize("text, display, last_key", [
    ("5+=", "+", EQUAL),
    ("5+%", "+", PERCENT),
    ("5=", "5", EQUAL),
])
def test_keys_that_compute_nothing_announce_no_result(app, fake_voice, text, display, last_key):
    type_codes(app, text)
    assert app.engine.get_display() == display
    assert not any(s.startswith("result:") for s in fake_voice.spoken)
    assert fake_voice.spoken[-1] == last_key.id
    assert app.ui.feedback_msg == f"OK {text[-1]}"


def test_percent_announces_result(app, fake_voice):
    type_codes(app, "50%")
    assert fake_voice.spoken[-1] == "result:0.5"
    assert app.ui.feedback_msg == "= 0.5"


def test_error_feedback(app):
    type_codes(app, "1/0=")
    assert app.engine.get_display() == "inf"
    assert app.ui.feedback_msg == "Error"


def test_result_feedback(app):
    type_codes(app, "2+2=")
    assert app.ui.feedback_msg == "= 4.0"


def test_mouse_click_presses_button(app):
    x, y = app.keypad.button_for(DIGITS[8]).center
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, x, y, 0, None)
    assert app.engine.get_display() == "8"


def test_mouse_ignores_other_events_and_empty_areas(app):
    x, y = app.keypad.button_for(DIGITS[8]).center
    app.on_mouse(cv2.EVENT_MOUSEMOVE, x, y, 0, None)
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, 5, 5, 0, None)
    assert app.engine.get_display() == "0"
    assert app.highlighted is None


def test_frame(app):
    frame = app.frame()
    assert frame.shape == (app.height, app.width, 3)


def test_window_size_from_config(fake_voice):
    config = CalculatorConfig()
    config.window_width, config.window_height = 400, 640
    app = CalculatorApp(config, voice=fake_voice)
    assert app.frame().shape == (640, 400, 3)
