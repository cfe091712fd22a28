"""Shared fixtures."""

import pytest


class FakeVoice:
    """Records what the app asks the voice system to say."""

    def __init__(self):
        self.spoken = []
        self.enabled = False

    def speak(self, text):
        self.spoken.append(text)

    def speak_key(self, key):
        self.spoken.append(key.id)

    def speak_result(self, display):
        self.spoken.append(f"result:{display}")

    def set_enabled(self, enabled):
        self.enabled = enabled
        return enabled


@pytest.fixture
def fake_voice():
    return FakeVoice()
