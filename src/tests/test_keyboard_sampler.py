"""Tests for KeyboardSampler without a terminal."""

import pytest

from button_events import KeyboardSampler


class TestKeyboardSampler:

    @pytest.mark.parametrize("count", [0, 11])
    def test_button_count_limits(self, count, class_logger):
        with pytest.raises(ValueError):
            KeyboardSampler(count, class_logger)

    def test_toggle_without_terminal(self, class_logger):
        sampler = KeyboardSampler(3, class_logger)

        sampler.toggle_button(2)
        assert sampler.read_button(2) is True
        assert sampler.read_button(0) is False

        sampler.toggle_button(2)
        assert sampler.read_button(2) is False

    def test_release_all(self, class_logger):
        sampler = KeyboardSampler(2, class_logger)
        sampler.toggle_button(0)
        sampler.toggle_button(1)

        sampler.release_all()

        assert [sampler.read_button(i) for i in range(2)] == [False, False]

    def test_setup_requires_tty(self, class_logger, monkeypatch):
        sampler = KeyboardSampler(2, class_logger)
        monkeypatch.setattr(sampler, "_check_stdin_available", lambda: False)

        with pytest.raises(RuntimeError, match="not available"):
            sampler.setup()
