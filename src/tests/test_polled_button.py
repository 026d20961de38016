"""Tests for PolledButton over a scripted sampler and a fake clock."""

import pytest

from button_events import ButtonEventConfig, PolledButton, ScriptedSampler


def _tick_until(button, clock, end_ms):
    seen = {}
    while clock.now_ms < end_ms:
        clock.advance(1)
        events = button.update()
        if events.any_event:
            seen[clock.now_ms] = events
    return seen


class TestPolledButton:

    def test_init_sets_up_sampler(self, clock):
        sampler = ScriptedSampler(2)
        button = PolledButton(sampler, 1, ButtonEventConfig(label="DOWN"), clock=clock)

        button.init()

        assert sampler.is_setup
        assert button.label == "DOWN"
        assert button.channel == 1

    def test_shared_sampler_set_up_by_each_button(self, clock):
        sampler = ScriptedSampler(2)
        buttons = [PolledButton(sampler, i, clock=clock) for i in range(2)]

        for button in buttons:
            button.init()

        assert sampler.setup_calls == 2

    def test_channel_out_of_range(self, clock):
        with pytest.raises(ValueError, match="channel 2"):
            PolledButton(ScriptedSampler(2), 2, clock=clock)

    def test_update_reports_press_hold_release(self, clock):
        sampler = ScriptedSampler(1)
        button = PolledButton(sampler, 0, clock=clock)
        button.init()

        sampler.press(0)
        events = button.update()
        assert events.short_pressed
        assert button.is_short_pressed()

        seen = _tick_until(button, clock, 900)
        assert seen[800].long_pressed
        assert seen[900].repeating

        sampler.release(0)
        clock.advance(1)
        button.update()
        assert button.is_released()
        assert button.is_long_released()
        assert not button.is_long_pressed()
        assert not button.is_repeating()

    def test_only_its_own_channel_is_read(self, clock):
        sampler = ScriptedSampler(2)
        first = PolledButton(sampler, 0, clock=clock)
        second = PolledButton(sampler, 1, clock=clock)

        sampler.press(1)
        first.update()
        second.update()

        assert not first.is_short_pressed()
        assert second.is_short_pressed()

    def test_cleanup_releases_sampler(self, clock):
        sampler = ScriptedSampler(1)
        button = PolledButton(sampler, 0, clock=clock)
        button.init()
        sampler.press(0)

        button.cleanup()

        assert not sampler.is_setup
        assert sampler.read_button(0) is False
