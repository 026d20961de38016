"""Tests for GPIOSampler; mocks RPi.GPIO so tests run on any platform."""

from unittest.mock import MagicMock, patch

import pytest

from button_events import GPIOSampler, InputWiring

PINS = [17, 27]


def _mock_gpio():
    gpio = MagicMock()
    gpio.LOW = 0
    gpio.HIGH = 1
    gpio.PUD_UP = "pud_up"
    gpio.PUD_OFF = "pud_off"
    return gpio


class TestGPIOSampler:

    def test_requires_rpi_gpio(self, class_logger):
        with patch("button_events.gpio_sampler.GPIO", None):
            with pytest.raises(ImportError):
                GPIOSampler(PINS, InputWiring.ACTIVE_LOW, class_logger)

    def test_active_low_uses_pull_up(self, class_logger):
        gpio = _mock_gpio()
        with patch("button_events.gpio_sampler.GPIO", gpio):
            sampler = GPIOSampler(PINS, InputWiring.ACTIVE_LOW, class_logger)
            sampler.setup()

            for pin in PINS:
                gpio.setup.assert_any_call(pin, gpio.IN, pull_up_down="pud_up")
            gpio.setmode.assert_called_once_with(gpio.BCM)
            sampler.cleanup()

    def test_active_high_has_no_internal_pull(self, class_logger):
        gpio = _mock_gpio()
        with patch("button_events.gpio_sampler.GPIO", gpio):
            sampler = GPIOSampler(PINS, InputWiring.ACTIVE_HIGH, class_logger)
            sampler.setup()

            gpio.setup.assert_any_call(17, gpio.IN, pull_up_down="pud_off")
            sampler.cleanup()

    def test_setup_is_idempotent(self, class_logger):
        gpio = _mock_gpio()
        with patch("button_events.gpio_sampler.GPIO", gpio):
            sampler = GPIOSampler(PINS, InputWiring.ACTIVE_LOW, class_logger)
            sampler.setup()
            sampler.setup()

            assert gpio.setmode.call_count == 1
            sampler.cleanup()

    def test_read_active_low(self, class_logger):
        gpio = _mock_gpio()
        gpio.input.side_effect = lambda pin: 0 if pin == 17 else 1
        with patch("button_events.gpio_sampler.GPIO", gpio):
            sampler = GPIOSampler(PINS, InputWiring.ACTIVE_LOW, class_logger)

            assert sampler.read_button(0) is True
            assert sampler.read_button(1) is False

    def test_read_active_high(self, class_logger):
        gpio = _mock_gpio()
        gpio.input.return_value = 1
        with patch("button_events.gpio_sampler.GPIO", gpio):
            sampler = GPIOSampler(PINS, InputWiring.ACTIVE_HIGH, class_logger)

            assert sampler.read_button(1) is True
            gpio.input.assert_called_with(27)

    def test_setup_failure_is_raised(self, class_logger):
        gpio = _mock_gpio()
        gpio.setup.side_effect = RuntimeError("pin busy")
        with patch("button_events.gpio_sampler.GPIO", gpio):
            sampler = GPIOSampler(PINS, InputWiring.ACTIVE_LOW, class_logger)

            with pytest.raises(RuntimeError, match="pin busy"):
                sampler.setup()

    def test_cleanup_releases_own_pins(self, class_logger):
        gpio = _mock_gpio()
        with patch("button_events.gpio_sampler.GPIO", gpio):
            sampler = GPIOSampler(PINS, InputWiring.ACTIVE_LOW, class_logger)
            sampler.setup()
            sampler.cleanup()
            sampler.cleanup()

            gpio.cleanup.assert_called_once_with(PINS)
