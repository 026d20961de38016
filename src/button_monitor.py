#!/usr/bin/env python3
"""
Button monitor - log debounced button events live

Polls a set of buttons every millisecond and logs every press, release,
long press, long release and repeat.

Usage:
    button-monitor                        # 3 keyboard buttons (keys 0-2)
    button-monitor --keyboard 5
    button-monitor --gpio 17 27 22        # active-low buttons on BCM pins
    button-monitor --gpio 5 --active-high --long-press-ms 1500
"""

import argparse
import logging
import time
from typing import Dict, List, Optional

from button_events import (
    ButtonEventConfig,
    GPIOSampler,
    IButtonSampler,
    InputWiring,
    KeyboardSampler,
    PolledButton,
)
from utils import HybridLogger, OnceInMs

POLL_INTERVAL_S = 0.001
HEARTBEAT_MS = 10000


def build_parser() -> argparse.ArgumentParser:
    defaults = ButtonEventConfig()
    parser = argparse.ArgumentParser(
        description="Log debounced button events from GPIO pins or the keyboard",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--gpio',
        type=int,
        nargs='+',
        metavar='PIN',
        help='BCM pin numbers to monitor'
    )
    source.add_argument(
        '--keyboard',
        type=int,
        default=3,
        metavar='N',
        help='Number of keyboard buttons on digit keys (default: 3)'
    )
    parser.add_argument(
        '--active-high',
        action='store_true',
        help='GPIO pins read HIGH when pressed (default: active-low with pull-up)'
    )
    parser.add_argument('--inverted', action='store_true', help='Invert sampled levels')
    parser.add_argument('--debounce-ms', type=int, default=defaults.debounce_ms)
    parser.add_argument('--long-press-ms', type=int, default=defaults.long_press_ms)
    parser.add_argument('--repeat-start-ms', type=int, default=defaults.repeat_start_ms)
    parser.add_argument('--repeat-min-ms', type=int, default=defaults.repeat_min_ms)
    parser.add_argument('--accel-ms-per-s', type=int, default=defaults.accel_ms_per_s)
    parser.add_argument(
        '--log-dir',
        default=None,
        help='Also write a timestamped log file to this directory'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Log at DEBUG level')
    return parser


def config_from_args(args: argparse.Namespace) -> ButtonEventConfig:
    return ButtonEventConfig(
        debounce_ms=args.debounce_ms,
        long_press_ms=args.long_press_ms,
        repeat_start_ms=args.repeat_start_ms,
        repeat_min_ms=args.repeat_min_ms,
        accel_ms_per_s=args.accel_ms_per_s,
        inverted=args.inverted
    )


def build_buttons(sampler: IButtonSampler, config: ButtonEventConfig,
                  labels: List[str], logger) -> List[PolledButton]:
    return [
        PolledButton(sampler, channel, config.with_label(label), logger)
        for channel, label in enumerate(labels)
    ]


def monitor_log_levels(verbose: bool) -> Dict[str, int]:
    """
    Per-class levels for the monitor.

    The loop logs every event itself, so the buttons' own lines stay one level
    below it: silent by default, DEBUG detail (hold times, interval changes)
    with --verbose.
    """
    if verbose:
        return {"Main": logging.DEBUG, "Sampler": logging.DEBUG, "Button": logging.DEBUG}
    return {"Main": logging.INFO, "Sampler": logging.INFO, "Button": logging.WARNING}


def runMain(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    main_logger = HybridLogger(
        "button_monitor",
        log_dir=args.log_dir,
        class_levels=monitor_log_levels(args.verbose)
    )
    logger = main_logger.get_main_logger()
    button_logger = main_logger.get_class_logger("Button")
    sampler_logger = main_logger.get_class_logger("Sampler")

    try:
        config = config_from_args(args)
        config.validate()
    except ValueError as e:
        logger.error(f"Invalid timing options: {e}")
        main_logger.cleanup()
        return 2

    sampler: Optional[IButtonSampler] = None
    try:
        if args.gpio:
            wiring = InputWiring.ACTIVE_HIGH if args.active_high else InputWiring.ACTIVE_LOW
            sampler = GPIOSampler(args.gpio, wiring, sampler_logger)
            labels = [f"GPIO{pin}" for pin in args.gpio]
        else:
            sampler = KeyboardSampler(args.keyboard, sampler_logger)
            labels = [f"KEY{i}" for i in range(args.keyboard)]

        buttons = build_buttons(sampler, config, labels, button_logger)
        for button in buttons:
            button.init()

        logger.info(f"Monitoring {len(buttons)} buttons (Ctrl+C to stop)")
        heartbeat = OnceInMs(HEARTBEAT_MS)
        heartbeat.should_execute()

        while not getattr(sampler, "quit_requested", False):
            for button in buttons:
                events = button.update()
                if events.any_event:
                    logger.info(f"{button.label}: {', '.join(events.active())}")

            if heartbeat.should_execute():
                held = [b.label for b in buttons if b.machine.is_holding]
                logger.debug(f"Running... held: {held or 'none'}")

            time.sleep(POLL_INTERVAL_S)

    except KeyboardInterrupt:
        logger.info("Received shutdown signal (Ctrl+C)")
    except (ImportError, RuntimeError) as e:
        logger.error("Button monitor could not start", e)
        return 1
    finally:
        if sampler is not None:
            sampler.cleanup()
        logger.info("Button monitor stopped")
        main_logger.cleanup()

    return 0


if __name__ == "__main__":
    raise SystemExit(runMain())
