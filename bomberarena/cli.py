"""Command line entry point: run a multi-threaded bot tournament and print the scores."""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from bomberarena.roster import available_bots
from bomberarena.tournament import DEFAULT_TIME_LIMIT, BotScores, run_tournament

STATUS_INTERVAL = 0.25

DEFAULT_BOT_CONFIGS = [
    (1, "Bot1-Easy"),
    (1, "Bot-Easy2"),
    (0, "Bot3-Random"),
    (0, "Bot4-Random"),
]


class _RoundCounters:
    """Per-thread game counts shared with the status printer."""

    def __init__(self, size: int) -> None:
        self._lock = threading.Lock()
        self._counts = [0] * size

    def update(self, index: int, value: int) -> None:
        with self._lock:
            if index < len(self._counts):
                self._counts[index] = value

    def total(self) -> int:
        with self._lock:
            return sum(self._counts)


def _report_status(counters: _RoundCounters, start: float, done: threading.Event) -> None:
    while True:
        finished = done.wait(STATUS_INTERVAL)
        total = counters.total()
        elapsed = max(time.monotonic() - start, 1e-9)
        speed = total / elapsed / 1000.0
        sys.stdout.write(f"Total: {total}, Speed: {speed:.1f}K rounds/s\r")
        sys.stdout.flush()
        if finished:
            break
    print()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a bot tournament.")
    parser.add_argument(
        "--threads",
        type=int,
        default=os.cpu_count() or 1,
        help="number of tournament threads (default: number of CPUs)",
    )
    parser.add_argument(
        "--seconds",
        type=float,
        default=DEFAULT_TIME_LIMIT,
        help="time limit of each tournament thread in seconds",
    )
    args = parser.parse_args(argv)
    if args.threads < 1:
        parser.error("--threads must be at least 1")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    constructors = available_bots()
    print(f"Useful threads: {args.threads}")

    start = time.monotonic()
    counters = _RoundCounters(args.threads)
    done = threading.Event()
    status = threading.Thread(target=_report_status, args=(counters, start, done), daemon=True)
    status.start()

    grand_totals = BotScores()
    try:
        with ThreadPoolExecutor(max_workers=args.threads) as pool:
            futures = [
                pool.submit(
                    run_tournament,
                    constructors,
                    list(DEFAULT_BOT_CONFIGS),
                    partial(counters.update, index),
                    args.seconds,
                )
                for index in range(args.threads)
            ]
            for future in futures:
                grand_totals.merge_with(future.result())
    finally:
        done.set()
        status.join()

    print(f"Final Scores after {grand_totals.total_games} games:")
    for bot, score in grand_totals.scores:
        print(f"{bot}: {score!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())