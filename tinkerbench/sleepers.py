"""Start many threads that sleep for a while and then report their index."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import TextIO

_MULTIPLIER = 2654435761
_MODULUS = 200_000
_K = 0


def bad_hash(i: int) -> int:
    """Spread ``i`` over 0..199999 with a 32-bit wrapping multiplication."""
    return ((i * _MULTIPLIER) & 0xFFFFFFFF) % _MODULUS


def run_sleepers(
    count: int = 10_000,
    rounds: int = 1000,
    tick: float = 0.01,
    out: TextIO | None = None,
) -> list[int]:
    """Run ``count`` sleeping threads; return their indices in finishing order.

    Each thread first sleeps ``bad_hash(i)`` microseconds, then ``rounds``
    times ``tick`` seconds, then writes ``"i,0"`` as a line to ``out``.
    """
    if count < 0 or rounds < 0 or tick < 0:
        raise ValueError("count, rounds and tick must not be negative")
    stream = out if out is not None else sys.stdout
    lock = threading.Lock()
    finished: list[int] = []

    def sleeper(i: int) -> None:
        time.sleep(bad_hash(i) / 1_000_000)
        for _ in range(rounds):
            time.sleep(tick)
        with lock:
            print(f"{i},{_K}", file=stream)
            finished.append(i)

    threads = [threading.Thread(target=sleeper, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return finished


def main(argv: list[str] | None = None) -> int:
    """Run the sleeper threads from the command line."""
    parser = argparse.ArgumentParser(description="Start many sleeping threads.")
    parser.add_argument("--count", type=int, default=10_000, help="number of threads")
    parser.add_argument("--rounds", type=int, default=1000, help="sleeps per thread")
    parser.add_argument("--tick", type=float, default=0.01, help="seconds per sleep")
    args = parser.parse_args(argv)
    run_sleepers(args.count, args.rounds, args.tick)
    return 0