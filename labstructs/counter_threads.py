"""Several threads each adding their own number to one shared counter."""

from __future__ import annotations

import sys
import threading
from typing import List, Optional, Sequence


class SharedCounter:
    """An integer counter that threads may add to safely."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def add(self, amount: int) -> int:
        """Add ``amount`` and return the new total."""
        with self._lock:
            self._value += amount
            return self._value


def run_threads(count: int = 3, counter: Optional[SharedCounter] = None) -> List[str]:
    """Start threads 1..count, each adding its number; return their reports in finishing order."""
    shared = counter if counter is not None else SharedCounter()
    reports: List[str] = []
    report_lock = threading.Lock()

    def work(number: int) -> None:
        with report_lock:
            total = shared.add(number)
            reports.append(f"Thread {number}: counter = {total}")

    threads = [threading.Thread(target=work, args=(number,)) for number in range(1, count + 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return reports


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run three threads and print what each saw."""
    for line in run_threads(3):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())