"""Building a work schedule from worker availability by backtracking."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DRIVER_AVAILABILITY = (
    (1, 1, 1, 1),
    (1, 0, 1, 0),
    (1, 1, 0, 1),
    (1, 0, 0, 1),
)


def schedule(
    avail: Sequence[Sequence[bool]], daily_need: int, max_shifts: int
) -> list[list[int]] | None:
    """Assign *daily_need* available workers to each day.

    *avail* holds one row per day and one column per worker. No worker may
    work more than *max_shifts* days. Returns the list of worker ids for
    each day, or ``None`` if no schedule exists.
    """
    if not avail:
        return None
    days = len(avail)
    workers = len(avail[0])
    sched: list[list[int]] = [[] for _ in range(days)]
    shifts = [0] * workers

    def fill(day: int, filled: int) -> bool:
        if day == days:
            return True
        if filled == daily_need:
            return fill(day + 1, 0)
        today = sched[day]
        for worker in range(workers):
            if avail[day][worker] and shifts[worker] < max_shifts and worker not in today:
                today.append(worker)
                shifts[worker] += 1
                if fill(day, filled + 1):
                    return True
                today.pop()
                shifts[worker] -= 1
        return False

    return sched if fill(0, 0) else None


def format_schedule(sched: Sequence[Sequence[int]]) -> str:
    """Render a schedule as one ``Day N: ...`` line per day."""
    return "".join(
        f"Day {day}: " + "".join(f"{worker} " for worker in workers) + "\n"
        for day, workers in enumerate(sched)
    )


def main(argv=None) -> int:
    """Schedule the built-in example and print the result."""
    result = schedule(DRIVER_AVAILABILITY, 2, 2)
    if result is None:
        print("No solution found!")
    else:
        print(format_schedule(result), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())