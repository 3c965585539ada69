"""Backtracking scheduler assigning workers to days."""

from __future__ import annotations

import sys
from collections.abc import Sequence

AvailabilityMatrix = Sequence[Sequence[bool]]
DailySchedule = list[list[int]]


def schedule(
    avail: AvailabilityMatrix, daily_need: int, max_shifts: int
) -> DailySchedule | None:
    """Return a schedule of ``daily_need`` workers per day, or None.

    ``avail[day][worker]`` says whether a worker can work on a day; no
    worker may be given more than ``max_shifts`` shifts in total.
    """
    if not avail:
        return None
    workers = len(avail[0])
    sched: DailySchedule = [[] for _ in avail]
    shifts = [0] * workers

    def can_assign(day: int, worker: int) -> bool:
        return (
            bool(avail[day][worker])
            and shifts[worker] < max_shifts
            and worker not in sched[day]
        )

    def fill(day: int) -> bool:
        if day == len(avail):
            return True
        if len(sched[day]) == daily_need:
            return fill(day + 1)
        for worker in range(workers):
            if not can_assign(day, worker):
                continue
            sched[day].append(worker)
            shifts[worker] += 1
            if fill(day):
                return True
            sched[day].pop()
            shifts[worker] -= 1
        return False

    return sched if fill(0) else None


def format_schedule(sched: DailySchedule) -> str:
    """Render a schedule as one ``Day N: ...`` line per day."""
    return "".join(
        f"Day {day}: " + "".join(f"{worker} " for worker in workers) + "\n"
        for day, workers in enumerate(sched)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Schedule a sample availability matrix and print the result."""
    avail = [
        [True, True, True, True],
        [True, False, True, False],
        [True, True, False, True],
        [True, False, False, True],
    ]
    sched = schedule(avail, 2, 2)
    if sched is None:
        print("No solution found!")
    else:
        print(format_schedule(sched), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())