"""
Input validation for the simulator form.

The FCFS engine trusts its input completely. Everything that can go wrong
with user input is caught HERE, before simulate() is called:

    blank id            → rejected
    fully empty row     → skipped (the form always has spare rows)
    half-filled row     → rejected
    out-of-range value  → rejected (negative, zero burst, above the ceiling)
    nothing left        → rejected

Rows are checked top to bottom and the first problem wins, so the user
sees one message at a time. Messages are shown to the user verbatim.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from scheduler.base import ProcessDescriptor


class SimulationInputError(ValueError):
    """User-facing validation failure. str(err) is the message to display."""


@dataclass
class ProcessRow:
    """One row of the form, before validation. None = the field was left blank."""
    process_id: str
    arrival: Optional[int] = None
    burst: Optional[int] = None


def validate_rows(
    rows: Iterable[ProcessRow],
    max_time_unit: int,
    max_processes: int,
) -> list[ProcessDescriptor]:
    """
    Turn form rows into engine input.

    Raises:
        SimulationInputError: on the first invalid row, if no row is usable,
            or if more than max_processes rows are usable.
    """
    valid: list[ProcessDescriptor] = []
    seen: set[str] = set()

    for row in rows:
        pid = row.process_id.strip()
        if not pid:
            raise SimulationInputError("PID cannot be empty for any process.")

        if row.arrival is None and row.burst is None:
            continue

        if row.arrival is None or row.burst is None:
            raise SimulationInputError(
                f"Process {pid}: Arrival Time and Burst Time must both be filled."
            )

        if row.arrival < 0 or row.burst <= 0:
            raise SimulationInputError(
                f"Process {pid}: Arrival Time must be ≥ 0 and Burst Time must be ≥ 1."
            )
        if row.arrival > max_time_unit or row.burst > max_time_unit:
            raise SimulationInputError(
                f"Process {pid}: Value too large. Times must be ≤ {max_time_unit}."
            )

        if pid in seen:
            raise SimulationInputError(f"Process {pid}: PID must be unique.")
        seen.add(pid)

        valid.append(ProcessDescriptor(process_id=pid, arrival=row.arrival, burst=row.burst))

    if not valid:
        raise SimulationInputError("Please define at least one process.")

    # blank rows are spare form rows, not processes
    if len(valid) > max_processes:
        raise SimulationInputError(
            f"Too many processes. At most {max_processes} are allowed."
        )

    return valid
