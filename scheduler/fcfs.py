"""
First Come First Served (FCFS) simulation.

The simplest scheduling policy: processes run in the order they arrive,
and once a process starts it runs to completion (non-preemptive).

Algorithm, one pass over the sorted input:

    time = 0
    for each process by (arrival, id):
        arrival > time  → CPU sits IDLE until it arrives
        run it          → [time, time + burst)
        time = completion

Cost: O(n log n) for the sort, O(n) for the scan.

Ties on arrival are broken by ascending id (plain string order), so the
output is stable no matter how the caller ordered its rows.

Downside of the policy: a long process blocks everything behind it.
This is the "convoy effect" (P2 waits 4 units behind P1 in the demo data).

simulate() is a pure function. It does not validate, raise or log;
callers run scheduler.validation.validate_rows() first.
"""

from typing import Iterable

from scheduler.base import (
    IDLE,
    ProcessDescriptor,
    ProcessResult,
    SimulationOutcome,
    TimelineBlock,
)


def simulate(processes: Iterable[ProcessDescriptor]) -> SimulationOutcome:
    """Run FCFS over already-validated processes."""
    ordered = sorted(processes, key=lambda p: (p.arrival, p.process_id))

    time = 0
    results: list[ProcessResult] = []
    timeline: list[TimelineBlock] = []

    for process in ordered:
        if process.arrival > time:
            timeline.append(TimelineBlock(IDLE, time, process.arrival))
            time = process.arrival

        completion = time + process.burst
        timeline.append(TimelineBlock(process.process_id, time, completion))
        time = completion

        turnaround = completion - process.arrival
        results.append(ProcessResult(
            process_id=process.process_id,
            arrival=process.arrival,
            burst=process.burst,
            completion=completion,
            turnaround=turnaround,
            waiting=turnaround - process.burst,
        ))

    return SimulationOutcome(results=tuple(results), timeline=tuple(timeline))
