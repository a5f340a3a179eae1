"""
Display helpers for a finished simulation.

The engine returns raw results and a timeline. The page needs a bit more:
- the results table sorted by process id
- average waiting / turnaround time
- the execution sequence ("P1 → P2 → P3")
- Gantt bars whose widths are proportional to their duration

None of this changes the schedule itself. It only reshapes SimulationOutcome.
"""

from dataclasses import dataclass
from typing import Sequence

from scheduler.base import (
    ProcessDescriptor,
    ProcessResult,
    SimulationOutcome,
    TimelineBlock,
)

# Pre-filled rows of the simulator form (also what "reset" restores)
DEFAULT_PROCESSES: tuple[ProcessDescriptor, ...] = (
    ProcessDescriptor("P1", arrival=0, burst=10),
    ProcessDescriptor("P2", arrival=6, burst=4),
    ProcessDescriptor("P3", arrival=13, burst=5),
)


@dataclass(frozen=True)
class ChartSegment:
    process_id: str
    start: int
    end: int
    duration: int
    width_percent: float  # share of the makespan, 0-100
    is_idle: bool


@dataclass(frozen=True)
class SimulationSummary:
    makespan: int
    average_waiting: float
    average_turnaround: float
    idle_time: int
    cpu_utilization: float  # busy time / makespan
    sequence: tuple[str, ...]


def sort_for_display(results: Sequence[ProcessResult]) -> list[ProcessResult]:
    return sorted(results, key=lambda r: r.process_id)


def sequence_label(timeline: Sequence[TimelineBlock]) -> str:
    return " → ".join(block.process_id for block in timeline)


def build_chart(timeline: Sequence[TimelineBlock]) -> list[ChartSegment]:
    """One bar per timeline block, sized relative to the whole schedule."""
    if not timeline:
        return []

    makespan = timeline[-1].end
    return [
        ChartSegment(
            process_id=block.process_id,
            start=block.start,
            end=block.end,
            duration=block.duration,
            width_percent=round(block.duration / makespan * 100, 2),
            is_idle=block.is_idle,
        )
        for block in timeline
    ]


def summarize(outcome: SimulationOutcome) -> SimulationSummary:
    """
    Aggregate metrics for the results panel.

    Averages are rounded to 2 decimals for display; the per-process
    numbers they come from are exact integers.
    """
    results = outcome.results
    makespan = outcome.makespan
    idle_time = sum(block.duration for block in outcome.timeline if block.is_idle)

    n = len(results)
    avg_waiting = sum(r.waiting for r in results) / n if n else 0.0
    avg_turnaround = sum(r.turnaround for r in results) / n if n else 0.0
    utilization = (makespan - idle_time) / makespan if makespan else 0.0

    return SimulationSummary(
        makespan=makespan,
        average_waiting=round(avg_waiting, 2),
        average_turnaround=round(avg_turnaround, 2),
        idle_time=idle_time,
        cpu_utilization=round(utilization, 4),
        sequence=tuple(block.process_id for block in outcome.timeline),
    )
