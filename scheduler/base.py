"""
Value types shared by the FCFS engine, the validation layer and the API.

ProcessDescriptor is what goes IN to the engine: a process that has already
passed validation. ProcessResult and TimelineBlock are what comes OUT.

All of them are frozen dataclasses:
- no identity beyond their fields (two equal results compare equal)
- nothing downstream can mutate the output of a simulation run
- no dependency on FastAPI or pydantic, so the engine can be tested
  (and reused) without the web layer
"""

from dataclasses import dataclass

# Timeline sentinel for "no process running"
IDLE = "IDLE"


@dataclass(frozen=True)
class ProcessDescriptor:
    process_id: str
    arrival: int   # time unit at which the process becomes ready
    burst: int     # time units it needs once started


@dataclass(frozen=True)
class ProcessResult:
    process_id: str
    arrival: int
    burst: int
    completion: int
    turnaround: int  # completion - arrival
    waiting: int     # turnaround - burst, never negative


@dataclass(frozen=True)
class TimelineBlock:
    """One contiguous interval of the schedule, either a process or IDLE."""
    process_id: str
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    @property
    def is_idle(self) -> bool:
        return self.process_id == IDLE


@dataclass(frozen=True)
class SimulationOutcome:
    """
    Everything one simulation run produces.

    results are in processing order (arrival, then id).
    timeline covers [0, makespan] with no gaps or overlaps.
    """
    results: tuple[ProcessResult, ...]
    timeline: tuple[TimelineBlock, ...]

    @property
    def makespan(self) -> int:
        return self.timeline[-1].end if self.timeline else 0
