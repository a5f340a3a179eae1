"""
Pydantic schemas for the /fcfs endpoints.

These define the HTTP contract only:
- ProcessRowIn / SimulationRequest: what the simulator form submits
- SimulationResponse: results table, timeline, Gantt bars and summary
- SimulatorDefaults: what the form is pre-filled with

Type checks happen here (FastAPI returns 422 for arrival="abc").
Range and completeness checks happen in scheduler.validation, because
their messages and ordering are part of the user experience.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from scheduler.validation import ProcessRow


class ProcessRowIn(BaseModel):
    """One form row. Blank fields arrive as "" or null and mean "missing"."""

    process_id: str = Field(..., max_length=32, examples=["P1"])  # checked after stripping
    arrival: Optional[int] = Field(default=None, examples=[0])
    burst: Optional[int] = Field(default=None, examples=[10])

    @field_validator("process_id", mode="before")
    @classmethod
    def strip_process_id(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("arrival", "burst", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        # lax int mode would read true/false as 1/0
        if isinstance(value, bool):
            raise ValueError("must be a whole number, not a boolean")
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_row(self) -> ProcessRow:
        return ProcessRow(process_id=self.process_id, arrival=self.arrival, burst=self.burst)


class SimulationRequest(BaseModel):
    """Request body for POST /fcfs/simulate."""

    processes: list[ProcessRowIn]


class ProcessResultOut(BaseModel):
    process_id: str
    arrival: int
    burst: int
    completion: int
    turnaround: int
    waiting: int

    model_config = {"from_attributes": True}


class TimelineBlockOut(BaseModel):
    process_id: str  # "IDLE" when the CPU has nothing to run
    start: int
    end: int
    duration: int

    model_config = {"from_attributes": True}


class ChartSegmentOut(TimelineBlockOut):
    width_percent: float
    is_idle: bool


class SummaryOut(BaseModel):
    makespan: int
    average_waiting: float
    average_turnaround: float
    idle_time: int
    cpu_utilization: float
    sequence: list[str]
    sequence_label: str  # e.g. "P1 → P2 → P3"


class SimulationResponse(BaseModel):
    """Response body for POST /fcfs/simulate."""

    results: list[ProcessResultOut]
    timeline: list[TimelineBlockOut]
    chart: list[ChartSegmentOut]
    summary: SummaryOut


class SimulatorDefaults(BaseModel):
    """Response body for GET /fcfs/defaults."""

    processes: list[ProcessRowIn]
    max_time_unit: int
    max_processes: int
