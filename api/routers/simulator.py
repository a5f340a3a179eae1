"""
FCFS simulator endpoints.

GET  /fcfs/defaults → Rows the form starts with, plus the input limits
POST /fcfs/simulate → Validate rows, run FCFS, return everything the page renders

The router is intentionally thin:
- Pydantic checks types
- scheduler.validation checks ranges and completeness
- scheduler.fcfs computes the schedule
- scheduler.gantt reshapes it for display

Validation failures come back as 422 with the user-facing message in
`detail`, the same status FastAPI uses for schema errors.
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_settings
from api.schemas.simulator import (
    ChartSegmentOut,
    ProcessResultOut,
    ProcessRowIn,
    SimulationRequest,
    SimulationResponse,
    SimulatorDefaults,
    SummaryOut,
    TimelineBlockOut,
)
from config.settings import Settings
from scheduler.fcfs import simulate
from scheduler.gantt import (
    DEFAULT_PROCESSES,
    build_chart,
    sequence_label,
    sort_for_display,
    summarize,
)
from scheduler.validation import SimulationInputError, validate_rows

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fcfs", tags=["fcfs"])


@router.get("/defaults", response_model=SimulatorDefaults)
async def get_defaults(
    settings: Settings = Depends(get_settings),
) -> SimulatorDefaults:
    """Demo rows used to pre-fill (and reset) the simulator form."""
    return SimulatorDefaults(
        processes=[
            ProcessRowIn(process_id=p.process_id, arrival=p.arrival, burst=p.burst)
            for p in DEFAULT_PROCESSES
        ],
        max_time_unit=settings.MAX_TIME_UNIT,
        max_processes=settings.MAX_PROCESSES,
    )


@router.post("/simulate", response_model=SimulationResponse)
async def run_simulation(
    request: SimulationRequest,
    order: Literal["processing", "id"] = Query(
        "processing", description="Order of the results table"
    ),
    settings: Settings = Depends(get_settings),
) -> SimulationResponse:
    """
    Run one FCFS simulation.

    `results` come back in processing order (arrival, then id) unless
    order=id is given, which is how the results table displays them.
    `timeline` is always in time order.
    """
    try:
        processes = validate_rows(
            (row.to_row() for row in request.processes),
            max_time_unit=settings.MAX_TIME_UNIT,
            max_processes=settings.MAX_PROCESSES,
        )
    except SimulationInputError as e:
        logger.warning(f"Rejected simulation input: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    outcome = simulate(processes)
    summary = summarize(outcome)
    results = sort_for_display(outcome.results) if order == "id" else outcome.results

    logger.info(
        f"Simulated {len(processes)} processes, makespan {summary.makespan}, "
        f"avg waiting {summary.average_waiting}"
    )

    return SimulationResponse(
        results=[ProcessResultOut.model_validate(r) for r in results],
        timeline=[TimelineBlockOut.model_validate(b) for b in outcome.timeline],
        chart=[ChartSegmentOut.model_validate(s) for s in build_chart(outcome.timeline)],
        summary=SummaryOut(
            makespan=summary.makespan,
            average_waiting=summary.average_waiting,
            average_turnaround=summary.average_turnaround,
            idle_time=summary.idle_time,
            cpu_utilization=summary.cpu_utilization,
            sequence=list(summary.sequence),
            sequence_label=sequence_label(outcome.timeline),
        ),
    )
