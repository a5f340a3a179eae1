"""
API integration tests for /fcfs endpoints.

These use the test HTTP client from conftest.py, which runs the app
in-process with MAX_TIME_UNIT=100 and MAX_PROCESSES=5.
"""

import pytest


def rows(*specs: tuple[str, int, int]) -> dict:
    """Helper to build a request body from (process_id, arrival, burst) tuples."""
    return {"processes": [
        {"process_id": pid, "arrival": arrival, "burst": burst}
        for pid, arrival, burst in specs
    ]}


@pytest.mark.asyncio
async def test_defaults_return_demo_rows_and_limits(client):
    response = await client.get("/fcfs/defaults")

    assert response.status_code == 200
    data = response.json()
    assert [(p["process_id"], p["arrival"], p["burst"]) for p in data["processes"]] == [
        ("P1", 0, 10),
        ("P2", 6, 4),
        ("P3", 13, 5),
    ]
    assert data["max_time_unit"] == 100
    assert data["max_processes"] == 5


@pytest.mark.asyncio
async def test_simulate_default_workload(client):
    response = await client.post("/fcfs/simulate", json=rows(
        ("P1", 0, 10), ("P2", 6, 4), ("P3", 13, 5),
    ))

    assert response.status_code == 200
    data = response.json()

    assert [(b["process_id"], b["start"], b["end"], b["duration"]) for b in data["timeline"]] == [
        ("P1", 0, 10, 10),
        ("P2", 10, 14, 4),
        ("P3", 14, 19, 5),
    ]
    assert [(r["process_id"], r["completion"], r["turnaround"], r["waiting"]) for r in data["results"]] == [
        ("P1", 10, 10, 0),
        ("P2", 14, 8, 4),
        ("P3", 19, 6, 1),
    ]
    assert data["summary"]["makespan"] == 19
    assert data["summary"]["average_waiting"] == 1.67
    assert data["summary"]["average_turnaround"] == 8.0
    assert data["summary"]["sequence_label"] == "P1 → P2 → P3"


@pytest.mark.asyncio
async def test_simulate_reports_idle_gap(client):
    response = await client.post("/fcfs/simulate", json=rows(("P1", 5, 3)))

    assert response.status_code == 200
    data = response.json()
    assert [(b["process_id"], b["start"], b["end"]) for b in data["timeline"]] == [
        ("IDLE", 0, 5),
        ("P1", 5, 8),
    ]
    assert [s["is_idle"] for s in data["chart"]] == [True, False]
    assert [s["width_percent"] for s in data["chart"]] == [62.5, 37.5]
    assert data["summary"]["idle_time"] == 5


@pytest.mark.asyncio
async def test_results_in_processing_order_by_default(client):
    response = await client.post("/fcfs/simulate", json=rows(("P2", 0, 2), ("P1", 0, 3), ("P0", 9, 1)))

    assert [r["process_id"] for r in response.json()["results"]] == ["P1", "P2", "P0"]


@pytest.mark.asyncio
async def test_results_sorted_by_id_on_request(client):
    response = await client.post(
        "/fcfs/simulate?order=id",
        json=rows(("P2", 0, 2), ("P1", 0, 3), ("P0", 9, 1)),
    )

    data = response.json()
    assert [r["process_id"] for r in data["results"]] == ["P0", "P1", "P2"]
    # timeline is unaffected by the display order
    assert [b["process_id"] for b in data["timeline"]] == ["P1", "P2", "IDLE", "P0"]


@pytest.mark.asyncio
async def test_blank_fields_are_treated_as_missing(client):
    """A blank form row ("" for both times) is skipped, not rejected."""
    response = await client.post("/fcfs/simulate", json={"processes": [
        {"process_id": "P1", "arrival": "0", "burst": "4"},
        {"process_id": "P2", "arrival": "", "burst": ""},
    ]})

    assert response.status_code == 200
    assert [r["process_id"] for r in response.json()["results"]] == ["P1"]


@pytest.mark.asyncio
async def test_half_filled_row_returns_422_with_message(client):
    response = await client.post("/fcfs/simulate", json={"processes": [
        {"process_id": "P1", "arrival": "3", "burst": ""},
    ]})

    assert response.status_code == 422
    assert response.json()["detail"] == "Process P1: Arrival Time and Burst Time must both be filled."


@pytest.mark.asyncio
async def test_value_above_configured_ceiling_returns_422(client):
    response = await client.post("/fcfs/simulate", json=rows(("P1", 101, 1)))

    assert response.status_code == 422
    assert response.json()["detail"] == "Process P1: Value too large. Times must be ≤ 100."


@pytest.mark.asyncio
async def test_too_many_processes_returns_422(client):
    response = await client.post(
        "/fcfs/simulate",
        json=rows(*[(f"P{i}", 0, 1) for i in range(1, 7)]),
    )

    assert response.status_code == 422
    assert "At most 5" in response.json()["detail"]


@pytest.mark.asyncio
async def test_no_processes_returns_422(client):
    response = await client.post("/fcfs/simulate", json={"processes": []})

    assert response.status_code == 422
    assert response.json()["detail"] == "Please define at least one process."


@pytest.mark.asyncio
async def test_non_numeric_time_rejected_by_schema(client):
    response = await client.post("/fcfs/simulate", json={"processes": [
        {"process_id": "P1", "arrival": "abc", "burst": 1},
    ]})

    assert response.status_code == 422
    # pydantic error list, not a validation message string
    assert isinstance(response.json()["detail"], list)


@pytest.mark.asyncio
async def test_boolean_time_rejected_by_schema(client):
    """JSON true/false must not be read as 1/0."""
    response = await client.post("/fcfs/simulate", json={"processes": [
        {"process_id": "P1", "arrival": False, "burst": True},
    ]})

    assert response.status_code == 422
    assert isinstance(response.json()["detail"], list)


@pytest.mark.asyncio
async def test_spare_blank_rows_do_not_count_towards_limit(client):
    """One real process plus more blank rows than MAX_PROCESSES still runs."""
    response = await client.post("/fcfs/simulate", json={"processes": [
        {"process_id": "P1", "arrival": "0", "burst": "3"},
        *[{"process_id": f"P{i}", "arrival": "", "burst": ""} for i in range(2, 8)],
    ]})

    assert response.status_code == 200
    assert [r["process_id"] for r in response.json()["results"]] == ["P1"]


@pytest.mark.asyncio
async def test_blank_pid_returns_422_with_message(client):
    response = await client.post("/fcfs/simulate", json=rows(("P1", 0, 1), ("  ", 2, 1)))

    assert response.status_code == 422
    assert response.json()["detail"] == "PID cannot be empty for any process."


@pytest.mark.asyncio
async def test_duplicate_pid_returns_422_with_message(client):
    response = await client.post("/fcfs/simulate", json=rows(("P1", 0, 1), ("P1", 2, 1)))

    assert response.status_code == 422
    assert response.json()["detail"] == "Process P1: PID must be unique."


@pytest.mark.asyncio
async def test_pid_length_limit_applies_after_stripping(client):
    padded = "  " + "P" * 32 + "  "
    response = await client.post("/fcfs/simulate", json=rows((padded, 0, 1)))

    assert response.status_code == 200
    assert response.json()["results"][0]["process_id"] == "P" * 32


@pytest.mark.asyncio
async def test_pid_longer_than_limit_rejected_by_schema(client):
    response = await client.post("/fcfs/simulate", json=rows(("P" * 33, 0, 1)))

    assert response.status_code == 422
    assert isinstance(response.json()["detail"], list)
