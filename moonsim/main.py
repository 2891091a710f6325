import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Tuple

from moonsim.constants import (
    API_MAX_ITERATIONS,
    API_MAX_STEPS,
    API_MAX_TRAJECTORY_STEPS,
    DEFAULT_MAX_ITERATIONS,
    cors_origins_from_env,
    debug_enabled,
)
from moonsim.logging_config import setup_logging
from moonsim.physics import detect_cycle, energy_after, trajectory
from moonsim.system import System


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(logging.DEBUG if debug_enabled() else logging.INFO)
    yield


app = FastAPI(lifespan=lifespan)

cors_origins = cors_origins_from_env()
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

Position = Tuple[int, int, int]


class ComputeRequest(BaseModel):
    positions: List[Position] = Field(min_length=2)
    maxIterations: int = Field(default=DEFAULT_MAX_ITERATIONS, gt=0, le=API_MAX_ITERATIONS)
    profile: Optional[bool] = False


class ComputeResponse(BaseModel):
    outcome: Literal["total_energy_at_cap", "cycle_found"]
    value: int
    iterations: int
    firstSeen: Optional[int] = None
    period: Optional[int] = None
    meta: dict


class EnergyRequest(BaseModel):
    positions: List[Position] = Field(min_length=2)
    steps: int = Field(ge=0, le=API_MAX_STEPS)


class BodySnapshot(BaseModel):
    position: Position
    velocity: Position
    energy: int


class EnergyResponse(BaseModel):
    totalEnergy: int
    state: List[int]
    bodies: List[BodySnapshot]


class TrajectoryRequest(BaseModel):
    positions: List[Position] = Field(min_length=2)
    steps: int = Field(ge=0, le=API_MAX_TRAJECTORY_STEPS)


class TrajectorySample(BaseModel):
    step: int
    state: List[int]


class TrajectoryResponse(BaseModel):
    initialState: List[int]
    samples: List[TrajectorySample]


@app.post("/api/compute", response_model=ComputeResponse)
def compute(req: ComputeRequest):
    """
    Run the cycle detector. Optionally reports the time spent in the
    search when `profile` is true.
    """
    system = System(req.positions)

    search_start = time.perf_counter()
    report = detect_cycle(system, max_iterations=req.maxIterations)
    search_ms = (time.perf_counter() - search_start) * 1000.0

    meta = {"bodyCount": len(system), "maxIterations": req.maxIterations}
    if req.profile:
        meta["profile"] = {
            "timingsMs": {"detect_cycle": search_ms},
            "serverTimestamp": time.time(),
        }

    return {
        "outcome": report.outcome,
        "value": report.value,
        "iterations": report.iterations,
        "firstSeen": report.first_seen,
        "period": report.period,
        "meta": meta,
    }


@app.post("/api/energy", response_model=EnergyResponse)
def energy(req: EnergyRequest):
    system = System(req.positions)
    total = energy_after(system, req.steps)
    bodies = [
        {
            "position": tuple(body.position.tolist()),
            "velocity": tuple(body.velocity.tolist()),
            "energy": body.total_energy(),
        }
        for body in system.bodies
    ]
    return {"totalEnergy": total, "state": list(system.state()), "bodies": bodies}


@app.post("/api/trajectory", response_model=TrajectoryResponse)
def trajectory_samples(req: TrajectoryRequest):
    system = System(req.positions)
    states = trajectory(system, req.steps)
    return {
        "initialState": list(system.state()),
        "samples": [
            {"step": idx, "state": list(state)} for idx, state in enumerate(states, start=1)
        ],
    }
