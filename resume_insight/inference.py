from __future__ import annotations
import asyncio
import os
from typing import Awaitable, Callable, Dict, Optional

InferenceHook = Callable[[str], Awaitable[None]]

MODES = {"auto", "simulated", "instant"}

# Seconds of simulated model "thinking" per stage
STAGE_LATENCY_SECONDS: Dict[str, float] = {
    "parse": 1.5,
    "profile": 1.0,
    "skills": 1.2,
    "experience": 1.0,
    "education": 0.8,
    "highlights": 1.0,
}


def _get_setting(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else None


def normalize_mode(mode: str | None) -> str:
    if not mode:
        return "auto"
    mode = mode.strip().lower()
    if mode in MODES:
        return mode
    return "auto"


class SimulatedLatency:
    """Sleeps a fixed delay per stage, standing in for a model call."""

    def __init__(self, delays: Optional[Dict[str, float]] = None, scale: float = 1.0):
        self.delays = dict(STAGE_LATENCY_SECONDS if delays is None else delays)
        self.scale = max(0.0, scale)

    async def __call__(self, stage: str) -> None:
        delay = self.delays.get(stage, 0.0) * self.scale
        if delay > 0:
            await asyncio.sleep(delay)


class NoLatency:
    async def __call__(self, stage: str) -> None:
        return None


def _latency_scale() -> float:
    raw = _get_setting("RESUME_INSIGHT_LATENCY_SCALE")
    if raw is None:
        return 1.0
    try:
        return float(raw)
    except ValueError as e:
        raise RuntimeError(f"RESUME_INSIGHT_LATENCY_SCALE must be a number, got {raw!r}.") from e


def get_inference_hook(mode: str = "auto") -> InferenceHook:
    m = normalize_mode(mode)
    if m == "auto":
        m = normalize_mode(_get_setting("RESUME_INSIGHT_LATENCY"))
    if m == "instant":
        return NoLatency()
    # auto and simulated
    return SimulatedLatency(scale=_latency_scale())
