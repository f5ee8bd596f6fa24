#!/usr/bin/env python3
"""
General utilities for the star system simulator.
"""
from typing import Optional


def try_int(val) -> Optional[int]:
    try:
        return int(str(val).strip())
    except (TypeError, ValueError):
        return None


def parse_seed(text) -> Optional[int]:
    """Seed typed into the control panel; blank or garbage means 'random'."""
    if text is None or str(text).strip() == "":
        return None
    return try_int(text)


def status_line(fps: float, speed: int, elapsed: float, playing: bool) -> str:
    """Second HUD line of the viewport: frame rate, speed, sim time, play state."""
    state = "Playing" if playing else "Paused"
    return f"FPS: {fps:.0f}  Speed: {speed} steps/frame  t={elapsed:.1f}  [{state}]"
