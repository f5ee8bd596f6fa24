#!/usr/bin/env python3
"""
Render-loop driver shared by the viewport thread and the control panel.

The physics core knows nothing about frames, speed or trails. This controller
turns a measured frame interval into integrator calls:

- the interval is clipped to max_frame_dt so a stalled frame cannot produce an
  unstable step;
- `speed` steps of that same dt are taken per frame;
- each body's position is appended to a bounded trail after the frame.

Threading
- The pygame thread calls advance_frame; the Dear PyGui thread changes speed,
  trail length and regenerates the system. Everything goes through an RLock and
  observers get copies from snapshot(), never the live bodies.
"""
import logging
import random
import threading
from collections import deque
from typing import Deque, List, Optional, Tuple

from .config import SystemConfig
from .constants import DEFAULT_SPEED, DEFAULT_TRAIL_LENGTH, MAX_SPEED, MAX_TRAIL_LENGTH
from .factory import create_stable_star_system
from .system import BodySystem
from .vector_utils import clamp

logger = logging.getLogger(__name__)

Point = Tuple[float, float, float]


class SimulationController:
    """
    Owns the BodySystem for the run and the display-side state around it.
    """
    def __init__(self, config: Optional[SystemConfig] = None,
                 rng: Optional[random.Random] = None,
                 system: Optional[BodySystem] = None):
        self.lock = threading.RLock()
        self.config = (config or SystemConfig()).validate()
        self.running = True  # app running
        self.playing = True  # simulation running
        self.speed = DEFAULT_SPEED
        self.trail_length = DEFAULT_TRAIL_LENGTH
        self.trails: List[Deque[Point]] = []
        self.system = system if system is not None else create_stable_star_system(rng, self.config)
        self._reset_trails()

    def _reset_trails(self) -> None:
        self.trails = [deque(maxlen=self.trail_length) for _ in range(len(self.system))]

    def set_speed(self, speed: int) -> None:
        with self.lock:
            self.speed = int(clamp(int(speed), 0, MAX_SPEED))
        logger.debug("Speed set to %d steps per frame", self.speed)

    def set_trail_length(self, n: int) -> None:
        with self.lock:
            self.trail_length = int(clamp(int(n), 0, MAX_TRAIL_LENGTH))
            self.trails = [deque(t, maxlen=self.trail_length) for t in self.trails]
        logger.debug("Trail length set to %d", self.trail_length)

    def clear_trails(self) -> None:
        with self.lock:
            for t in self.trails:
                t.clear()

    def toggle_play(self) -> bool:
        with self.lock:
            self.playing = not self.playing
            return self.playing

    def advance_frame(self, frame_dt: float) -> int:
        """
        Advance the simulation for one displayed frame.

        Args:
            frame_dt: Measured wall-clock interval since the previous frame.

        Returns:
            Number of integrator steps taken.
        """
        with self.lock:
            dt = min(frame_dt, self.config.max_frame_dt)
            steps = 0
            if self.playing and dt > 0:
                for _ in range(self.speed):
                    self.system.step(dt)
                steps = self.speed
                if not self.system.is_finite():
                    self.playing = False
                    logger.warning("Non-finite body state after %d steps, pausing", self.system.steps)
            self._record_trails()
            return steps

    def step_once(self) -> None:
        """Single step of the configured dt, whether playing or not."""
        with self.lock:
            self.system.step(self.config.dt)
            self._record_trails()

    def _record_trails(self) -> None:
        for trail, pos in zip(self.trails, self.system.positions()):
            trail.append(pos)

    def regenerate(self, seed: Optional[int] = None) -> BodySystem:
        """Replace the running system with a freshly built one."""
        config = self.config.copy(seed=seed)
        system = create_stable_star_system(random.Random(seed), config)
        with self.lock:
            self.config = config
            self.system = system
            self._reset_trails()
        logger.info("Regenerated star system (seed=%s)", seed)
        return system

    def snapshot(self) -> Tuple[Tuple[Point, ...], List[List[Point]]]:
        """Copy of current positions and trails for drawing outside the lock."""
        with self.lock:
            return self.system.positions(), [list(t) for t in self.trails]
