#!/usr/bin/env python3
"""
Star system simulator entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (viewport) and the Dear PyGui UI
  (running on the main thread).
- Shares one SimulationController between them. The controller owns the BodySystem,
  the simulation speed and the trail buffers; all access is guarded by its lock.
- The viewport polls positions after each frame's physics steps; it never mutates
  bodies.

Threading model
- PygameRenderer runs in a background thread and performs: input handling (for the
  viewport), advancing the controller by the measured frame interval, and drawing.
- The UI class runs in the main thread via Dear PyGui and changes speed, trail length,
  play state and the system seed through lock-protected controller methods.

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python star_system_sim.py`
"""

import logging
import time
import threading

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from stellar.camera import Camera2D, marker_radius
from stellar.constants import (
    BACKGROUND_COLOR,
    DEFAULT_SPEED,
    DEFAULT_TRAIL_LENGTH,
    MAX_SPEED,
    MAX_TRAIL_LENGTH,
    SAFE_COORD_LIMIT,
    STAR_COLORS,
    TRAIL_COLOR,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from stellar.controller import SimulationController
from stellar.errors import StarSystemError
from stellar.utils import parse_seed, status_line

logger = logging.getLogger("star_system_sim")

# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: steps the controller once per frame, draws bodies and trails.
    Handles camera panning and zoom.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.camera = Camera2D(center=(0.0, 0.0))
        self.surface = None
        self.clock = None
        self.dragging_background = False
        self.drag_start_screen = (0, 0)
        self.pan_speed_keys = 600  # pixels per second
        self.running = True

    def auto_frame_camera(self):
        """Adjust camera to fit all bodies into view with margin."""
        positions, _ = self.sim.snapshot()
        self.camera.fit_points(positions)

    def run(self):
        pygame.init()
        pygame.display.set_caption("Star System Simulator - Viewport")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()
        self.auto_frame_camera()

        last_time = time.perf_counter()
        while self.running and self.sim.running:
            now = time.perf_counter()
            real_dt = now - last_time
            last_time = now

            self.handle_events(real_dt)

            # Physics: the controller clips real_dt and runs `speed` steps
            self.sim.advance_frame(real_dt)

            self.draw()

            # Limit FPS
            self.clock.tick(60)

        pygame.quit()

    def handle_events(self, real_dt):
        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            self.camera.pan_pixels(self.pan_speed_keys * real_dt, 0)
        if keys[pygame.K_RIGHT]:
            self.camera.pan_pixels(-self.pan_speed_keys * real_dt, 0)
        if keys[pygame.K_UP]:
            self.camera.pan_pixels(0, self.pan_speed_keys * real_dt)
        if keys[pygame.K_DOWN]:
            self.camera.pan_pixels(0, -self.pan_speed_keys * real_dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.sim.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)

            elif event.type == pygame.MOUSEWHEEL:
                factor = 1.1 if event.y > 0 else 1.0/1.1
                self.camera.zoom(factor, pygame.mouse.get_pos())

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in (1, 2, 3):
                    self.dragging_background = True
                    self.drag_start_screen = pygame.mouse.get_pos()

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button in (1, 2, 3):
                    self.dragging_background = False

            elif event.type == pygame.MOUSEMOTION:
                if self.dragging_background:
                    mouse = pygame.mouse.get_pos()
                    dx = mouse[0] - self.drag_start_screen[0]
                    dy = mouse[1] - self.drag_start_screen[1]
                    self.camera.pan_pixels(dx, dy)
                    self.drag_start_screen = mouse

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        # Copy state for consistency during draw
        positions, trails = self.sim.snapshot()
        with self.sim.lock:
            masses = [b.mass for b in self.sim.system]
            speed = self.sim.speed
            playing = self.sim.playing
            elapsed = self.sim.system.elapsed

        # Draw trails as points, like a particle trail
        for trail in trails:
            for p in trail:
                sp = _safe_point(self.camera.world_to_screen(p))
                if sp:
                    surf.set_at(sp, TRAIL_COLOR)

        # Draw bodies
        for i, (p, m) in enumerate(zip(positions, masses)):
            sp = _safe_point(self.camera.world_to_screen(p))
            if sp is None:
                continue
            vis_r = int(min(max(marker_radius(m) / self.camera.upp, 2), 50))
            color = STAR_COLORS[i % len(STAR_COLORS)]
            gfxdraw.filled_circle(surf, sp[0], sp[1], vis_r, color)
            gfxdraw.aacircle(surf, sp[0], sp[1], vis_r, color)

        # HUD text
        draw_text(surf, "Drag: pan | Wheel: zoom | Arrows: pan | Space (panel): Pause/Play", 10, 10, (200, 200, 200))
        draw_text(surf, status_line(self.clock.get_fps(), speed, elapsed, playing), 10, 30, (200, 200, 200))

        pygame.display.flip()

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

def _safe_point(pt):
    x, y = pt
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Dear PyGui interface: speed and trail controls, seeding, diagnostics readout.
    """
    def __init__(self, sim: SimulationController, renderer: PygameRenderer):
        self.sim = sim
        self.renderer = renderer
        self.status_msg_id = None
        self.seed_input_id = None
        self.readout_id = None

        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic readout refresh (~10Hz at 60 FPS)."""
        dpg.set_frame_callback(dpg.get_frame_count() + 6, self._sync_ui_with_sim)

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Star System Simulator - Controls', width=460, height=360)

        with dpg.window(label="Controls", width=440, height=340, pos=(10, 10), tag="main_window"):
            dpg.add_text("Simulation Controls")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=self._toggle_play)
                dpg.add_button(label="Step", callback=self._step_once)
                dpg.add_button(label="Auto-fit Camera", callback=self.renderer.auto_frame_camera)
            dpg.add_slider_int(label="speed", min_value=0, max_value=MAX_SPEED, default_value=DEFAULT_SPEED,
                               width=300, callback=lambda s, a, u: self.sim.set_speed(a), tag="speed_slider")
            dpg.add_slider_int(label="trail (frame)", min_value=0, max_value=MAX_TRAIL_LENGTH,
                               default_value=DEFAULT_TRAIL_LENGTH, width=300,
                               callback=lambda s, a, u: self.sim.set_trail_length(a), tag="trail_slider")

            dpg.add_separator()

            dpg.add_text("New System")
            with dpg.group(horizontal=True):
                self.seed_input_id = dpg.add_input_text(label="Seed", default_value="", hint="random", width=150)
                dpg.add_button(label="Regenerate", callback=self._regenerate)

            dpg.add_separator()
            self.readout_id = dpg.add_text("")
            self.status_msg_id = dpg.add_text("")

        # Keyboard shortcut in UI window to toggle play/pause
        with dpg.handler_registry():
            dpg.add_key_press_handler(dpg.mvKey_Spacebar, callback=lambda s, a, u: self._toggle_play())

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _set_error(self, msg: str):
        self._set_status(msg, color=(255, 120, 120))

    def _toggle_play(self):
        playing = self.sim.toggle_play()
        self._set_status(f"Simulation {'Playing' if playing else 'Paused'}.")

    def _step_once(self):
        self.sim.step_once()
        self._set_status("Stepped once.")

    def _regenerate(self):
        seed = parse_seed(dpg.get_value(self.seed_input_id))
        try:
            self.sim.regenerate(seed)
        except StarSystemError as exc:
            logger.error("Could not build star system: %s", exc)
            self._set_error(f"Could not build star system: {exc}")
            return
        self.renderer.auto_frame_camera()
        self._set_status(f"New system (seed={seed if seed is not None else 'random'}).")

    def _sync_ui_with_sim(self):
        """Periodic refresh of the conserved-quantity readout."""
        with self.sim.lock:
            system = self.sim.system
            p = system.total_momentum()
            e = system.total_energy()
            lines = [f"t = {system.elapsed:.2f}  steps = {system.steps}",
                     f"|momentum| = {p.length():.3e}  energy = {e:.6e}"]
            for i, b in enumerate(system):
                x, y, z = b.position.as_tuple()
                lines.append(f"#{i} m={b.mass:.4g}  ({x:.1f}, {y:.1f}, {z:.1f})")
        dpg.set_value(self.readout_id, "\n".join(lines))
        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================

def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    )
    sim = SimulationController()

    renderer = PygameRenderer(sim)

    # Start Pygame renderer thread
    renderer.start()

    UI(sim, renderer)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        # Stop simulation and renderer
        sim.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()

if __name__ == "__main__":
    main()
