"""
tick-smooth Camera Rig
Interactive 2D camera driven by smoothed position, rotation and zoom components.

Controls:
  LClick  Move camera target to the clicked world point
  Q / E   Rotate camera target by -/+ 0.3 rad
  Wheel   Zoom in / out
  F       Toggle follow mode (camera chases a marker that tracks the mouse)
  R       Snap everything back to the origin
  Esc     Quit
"""
from __future__ import annotations

import math
import sys

import numpy as np
import pygame

from tick_smooth import TransformComponent, mat4, quat

# --- Configuration ---
WIDTH, HEIGHT = 1024, 768
FPS = 60
TITLE = "tick-smooth Camera Rig"

GRID_SPACING = 80.0
GRID_EXTENT = 12
TURN_STEP = 0.3
ZOOM_STEP = 1.15
MIN_ZOOM, MAX_ZOOM = 0.25, 4.0
MARKER_RATE = 12.0

# Colors
BG_COLOR = (26, 26, 46)
GRID_COLOR = (60, 60, 90)
AXIS_X_COLOR = (255, 100, 100)
AXIS_Y_COLOR = (100, 255, 140)
TARGET_COLOR = (255, 215, 0)
MARKER_COLOR = (0, 255, 255)
HUD_COLOR = (200, 200, 220)

Z_AXIS = (0.0, 0.0, 1.0)


class CameraRig:
    """Camera whose placement is three smoothed components."""

    def __init__(self) -> None:
        self.position = TransformComponent.new_translate(np.zeros(3))
        self.rotation = TransformComponent.new_rotate()
        self.zoom = TransformComponent.new_zoom(1.0)
        self.marker = TransformComponent(MARKER_RATE, np.zeros(3))
        self.following = False

    def turn(self, angle: float) -> None:
        self.rotation.target = quat.multiply(
            self.rotation.target, quat.from_axis_angle(Z_AXIS, angle)
        )

    def scale_zoom(self, factor: float) -> None:
        self.zoom.target = min(max(self.zoom.target * factor, MIN_ZOOM), MAX_ZOOM)

    def reset(self) -> None:
        self.position.snap(np.zeros(3))
        self.rotation.snap(quat.identity())
        self.zoom.snap(1.0)
        self.marker.snap(np.zeros(3))

    def update(self, dt: float) -> np.ndarray:
        """Drive every component once and return the camera's world matrix."""
        marker_pos = self.marker.drive(dt)
        if self.following:
            self.position.target = marker_pos.copy()

        # Scale first, then rotate, then translate: T @ R @ S.
        return (
            self.zoom.begin(mat4.scale)
            .and_then(self.rotation, mat4.rotation)
            .and_then(self.position, mat4.translation)
            .drive(dt)
        )


def screen_matrix(camera: np.ndarray) -> np.ndarray:
    """World-to-screen: invert the camera, then center on the window."""
    center = mat4.translation([WIDTH / 2, HEIGHT / 2, 0.0])
    return center @ np.linalg.inv(camera)


def to_screen(m: np.ndarray, x: float, y: float) -> tuple[int, int]:
    p = mat4.transform_point(m, [x, y, 0.0])
    return int(p[0]), int(p[1])


def to_world(m: np.ndarray, sx: float, sy: float) -> np.ndarray:
    return mat4.transform_point(np.linalg.inv(m), [sx, sy, 0.0])


def draw_grid(screen: pygame.Surface, m: np.ndarray) -> None:
    extent = GRID_SPACING * GRID_EXTENT
    for i in range(-GRID_EXTENT, GRID_EXTENT + 1):
        offset = i * GRID_SPACING
        color_v = AXIS_Y_COLOR if i == 0 else GRID_COLOR
        color_h = AXIS_X_COLOR if i == 0 else GRID_COLOR
        pygame.draw.line(screen, color_v, to_screen(m, offset, -extent), to_screen(m, offset, extent))
        pygame.draw.line(screen, color_h, to_screen(m, -extent, offset), to_screen(m, extent, offset))


def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    rig = CameraRig()
    view = screen_matrix(mat4.identity())
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_q:
                    rig.turn(-TURN_STEP)
                elif event.key == pygame.K_e:
                    rig.turn(TURN_STEP)
                elif event.key == pygame.K_f:
                    rig.following = not rig.following
                elif event.key == pygame.K_r:
                    rig.reset()
            elif event.type == pygame.MOUSEWHEEL:
                rig.scale_zoom(1.0 / ZOOM_STEP if event.y > 0 else ZOOM_STEP)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                rig.position.target = to_world(view, *event.pos)

        # The marker tracks the mouse in world space using last frame's view.
        rig.marker.target = to_world(view, *pygame.mouse.get_pos())

        # --- Update ---
        view = screen_matrix(rig.update(dt))

        # --- Draw ---
        screen.fill(BG_COLOR)
        draw_grid(screen, view)

        tx, ty, _ = rig.position.target
        pygame.draw.circle(screen, TARGET_COLOR, to_screen(view, tx, ty), 6, 2)
        mx, my, _ = rig.marker.current
        pygame.draw.circle(screen, MARKER_COLOR, to_screen(view, mx, my), 5)

        # --- HUD ---
        cx, cy, _ = rig.position.current
        heading = math.degrees(2.0 * math.atan2(rig.rotation.current[3], rig.rotation.current[0]))
        follow_str = "ON" if rig.following else "OFF"
        hud_lines = [
            f"Camera: ({cx:7.1f}, {cy:7.1f})   Heading: {heading:6.1f} deg   "
            f"Zoom: {rig.zoom.current:4.2f}   Follow: {follow_str}   FPS: {pg_clock.get_fps():.0f}",
            "LClick=Move  Q/E=Turn  Wheel=Zoom  F=Follow  R=Reset  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 20))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
