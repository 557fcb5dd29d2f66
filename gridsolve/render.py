"""
Draw a Sudoku grid into an image with OpenCV.
"""

from __future__ import annotations

import os

import cv2
import numpy as np

from .grid import BOX_SIZE, SUDOKU_SIZE, Grid

DEFAULT_RENDER_SIZE = 450

GIVEN_COLOR = (255, 255, 255)
SOLVED_COLOR = (0, 200, 0)
THIN_LINE_COLOR = (100, 100, 100)
BOX_LINE_COLOR = (0, 255, 255)


def draw_grid_lines(canvas: np.ndarray) -> np.ndarray:
    """Draw cell lines, with thicker lines on the 3x3 box edges."""
    h, w = canvas.shape[:2]
    cell_h = h // SUDOKU_SIZE
    cell_w = w // SUDOKU_SIZE

    for i in range(SUDOKU_SIZE + 1):
        is_box_edge = i % BOX_SIZE == 0
        color = BOX_LINE_COLOR if is_box_edge else THIN_LINE_COLOR
        thickness = 2 if is_box_edge else 1
        y = min(i * cell_h, h - 1)
        x = min(i * cell_w, w - 1)
        cv2.line(canvas, (0, y), (w - 1, y), color, thickness)
        cv2.line(canvas, (x, 0), (x, h - 1), color, thickness)

    return canvas


def render_grid(solution: Grid, original: Grid | None = None,
                size: int = DEFAULT_RENDER_SIZE) -> np.ndarray:
    """
    Render the grid as a BGR image.

    Given digits (present in `original`) are drawn in white, digits filled
    in by the solver in green. Blank cells are left empty.
    """
    if size < SUDOKU_SIZE:
        raise ValueError(f"Image size must be at least {SUDOKU_SIZE} pixels, got {size}")
    if original is None:
        original = solution

    canvas = np.zeros((size, size, 3), dtype=np.uint8)
    draw_grid_lines(canvas)

    cell = size // SUDOKU_SIZE
    font = cv2.FONT_HERSHEY_SIMPLEX
    scale = cell / 55.0
    thickness = max(1, cell // 25)

    for r in range(SUDOKU_SIZE):
        for c in range(SUDOKU_SIZE):
            val = solution[r, c]
            if val == 0:
                continue
            color = GIVEN_COLOR if original[r, c] != 0 else SOLVED_COLOR
            text = str(val)
            text_size, _ = cv2.getTextSize(text, font, scale, thickness)
            x = c * cell + (cell - text_size[0]) // 2
            y = r * cell + (cell + text_size[1]) // 2
            cv2.putText(canvas, text, (x, y), font, scale, color, thickness, cv2.LINE_AA)

    return canvas


def save_grid_image(path: str | os.PathLike, image: np.ndarray) -> None:
    """Write the image; raises OSError if OpenCV cannot save it."""
    try:
        written = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise OSError(f"Could not write image to {path}: {e}") from e
    if not written:
        raise OSError(f"Could not write image to {path}")
