"""Character-grid rasterizer for the supernova animation."""

import numpy as np

from ..config import (
    BLANK_GLYPH,
    BOUNCE_SHELL_WIDTH,
    CELL_ASPECT,
    COLLAPSE_GLYPH,
    CORE_GLYPH,
    EJECTA_GLYPH,
    EXPLOSION_SHELL_WIDTH,
    GIANT_GLYPH,
    HEIGHT,
    NEBULA_FILL_PROBABILITY,
    NEBULA_GLYPH,
    SHOCK_GLYPH,
    WIDTH,
)
from ..physics.particles import ParticleStore, alive_mask
from ..physics.star import Phase, Star, grid_center


def compute_distance_field(width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """
    Distance of every cell from the grid centre.

    The vertical offset is stretched by CELL_ASPECT so circles come out
    round on a terminal whose cells are taller than they are wide.

    Returns:
        Array of shape (height, width)
    """
    cx, cy = grid_center(width, height)
    ys, xs = np.mgrid[0:height, 0:width]
    dx = xs - cx
    dy = (ys - cy) * CELL_ASPECT
    return np.sqrt(dx * dx + dy * dy)


def _shell(d: np.ndarray, outer: float, width: float) -> np.ndarray:
    return (d <= outer) & (d >= outer - width)


def base_layer(star: Star, d: np.ndarray, rng) -> np.ndarray:
    """Phase-specific glyphs, blank where the phase draws nothing."""
    grid = np.full(d.shape, BLANK_GLYPH, dtype='<U1')

    if star.phase == Phase.GIANT:
        grid[d <= star.radius] = GIANT_GLYPH
    elif star.phase == Phase.COLLAPSE:
        grid[d <= star.radius] = COLLAPSE_GLYPH
    elif star.phase == Phase.BOUNCE:
        grid[_shell(d, star.radius, BOUNCE_SHELL_WIDTH)] = SHOCK_GLYPH
    elif star.phase == Phase.EXPLOSION:
        grid[_shell(d, star.explosion_radius, EXPLOSION_SHELL_WIDTH)] = SHOCK_GLYPH
    elif star.phase == Phase.NEBULA:
        # Re-rolled every frame for a flickering gas texture
        gas = np.asarray(rng.random(d.shape)) < NEBULA_FILL_PROBABILITY
        grid[(d <= star.explosion_radius) & gas] = NEBULA_GLYPH

    return grid


def render(
    star: Star,
    particles: ParticleStore,
    rng,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> np.ndarray:
    """
    Rasterize the star and its ejecta into a character grid.

    Layers are painted bottom to top, so later layers win:
    phase glyph, then the neutron star core, then live particles.

    Args:
        star: Current star state
        particles: Ejecta store
        rng: Random source for the nebula fill
        width: Grid width in characters
        height: Grid height in characters

    Returns:
        Array of shape (height, width) holding one character per cell
    """
    d = compute_distance_field(width, height)
    grid = base_layer(star, d, rng)

    grid[d <= star.core_radius] = CORE_GLYPH

    alive = alive_mask(particles)
    if np.any(alive):
        cells = np.floor(particles.positions[alive]).astype(np.int64)
        px, py = cells[:, 0], cells[:, 1]
        on_grid = (px >= 0) & (px < width) & (py >= 0) & (py < height)
        grid[py[on_grid], px[on_grid]] = EJECTA_GLYPH

    return grid


def frame_to_text(grid: np.ndarray) -> str:
    """Join a character grid into newline-terminated rows."""
    return ''.join(''.join(row) + '\n' for row in grid)
