"""Positions of the walls placed as the board shrinks in the endgame.

Shrinking starts at the top-left inner cell of the outermost non-wall ring,
goes clockwise, and then continues with the next ring inwards.
"""

from __future__ import annotations

from bomberarena.coord import Coord


def calculate_shrink_location(shrink_number: int, width: int, height: int) -> Coord | None:
    """Return the cell walled on the given shrink step, or None once the board is full."""
    if width < 2 or height < 2:
        return None
    if shrink_number >= (width - 2) * (height - 2):
        return None

    layer = 1
    layer_tiles = calculate_layer_tiles(width, height, layer)
    while shrink_number >= layer_tiles:
        shrink_number -= layer_tiles
        layer += 1
        layer_tiles = calculate_layer_tiles(width, height, layer)

    layer_width = width - 2 * layer
    layer_height = height - 2 * layer

    if shrink_number < layer_width:
        return Coord(layer + shrink_number, layer)
    if shrink_number < layer_width + layer_height - 1:
        offset = shrink_number - layer_width
        return Coord(layer + layer_width - 1, layer + offset + 1)
    if shrink_number < 2 * layer_width + layer_height - 2:
        offset = shrink_number - (layer_width + layer_height - 1)
        return Coord(layer + layer_width - offset - 2, layer + layer_height - 1)
    offset = shrink_number - (2 * layer_width + layer_height - 2)
    return Coord(layer, layer + layer_height - offset - 2)


def calculate_layer_tiles(width: int, height: int, layer: int) -> int:
    """Return the number of cells in a ring; layer 0 is the outer wall."""
    if layer < 1:
        raise ValueError(
            "Layer must be at least 1, 0 is the outermost layer and has no tiles to shrink."
        )
    if width < 3 or height < 3:
        raise ValueError("Map must be at least 3x3 to have layers to shrink.")

    layer_width = width - 2 * layer
    layer_height = height - 2 * layer
    if layer_width <= 0 or layer_height <= 0:
        return 0
    if layer_width == 1 or layer_height == 1:
        return layer_width * layer_height
    return 2 * layer_width + 2 * layer_height - 4