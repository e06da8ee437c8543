"""Loading block textures from a palette image."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

DEFAULT_BLOCK_COUNT = 12

_log = logging.getLogger(__name__)


def slice_palette(
    palette: pygame.Surface, count: int = DEFAULT_BLOCK_COUNT
) -> list[pygame.Surface]:
    """Cut a horizontal strip of equally wide blocks into separate surfaces.

    Raises ValueError if count is not positive or the palette is narrower
    than the number of blocks.
    """
    if count <= 0:
        raise ValueError(f"block count must be positive, got {count}")
    width, height = palette.get_size()
    block_width = width // count
    if block_width == 0:
        raise ValueError(
            f"palette of width {width} is too narrow for {count} blocks"
        )
    _log.debug("block width: %d, block height: %d", block_width, height)
    return [
        palette.subsurface(pygame.Rect(i * block_width, 0, block_width, height)).copy()
        for i in range(count)
    ]


def load_textures(
    path: str | Path, count: int = DEFAULT_BLOCK_COUNT
) -> list[pygame.Surface]:
    """Load a palette image and slice it into block textures.

    Raises FileNotFoundError if the image does not exist and pygame.error if
    it cannot be read as an image.
    """
    image_path = Path(path)
    if not image_path.is_file():
        raise FileNotFoundError(f"palette image not found: {image_path}")
    palette = pygame.image.load(str(image_path))
    return slice_palette(palette, count)