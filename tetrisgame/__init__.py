"""A falling-block puzzle game: piece kinds and shapes, a board, textures and a pygame front end."""

__version__ = "0.1.0"