"""The interactive game: input, timing and drawing on a pygame surface."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Sequence

import pygame

from tetrisgame.board import (
    BLINK_INTERVAL,
    BLOCK_HEIGHT,
    CLEAR_DURATION,
    GAME_BOTTOM,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Board,
)
from tetrisgame.textures import load_textures

DROP_TIME = 1.0
FRAME_RATE = 144
DEFAULT_PALETTE = "assets/yukulel_minos.png"

_BACKGROUND = (0, 0, 0)
_BOTTOM_LINE_COLOR = (255, 0, 0)
_BLINK_TINT = (0, 255, 0)


def _blink_alpha(elapsed: float) -> int:
    """Opacity of clearing rows, fading out once per blink period."""
    alpha = int(255 * (1 - math.fmod(elapsed, BLINK_INTERVAL * 2) / BLINK_INTERVAL))
    return max(0, min(255, alpha))


class GameApp:
    """Runs a board against keyboard input and draws it on a surface."""

    def __init__(
        self,
        screen: pygame.Surface,
        textures: Sequence[pygame.Surface],
        rng: random.Random | None = None,
    ) -> None:
        self.screen = screen
        self.textures = list(textures)
        self.board = Board(rng)
        self.drop_elapsed = 0.0
        self.clear_elapsed = 0.0

    def _after_move(self, was_clearing: bool) -> None:
        if self.board.is_clearing and not was_clearing:
            self.clear_elapsed = 0.0

    def handle_key(self, key: int) -> bool:
        """React to a key press; return whether the key was acted on.

        Keys are ignored while rows are being cleared.
        """
        if self.board.is_clearing:
            return False
        was_clearing = self.board.is_clearing
        if key == pygame.K_LEFT:
            self.board.move_sideways(-1)
        elif key == pygame.K_RIGHT:
            self.board.move_sideways(1)
        elif key == pygame.K_DOWN:
            self.board.soft_drop()
        elif key == pygame.K_SPACE:
            self.board.hard_drop()
        elif key == pygame.K_TAB:
            self.board.rotate()
        else:
            return False
        self._after_move(was_clearing)
        return True

    def update(self, elapsed: float) -> None:
        """Advance the clocks by elapsed seconds and apply gravity or clearing."""
        self.drop_elapsed += elapsed
        if self.board.is_clearing:
            self.clear_elapsed += elapsed
            if self.clear_elapsed >= CLEAR_DURATION:
                self.board.finish_clearing()
                self.clear_elapsed = 0.0
            return
        if self.drop_elapsed > DROP_TIME:
            self.drop_elapsed = 0.0
            was_clearing = self.board.is_clearing
            self.board.soft_drop()
            self._after_move(was_clearing)

    def _blit_block(self, color: int, x: int, y: int) -> None:
        self.screen.blit(self.textures[int(color)], (x, y))

    def _draw_clearing(self) -> None:
        alpha = _blink_alpha(self.clear_elapsed)
        cleared = set(self.board.clear_rows)
        for cell in self.board.occupied_blocks:
            if int(cell.y / BLOCK_HEIGHT) not in cleared:
                continue
            tinted = self.textures[int(cell.color)].copy()
            tinted.fill(_BLINK_TINT, special_flags=pygame.BLEND_RGB_MULT)
            tinted.set_alpha(alpha)
            self.screen.blit(tinted, (cell.x, cell.y))

    def draw(self) -> None:
        """Draw the current scene onto the screen surface."""
        self.screen.fill(_BACKGROUND)
        if self.board.is_clearing:
            self._draw_clearing()
            return
        pygame.draw.rect(
            self.screen, _BOTTOM_LINE_COLOR, pygame.Rect(0, GAME_BOTTOM, WINDOW_WIDTH, 2)
        )
        for cell in self.board.occupied_blocks:
            self._blit_block(cell.color, cell.x, cell.y)
        piece = self.board.piece
        for x, y in piece.layout():
            self._blit_block(piece.color, x, y)

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
            if not running:
                break
            self.update(clock.tick(FRAME_RATE) / 1000.0)
            self.draw()
            pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(description="Falling-block puzzle game.")
    parser.add_argument(
        "--palette",
        default=DEFAULT_PALETTE,
        help="image holding the block textures side by side",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Tetris")
        textures = load_textures(args.palette)
        GameApp(screen, textures).run()
    finally:
        pygame.quit()
    return 0