#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python -m games.Breakout.main
    python -m games.Breakout.main --lives 5
    python -m games.Breakout.main --seed 42 --log-level DEBUG
"""

import argparse
import sys
from typing import List, Optional

import pygame

from playkit.games.input import InputManager
from playkit.games.input.sources import KeyboardInputSource
from playkit.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    get_logger,
    register_sink,
)
from games.Breakout.game_mode import BreakoutMode
from games.Breakout.config import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, RESIZABLE

log = get_logger('breakout.main')


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from display options and the game's ARGUMENTS."""
    parser = argparse.ArgumentParser(description=f"{BreakoutMode.NAME} - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Default log level')

    # Game options
    for arg in BreakoutMode.get_arguments():
        kwargs = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **kwargs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Breakout standalone."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.lives < 1:
        parser.error('--lives must be at least 1')

    if args.log_level:
        configure_logging(level=args.log_level)
    register_sink('session', create_sink_for_environment('session'))

    pygame.init()
    pygame.font.init()

    try:
        if args.fullscreen:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            flags = pygame.RESIZABLE if RESIZABLE else 0
            screen = pygame.display.set_mode((args.width, args.height), flags)
        width, height = screen.get_size()
        pygame.display.set_caption(BreakoutMode.NAME)

        game = BreakoutMode(
            skin=args.skin,
            lives=args.lives,
            width=width,
            height=height,
            seed=args.seed,
        )
        input_manager = InputManager(KeyboardInputSource())

        clock = pygame.time.Clock()
        running = True

        log.info("Controls: LEFT/RIGHT (or A/D) to move, SPACE to start, ESC to quit")

        while running:
            dt = clock.tick(args.fps) / 1000.0

            input_manager.update(dt)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            screen = pygame.display.get_surface()
            game.set_screen_size(*screen.get_size())
            game.handle_input(input_manager.get_frame())
            game.update(dt)

            game.render(screen)
            pygame.display.flip()

        log.info("Final score: %d", game.get_score())
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
