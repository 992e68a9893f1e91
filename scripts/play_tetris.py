#!/usr/bin/env python3
"""
Human Play Mode - Play Tetris yourself.

Controls:
    A / Left: Move left
    D / Right: Move right
    Q: Rotate anticlockwise
    E / Up: Rotate clockwise
    S / Down: Drop (hold)
    P / ESC: Pause
    Enter: Start game
"""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pygame
from tetris_engine.games.tetris import TetrisGame
from tetris_engine.games.tetris.keymap import translate_event
from tetris_engine.games.tetris.renderer import TetrisRenderer
from tetris_engine.utils.config_loader import load_config, load_game_config
from tetris_engine.utils.logging_setup import setup_logging


logger = logging.getLogger("tetris_engine.play")


def parse_args():
    parser = argparse.ArgumentParser(description="Play Tetris")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a single YAML config file")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the piece generator")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Override the configured log level")
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()

    config = load_config(args.config) if args.config else load_game_config("tetris")
    if args.seed is not None:
        config.tetris.seed = args.seed
    if args.log_level:
        config.logging.level = args.log_level

    setup_logging(config.logging)

    game = TetrisGame(config.tetris)
    renderer = TetrisRenderer(cell_size=config.visualization.tile_size)

    pygame.init()
    screen = pygame.display.set_mode(renderer.get_preferred_size())
    pygame.display.set_caption(config.visualization.window_title)
    clock = pygame.time.Clock()

    logger.info("Window opened at %s, %d fps",
                renderer.get_preferred_size(), config.visualization.frame_rate)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue

            input_event = translate_event(event)
            if input_event is not None:
                game.push_input(input_event)

        game.tick()

        renderer.render(game.get_state(), screen)
        pygame.display.flip()

        # Sleeps for whatever is left of the frame after logic and drawing
        clock.tick(config.visualization.frame_rate)

    pygame.quit()
    logger.info("Final score: %d", game.get_score())


if __name__ == "__main__":
    main()
