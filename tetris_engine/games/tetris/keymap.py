"""
Keyboard bindings - translate pygame key events into game input events.
"""

from typing import Dict, Optional

import pygame

from .game import InputEvent


def key_down_bindings() -> Dict[int, InputEvent]:
    """Key codes that fire an input event when pressed."""
    return {
        pygame.K_a: InputEvent.MOVE_LEFT,
        pygame.K_LEFT: InputEvent.MOVE_LEFT,
        pygame.K_d: InputEvent.MOVE_RIGHT,
        pygame.K_RIGHT: InputEvent.MOVE_RIGHT,
        pygame.K_q: InputEvent.ROTATE_CCW,
        pygame.K_e: InputEvent.ROTATE_CW,
        pygame.K_UP: InputEvent.ROTATE_CW,
        pygame.K_s: InputEvent.SOFT_DROP_START,
        pygame.K_DOWN: InputEvent.SOFT_DROP_START,
        pygame.K_p: InputEvent.TOGGLE_PAUSE,
        pygame.K_ESCAPE: InputEvent.TOGGLE_PAUSE,
        pygame.K_RETURN: InputEvent.START_GAME,
    }


def key_up_bindings() -> Dict[int, InputEvent]:
    """Key codes that fire an input event when released."""
    return {
        pygame.K_s: InputEvent.SOFT_DROP_END,
        pygame.K_DOWN: InputEvent.SOFT_DROP_END,
    }


def translate_event(event) -> Optional[InputEvent]:
    """
    Map a pygame event to a game input event.

    Args:
        event: A pygame event

    Returns:
        The matching InputEvent, or None if the event is not bound
    """
    if event.type == pygame.KEYDOWN:
        return key_down_bindings().get(event.key)
    if event.type == pygame.KEYUP:
        return key_up_bindings().get(event.key)
    return None
