"""Keyboard mapping for the worm: the four arrow keys, nothing else"""

import pygame

from .state import LEFT, UP, RIGHT, DOWN

KEY_TO_DIRECTION = {
    pygame.K_LEFT: LEFT,
    pygame.K_UP: UP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
}


def handle_key(state, key):
    """
    Apply a key press to the pending direction

    Returns:
        True if the key changed the pending direction. Unmapped keys and
        reversal requests return False.
    """
    direction = KEY_TO_DIRECTION.get(key)
    if direction is None:
        return False
    return state.turn(direction)
