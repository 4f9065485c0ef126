"""Worm package - Contains the game state, renderer and manual play loop"""
from .state import WormState, TickResult
from .manual_play import WormGame, play_game

__all__ = ['WormState', 'TickResult', 'WormGame', 'play_game']
