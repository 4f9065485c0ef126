"""
Worm - Manual Play Mode
- Logic advances one cell per timer event (fixed tick period)
- Rendering runs every frame and interpolates between the last two ticks
- Arrow keys steer; a 180 degree turn is ignored
- Hitting a wall or the worm itself restarts the game immediately
- Press ESC or close the window to exit
"""

import sys

import pygame

from .controls import handle_key
from .interpolation import interpolation_fraction
from .renderer import WormRenderer, CELL_SIZE
from .state import WormState, GRID_WIDTH, GRID_HEIGHT

TICK_EVENT = pygame.USEREVENT + 1
TICK_MS = 150
FPS = 60


class WormGame:
    """
    Owns the single live session.
    The tick mutates state, input only changes the pending direction,
    the frame only reads state.
    """

    def __init__(self, state, renderer, tick_ms=TICK_MS, now=None):
        """
        Args:
            state: WormState to drive
            renderer: object with paint(state, fraction)
            tick_ms: Tick period in milliseconds
            now: Millisecond clock (defaults to pygame.time.get_ticks)
        """
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.state = state
        self.renderer = renderer
        self.tick_ms = tick_ms
        self.now = now or pygame.time.get_ticks
        self.last_tick_ms = self.now()

    def _arm_timer(self):
        """Cancel the periodic tick, drop any tick already queued, and start it again"""
        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.event.clear(TICK_EVENT)
        pygame.time.set_timer(TICK_EVENT, self.tick_ms)
        self.last_tick_ms = self.now()

    def start(self):
        self._arm_timer()

    def restart(self):
        """Reset the state and re-synchronize the tick timer with it"""
        self.state.reset()
        self._arm_timer()

    def stop(self):
        pygame.time.set_timer(TICK_EVENT, 0)

    def on_tick(self):
        """Advance the game by one tick"""
        self.last_tick_ms = self.now()
        result = self.state.tick()
        if result.restarted:
            print(f"Hit {'a wall' if result.collision == 'wall' else 'itself'} "
                  f"- restarting (restart #{self.state.resets})")
            # tick() already reset the state; only the timer is left to restart
            self._arm_timer()
        return result

    def on_frame(self):
        """Paint the interpolated frame and return the fraction used"""
        fraction = interpolation_fraction(self.now() - self.last_tick_ms, self.tick_ms)
        self.renderer.paint(self.state, fraction)
        return fraction

    def handle_event(self, event):
        """
        Dispatch one pygame event

        Returns:
            False when the player asked to quit, True otherwise
        """
        if event.type == pygame.QUIT:
            return False
        if event.type == TICK_EVENT:
            self.on_tick()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            handle_key(self.state, event.key)
        return True

    def handle_events(self, events):
        """
        Dispatch a batch of events from one pygame.event.get() call

        Tick events that were already in the batch when the game restarted
        belong to the cancelled timer and are skipped.

        Returns:
            False when the player asked to quit, True otherwise
        """
        resets = self.state.resets
        for event in events:
            if event.type == TICK_EVENT and self.state.resets != resets:
                continue
            if not self.handle_event(event):
                return False
        return True


def play_game(grid_width=GRID_WIDTH, grid_height=GRID_HEIGHT, tick_ms=TICK_MS,
              cell_size=CELL_SIZE, fps=FPS, show_score=True, seed=None):
    """
    Main manual play game function

    Args:
        grid_width: Width of the grid
        grid_height: Height of the grid
        tick_ms: Milliseconds between logic ticks
        cell_size: Size of each cell in pixels
        fps: Frames per second
        show_score: If True, draw the score
        seed: Random seed for food placement
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")

    # ---------------- Init ----------------
    check_errors = pygame.init()
    if check_errors[1] > 0:
        print(f'[!] Had {check_errors[1]} errors when initialising game, exiting...')
        sys.exit(-1)

    state = WormState(grid_width, grid_height, seed=seed)

    pygame.display.set_caption('Worm')
    game_window = pygame.display.set_mode((grid_width * cell_size, grid_height * cell_size))
    renderer = WormRenderer(game_window, cell_size=cell_size, show_score=show_score)
    fps_controller = pygame.time.Clock()

    game = WormGame(state, renderer, tick_ms=tick_ms)
    game.start()
    print(f"Worm started on a {grid_width}x{grid_height} grid, one move every {tick_ms} ms")

    # ---------------- Main loop ----------------
    running = True
    while running:
        running = game.handle_events(pygame.event.get())

        if running:
            game.on_frame()
            pygame.display.update()
            fps_controller.tick(fps)

    game.stop()
    pygame.quit()
    print(f"Worm closed | Score: {state.score} | Restarts: {state.resets}")


if __name__ == "__main__":
    # Run with default settings when executed directly
    play_game()
