"""
Worm game state and rules (no pygame)
- Body is stored tail-first: index 0 is the tail, the last index is the head
- Two generations of positions are kept: the body before and after the last tick
- Any collision (wall or self) resets the whole state to the starting layout
- Food is drawn from the explicit list of free cells, so placement always terminates
"""

from collections import namedtuple
import random

# Reference configuration: 400x600 window of 20px cells
GRID_WIDTH = 20
GRID_HEIGHT = 30

LEFT = (-1, 0)
UP = (0, -1)
RIGHT = (1, 0)
DOWN = (0, 1)
DIRECTIONS = (LEFT, UP, RIGHT, DOWN)

START_BODY = ((0, 0), (0, 1))
START_DIRECTION = DOWN


def is_opposite(a, b):
    """True if the two directions point exactly against each other"""
    return a[0] == -b[0] and a[1] == -b[1]


class TickResult(namedtuple('TickResult', ['collision', 'ate'])):
    """Outcome of one tick. `collision` is 'wall', 'self' or None."""
    __slots__ = ()

    def __new__(cls, collision=None, ate=False):
        return super().__new__(cls, collision, ate)

    @property
    def restarted(self):
        return self.collision is not None


class WormState:
    def __init__(self, grid_width=GRID_WIDTH, grid_height=GRID_HEIGHT, seed=None):
        """
        Initialize worm state

        Args:
            grid_width: Width of the grid (x dimension)
            grid_height: Height of the grid (y dimension)
            seed: Random seed for food placement. If None, food placement is not reproducible.
        """
        if grid_width < 1 or grid_height < len(START_BODY):
            raise ValueError(f"Grid {grid_width}x{grid_height} cannot hold the starting worm")
        if grid_width * grid_height <= len(START_BODY):
            raise ValueError(f"Grid {grid_width}x{grid_height} leaves no room for food")

        self.grid_width = grid_width
        self.grid_height = grid_height
        self.rng = random.Random(seed)
        self.resets = 0
        self.reset()
        # the first initialization is not a restart
        self.resets = 0

    def reset(self):
        """Reset the game to its initial state"""
        self.body = START_BODY
        self.previous = self.body
        self._occupied = set(self.body)
        self.direction = START_DIRECTION
        self.score = 0
        self.food = self._place_food()
        self.resets += 1

    @property
    def head(self):
        return self.body[-1]

    def free_cells(self):
        """All cells not currently occupied by the worm, in row-major order"""
        return [
            (x, y) for y in range(self.grid_height)
            for x in range(self.grid_width)
            if (x, y) not in self._occupied
        ]

    def _place_food(self):
        """Pick food uniformly among free cells (None if the board is full)"""
        empties = self.free_cells()
        return self.rng.choice(empties) if empties else None

    def in_bounds(self, cell):
        return 0 <= cell[0] < self.grid_width and 0 <= cell[1] < self.grid_height

    def collision_type(self, cell):
        """
        Check what a head moving into `cell` would hit
        Returns: 'wall', 'self', or None
        The current tail counts as occupied: it has not moved away yet.
        """
        if not self.in_bounds(cell):
            return 'wall'
        if cell in self._occupied:
            return 'self'
        return None

    def turn(self, direction):
        """
        Request a new heading for the next tick

        A request for the exact opposite of the current direction is ignored;
        any other request replaces the pending direction, so only the latest
        one before the next tick counts.

        Returns:
            True if the request replaced the pending direction
        """
        direction = tuple(direction)
        if direction not in DIRECTIONS:
            raise ValueError(f"Not a unit direction: {direction}")
        if is_opposite(direction, self.direction):
            return False
        self.direction = direction
        return True

    def tick(self):
        """
        Advance the worm by exactly one cell

        Returns:
            TickResult with the collision reason (the state has already been
            reset when it is set) and whether food was eaten
        """
        # Swap generations: the old body tuple is immutable, no copy needed
        self.previous = self.body

        dx, dy = self.direction
        head_x, head_y = self.head
        new_head = (head_x + dx, head_y + dy)

        collision = self.collision_type(new_head)
        if collision:
            self.reset()
            return TickResult(collision=collision)

        self._occupied.add(new_head)

        if new_head == self.food:
            self.body = self.body + (new_head,)
            self.score += 1
            self.food = self._place_food()
            return TickResult(ate=True)

        self._occupied.discard(self.body[0])
        self.body = self.body[1:] + (new_head,)
        return TickResult()
