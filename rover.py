"""
Rover class replaying a fixed sequence of moves on a grid
"""
import logging
from typing import List, Tuple

from actions import apply_move
from utils import Orientation, Move, RoverState

logger = logging.getLogger(__name__)


class Rover:
    def __init__(self, x: int = 0, y: int = 0, orientation: Orientation = Orientation.NORTH, moves=None):
        self.x = x  # horizontal, easterly
        self.y = y  # vertical, northerly
        self.orientation = orientation
        self.moves: List[Move] = list(moves) if moves else []

        # "active" -> replaying moves
        # "lost" -> drove off the grid, frozen at the last valid position
        # "finished" -> all moves applied while on the grid
        self.state = RoverState.ACTIVE
        self.moves_applied = 0

        # Positions occupied, used for the grid map
        self.path: List[Tuple[int, int]] = [(x, y)]

    def __repr__(self):
        return f"Rover(x={self.x}, y={self.y}, orientation={self.orientation.code}, state={self.state.value})"

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def is_lost(self) -> bool:
        return self.state == RoverState.LOST

    def launch(self, grid):
        """Apply every move in order until the moves run out or the rover leaves the grid"""
        for action in self.moves:
            if self.state != RoverState.ACTIVE:
                break
            self.execute_move(action, grid)

        if self.state == RoverState.ACTIVE:
            self.state = RoverState.FINISHED
        return self

    def execute_move(self, action: Move, grid):
        last_valid = self.position
        apply_move(self, action)
        self.moves_applied += 1

        # Checked after every move, rotations included
        if not grid.contains(self.position):
            logger.debug(f"Rover left the grid at {self.position} moving {action.value}, "
                         f"reverting to {last_valid}")
            self.x, self.y = last_valid
            self.state = RoverState.LOST
            return

        if action == Move.FORWARD:
            self.path.append(self.position)
        logger.debug(f"{action.value} -> ({self.x}, {self.y}, {self.orientation.code})")
