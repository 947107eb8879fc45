import re
from enum import Enum

# Error messages
ERROR_INVALID_ROVER_INPUT = ("Rover values are invalid, please use the format '(x, y, O) M' where x is horizontal "
                             "position, y is vertical position, O is orientation(N,E,S,W) and M is the sequence "
                             "of movements (F,L,R).")
ERROR_INVALID_GRID_SIZE = "Grid size is invalid, please use the model (m x n) where m and n are integer values."
ERROR_ROVER_CREATION = "Error occurred while creating the rover"

# Grid map rendering
MAX_MAP_CELLS = 10000
RED = "\033[31m"
BLUE = "\033[34m"
YELLOW = "\033[33m"
RESET = "\033[0m"


def strip_ansi(text):
    """Remove ANSI escape codes from text"""
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|[\[0-?]*[ -/]*[@-~])')
    return ansi_escape.sub('', text)


class Orientation(Enum):
    # Clockwise order, the index is used for rotation
    NORTH = ('N', (0, 1), '↑')
    EAST = ('E', (1, 0), '→')
    SOUTH = ('S', (0, -1), '↓')
    WEST = ('W', (-1, 0), '←')

    @property
    def code(self):
        return self.value[0]

    @property
    def vector(self):
        return self.value[1]

    @property
    def symbol(self):
        return self.value[2]

    @classmethod
    def from_code(cls, code):
        """Look up an orientation by its one-letter code, case-insensitive. Returns None if unknown."""
        for orientation in cls:
            if orientation.code == code.upper():
                return orientation
        return None


class Move(Enum):
    FORWARD = 'F'
    LEFT = 'L'
    RIGHT = 'R'

    @classmethod
    def from_code(cls, code):
        try:
            return cls(code.upper())
        except ValueError:
            return None


class RoverState(Enum):
    ACTIVE = "active"
    LOST = "lost"
    FINISHED = "finished"
