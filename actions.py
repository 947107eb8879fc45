from utils import Orientation, Move


def move(rover):
    dx, dy = rover.orientation.vector
    rover.x += dx
    rover.y += dy


def turn(rover, direction):
    dirs = list(Orientation)
    idx = dirs.index(rover.orientation)
    if direction == 'left':
        rover.orientation = dirs[(idx + 3) % 4]
    elif direction == 'right':
        rover.orientation = dirs[(idx + 1) % 4]


def apply_move(rover, action):
    if action == Move.FORWARD:
        move(rover)
    elif action == Move.LEFT:
        turn(rover, 'left')
    elif action == Move.RIGHT:
        turn(rover, 'right')
