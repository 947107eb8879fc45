"""
Reading the grid size line and the rover lines
"""
import logging
import re
from typing import List, Optional, TextIO, Tuple

from errors import ErrorKind, ParseError, ParseResult
from grid import Grid
from rover import Rover
from utils import Orientation, Move

logger = logging.getLogger(__name__)

INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_int(token: str) -> int:
    """Parse a plain ASCII integer, rejecting underscores and non-ASCII digits"""
    if not INTEGER.fullmatch(token):
        raise ValueError(f"invalid integer: {token!r}")
    return int(token)


def parse_grid_size(line: Optional[str]) -> ParseResult:
    """Parse 'M N' into a Grid. Every token must be an integer, only the first two are used."""
    if line is None:
        return ParseResult(error=ParseError(ErrorKind.INVALID_GRID_SIZE, "No grid size line found."))

    tokens = line.split()
    if len(tokens) < 2:
        return ParseResult(error=ParseError(ErrorKind.INVALID_GRID_SIZE,
                                            f"Expected two integers, got {len(tokens)} value(s)."))
    try:
        width, height, *_ = [_parse_int(tok) for tok in tokens]
    except ValueError as e:
        return ParseResult(error=ParseError(ErrorKind.INVALID_GRID_SIZE, str(e)))

    return ParseResult(value=Grid(width, height))


def _rover_error(detail):
    return ParseResult(error=ParseError(ErrorKind.INVALID_ROVER_INPUT, detail))


def parse_rover(line: str, start_char: str = "(", end_char: str = ")") -> ParseResult:
    """Parse '(x, y, O) MOVES' into a Rover.

    Whitespace anywhere in the line is ignored. Characters after the closing
    bracket that are not move codes are skipped.
    """
    text = "".join(line.split())
    start_index = text.find(start_char)
    end_index = text.rfind(end_char)
    if start_index == -1 or end_index == -1:
        return _rover_error(f"Missing '{start_char}' or '{end_char}' in {text!r}.")
    if end_index < start_index:
        return _rover_error(f"'{end_char}' appears before '{start_char}' in {text!r}.")

    fields = text[start_index + len(start_char):end_index].split(",")
    if len(fields) != 3:
        return _rover_error(f"Expected 3 values between brackets, got {len(fields)}.")

    try:
        x, y = _parse_int(fields[0]), _parse_int(fields[1])
    except ValueError as e:
        return _rover_error(str(e))

    orientation = Orientation.from_code(fields[2]) if len(fields[2]) == 1 else None
    if orientation is None:
        return _rover_error(f"Unknown orientation {fields[2]!r}.")

    moves = []
    for c in text[end_index + len(end_char):]:
        action = Move.from_code(c)
        if action is not None:
            moves.append(action)

    return ParseResult(value=Rover(x, y, orientation, moves))


def parse_rovers(lines) -> List[Rover]:
    """Parse every rover line, substituting a default rover for invalid ones"""
    rovers = []
    for line_no, line in enumerate(lines, start=2):
        result = parse_rover(line)
        if not result.ok:
            logger.warning(f"Line {line_no}: {result.error}")
            rovers.append(Rover())
        else:
            rovers.append(result.value)
    return rovers


def read_input(stream: TextIO) -> Tuple[ParseResult, List[str]]:
    """Read the grid line and the rover lines up to the first empty line.

    Lines holding only whitespace are kept and parse as invalid rovers.
    """
    grid_line = stream.readline()
    grid_result = parse_grid_size(grid_line.strip() if grid_line else None)

    rover_lines = []
    for line in stream:
        if line.rstrip("\r\n") == "":
            break
        rover_lines.append(line.strip())
    return grid_result, rover_lines
