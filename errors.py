"""
Error kinds reported while reading input and running rovers
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from utils import ERROR_INVALID_GRID_SIZE, ERROR_INVALID_ROVER_INPUT, ERROR_ROVER_CREATION


class ErrorKind(Enum):
    INVALID_GRID_SIZE = ERROR_INVALID_GRID_SIZE
    INVALID_ROVER_INPUT = ERROR_INVALID_ROVER_INPUT
    SIMULATION_FAILURE = ERROR_ROVER_CREATION

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseError:
    kind: ErrorKind
    detail: str = ""

    def __str__(self):
        if self.detail:
            return f"{self.kind.message}\n{self.detail}"
        return self.kind.message


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed value or the error that prevented parsing"""
    value: Any = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SimulationFailure(Exception):
    """Unexpected failure while launching a rover or formatting its result"""

    def __init__(self, detail: str):
        super().__init__(f"{ErrorKind.SIMULATION_FAILURE.message}\n{detail}")
        self.kind = ErrorKind.SIMULATION_FAILURE
        self.detail = detail
