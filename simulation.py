"""
Simulation class running every rover on the grid in input order
"""
import logging

from errors import SimulationFailure
from utils import RoverState

logger = logging.getLogger(__name__)


def format_rover(rover):
    return f"({rover.x}, {rover.y}, {rover.orientation.code}) " + ("LOST" if rover.is_lost else "")


class Simulation:
    def __init__(self, grid, rovers):
        self.grid = grid
        self.rovers = rovers
        self.failures = []

    def run(self):
        """Launch each rover one at a time and return one output line per rover"""
        logger.info(f"Running {len(self.rovers)} rover(s) on {self.grid}")
        results = []
        for i, rover in enumerate(self.rovers):
            try:
                results.append(self._launch(rover))
            except SimulationFailure as e:
                logger.error(f"Rover {i + 1}: {e}")
                self.failures.append(e)
                # Keeps one output line per rover line
                results.append(e.kind.message)

        summary = self.summary()
        logger.info(f"Finished: {summary['finished']}, lost: {summary['lost']}, "
                    f"failed: {summary['failed']}, moves applied: {summary['moves_applied']}")
        return results

    def _launch(self, rover):
        try:
            rover.launch(self.grid)
            return format_rover(rover)
        except Exception as e:
            raise SimulationFailure(str(e)) from e

    def summary(self):
        return {
            'rovers': len(self.rovers),
            'lost': sum(1 for r in self.rovers if r.is_lost),
            'finished': sum(1 for r in self.rovers if r.state == RoverState.FINISHED),
            'failed': len(self.failures),
            'moves_applied': sum(r.moves_applied for r in self.rovers),
        }

    def render_grid(self, color=True):
        return self.grid.render(self.rovers, color=color)
