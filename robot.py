"""
Robot class running a fixed movement program on a planet
"""
from enum import Enum
from typing import Iterable, Optional

from actions import Instruction, StepOutcome, Transform, apply_instruction
from grid import Coordinate, ScentGrid, Size


class Status(Enum):
    OK = "ok"
    LOST = "lost"


class Robot:
    def __init__(self, transform: Transform, program: Iterable[Instruction], status: Status = Status.OK):
        self.transform = transform
        self.status = status
        self.program = tuple(program)  # fixed for the robot's lifetime
        if not self.program:
            raise ValueError("A robot needs at least one instruction")

        # Execution state: "running" while the program is being stepped through,
        # otherwise "stopped"
        self.state = "stopped"
        self.instructions_executed = 0
        self.scent_saves = 0  # off-grid moves a scent made us skip

    @property
    def lost(self) -> bool:
        return self.status == Status.LOST

    def run_program(self, area: Size, scents: ScentGrid) -> Optional[Coordinate]:
        """Run every instruction until the program ends or the robot is lost.

        Returns the point the robot fell from when it is lost during this
        call, otherwise None. The caller owns registering the scent there;
        this method only reads ``scents``.
        """
        if self.lost:
            return None

        self.state = "running"
        for instruction in self.program:
            if self.state != "running":
                break
            self.transform, outcome = apply_instruction(self.transform, instruction, area, scents)
            self.instructions_executed += 1

            if outcome == StepOutcome.IGNORED:
                self.scent_saves += 1
            elif outcome == StepOutcome.LOST:
                self.status = Status.LOST
                self.state = "stopped"

        self.state = "stopped"
        return self.transform.position if self.lost else None

    def __repr__(self):
        pos = self.transform.position
        program = "".join(i.value for i in self.program)
        return (f"Robot(({pos.x}, {pos.y}, {self.transform.orientation.value}), "
                f"status={self.status.value}, program={program!r})")
