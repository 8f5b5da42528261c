"""
Day 5: Supply Stacks.

Input is a crate drawing, a blank line, then "move N from A to B" lines.
- Part 1: the crane moves crates one at a time (order reverses)
- Part 2: the crane moves N crates at once (order preserved)

Answer is the top crate of every stack, in stack order.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List

logger = logging.getLogger(__name__)

INSTRUCTION_RE = re.compile(r"^move (\d+) from (\d+) to (\d+)$")


@dataclass(frozen=True)
class Instruction:
    amount: int
    src: int
    dest: int


class InstructionError(Exception):
    """An instruction that cannot be applied to the current stacks."""

    def __init__(self, reason: str, instruction: Instruction):
        super().__init__(f"{reason}: {instruction}")
        self.reason = reason
        self.instruction = instruction


@dataclass
class CargoManifest:
    stacks: Dict[int, List[str]]
    instructions: List[Instruction] = field(default_factory=list)

    def _endpoints(self, inst: Instruction) -> tuple[List[str], List[str]]:
        if inst.src not in self.stacks:
            raise InstructionError("source stack not found", inst)
        if inst.src == inst.dest:
            raise InstructionError("source and destination are the same stack", inst)
        if inst.dest not in self.stacks:
            raise InstructionError("destination stack not found", inst)
        src, dest = self.stacks[inst.src], self.stacks[inst.dest]
        if inst.amount > len(src):
            raise InstructionError("not enough crates", inst)
        return src, dest

    def apply_one_at_a_time(self) -> None:
        for inst in self.instructions:
            src, dest = self._endpoints(inst)
            for _ in range(inst.amount):
                dest.append(src.pop())

    def apply_in_bulk(self) -> None:
        for inst in self.instructions:
            src, dest = self._endpoints(inst)
            split_at = len(src) - inst.amount
            load = src[split_at:]
            del src[split_at:]
            dest.extend(load)

    def current_tops(self) -> str:
        return "".join(self.stacks[k][-1] for k in sorted(self.stacks) if self.stacks[k])


def parse_stacks(lines: List[str]) -> Dict[int, List[str]]:
    """
    Parse the drawing. The last line holds the stack ids; crate labels sit
    in the same column as their id.
    """
    id_line = lines[-1]
    columns = [i for i, c in enumerate(id_line) if not c.isspace()]

    stacks: Dict[int, List[str]] = {}
    for stack_id, col in enumerate(columns, start=1):
        stacks[stack_id] = [
            line[col]
            for line in reversed(lines[:-1])
            if col < len(line) and line[col].isalnum()
        ]

    return stacks


def parse_instructions(lines: List[str]) -> List[Instruction]:
    instructions = []
    for line in lines:
        m = INSTRUCTION_RE.match(line.strip())
        if m is None:
            continue
        amount, src, dest = (int(g) for g in m.groups())
        instructions.append(Instruction(amount, src, dest))
    return instructions


def parse_input(text: str) -> CargoManifest:
    """
    Split the input into drawing and instructions.

    Raises:
        ValueError: If there is no crate drawing
    """
    lines = text.splitlines()

    # Drop leading blank lines, then the drawing runs up to the next blank
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    end = start
    while end < len(lines) and lines[end].strip():
        end += 1

    drawing = lines[start:end]
    if not drawing:
        raise ValueError("Invalid input")

    return CargoManifest(
        stacks=parse_stacks(drawing),
        instructions=parse_instructions(lines[end + 1:]),
    )


def _solve(text: str, bulk: bool) -> str:
    manifest = parse_input(text)
    try:
        if bulk:
            manifest.apply_in_bulk()
        else:
            manifest.apply_one_at_a_time()
    except InstructionError as exc:
        logger.error(f"error applying instructions: {exc}")
        return "ERROR"

    return manifest.current_tops()


# PART 1


def solve_1(text: str) -> str:
    return _solve(text, bulk=False)


# PART 2


def solve_2(text: str) -> str:
    return _solve(text, bulk=True)
