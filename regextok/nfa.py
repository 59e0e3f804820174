"""Building blocks of the automaton compiled from a syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable


class OPCode(Enum):
    """How an instruction consumes input."""

    EPSILON = auto()
    ONCE = auto()
    REPEAT = auto()


@dataclass(frozen=True)
class Instruction:
    """An operation guarding a transition, with its rule and repeat bounds."""

    op: OPCode
    rule: str = ""
    min_count: int = 1
    max_count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", OPCode(self.op))
        if self.min_count < 0 or self.max_count < 0:
            raise ValueError("repeat bounds cannot be negative")


Transition = tuple[Instruction, frozenset[int]]


@dataclass
class NFAState:
    """A numbered state with its outgoing transitions."""

    state: int = 0
    is_accepting: bool = False
    transitions: list[Transition] = field(default_factory=list)

    def add_transition(self, instruction: Instruction, targets: Iterable[int]) -> None:
        """Append a transition to the given set of target states."""
        self.transitions.append((instruction, frozenset(targets)))

    def clear_transitions(self) -> None:
        """Remove every transition from this state."""
        self.transitions.clear()