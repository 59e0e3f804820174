"""Nodes of the syntax tree built from a token list."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from .tokens import Token


@dataclass
class AstNode:
    """A token together with how often it may repeat."""

    token: Optional[Token] = None
    min_count: int = 1
    max_count: int = 1
    left: Optional["AstNode"] = field(default=None, repr=False)
    right: Optional["AstNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        # The node owns its own copy of the token.
        self.token = copy.deepcopy(self.token)

    def __str__(self) -> str:
        header = f"[Node] Repetition min : {self.min_count} max : {self.max_count}"
        if self.token is None:
            return header
        return f"{header}\n{self.token}"