"""Open-block bookkeeping for the statement transpiler."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional


class Block(Enum):
    """Kinds of scope the transpiler can open, with the text that closes each."""

    FUNCTION = ("function", "}")
    CLASS = ("class", "}")
    METHOD = ("method", "}")
    EVENT = ("event", "});")
    IF = ("if", "}")
    ELSE = ("else", "}")
    LOOP = ("loop", "}")
    BLOCK = ("block", "}")

    def __init__(self, tag: str, closer: str) -> None:
        self.tag = tag
        self.closer = closer

    def __str__(self) -> str:
        return self.tag


class BlockStack:
    """
    LIFO record of the scopes opened so far.

    Every push is matched by exactly one closing emission: ``pop`` and
    ``close_all`` hand back the closer text so callers never spell a brace
    themselves.
    """

    def __init__(self) -> None:
        self._blocks: List[Block] = []

    def __len__(self) -> int:
        return len(self._blocks)

    def __bool__(self) -> bool:
        return bool(self._blocks)

    def __contains__(self, block: Block) -> bool:
        return block in self._blocks

    @property
    def top(self) -> Optional[Block]:
        return self._blocks[-1] if self._blocks else None

    def push(self, block: Block) -> None:
        self._blocks.append(block)

    def discard_top(self) -> Block:
        """Pop without producing a closer, for constructs that close inline (``} else {``)."""
        return self._blocks.pop()

    def pop(self) -> str:
        return self._blocks.pop().closer

    def pop_while(self, block: Block) -> List[str]:
        closers = []
        while self._blocks and self._blocks[-1] is block:
            closers.append(self.pop())
        return closers

    def close_all(self) -> List[str]:
        closers = []
        while self._blocks:
            closers.append(self.pop())
        return closers

    def snapshot(self) -> List[str]:
        return [block.tag for block in self._blocks]


__all__ = ["Block", "BlockStack"]
