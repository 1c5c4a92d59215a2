"""Block definitions and the registry of known block types."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

MAX_BLOCKS = 256
"""Number of distinct block ids the game can address."""

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Block:
    """A block type: its id, display name and texture file."""

    id: int
    name: str
    texture: str


_DEFAULT_BLOCKS = (
    Block(0, "Air", "air.png"),
    Block(1, "Stone", "stone.png"),
    Block(2, "Dirt", "dirt.png"),
    Block(3, "Grass", "grass.png"),
)


class BlockRegistry:
    """The block types known to the game, indexed by id."""

    def __init__(self) -> None:
        self._blocks: list[Block] = list(_DEFAULT_BLOCKS)
        log.info("%d blocs inicialitzats.", len(self._blocks))

    def get(self, block_id: int) -> Block | None:
        """Return the block with ``block_id``, or None if no such block is registered."""
        if 0 <= block_id < len(self._blocks):
            return self._blocks[block_id]
        return None

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)