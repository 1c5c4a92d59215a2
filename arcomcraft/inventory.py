"""Player inventory: counts of blocks held, by block id."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterator
from typing import TextIO

from arcomcraft.blocks import MAX_BLOCKS, BlockRegistry


class Inventory:
    """Counts of each block id the player holds."""

    def __init__(self) -> None:
        self._counts: Counter[int] = Counter()

    def add_block(self, block_id: int, amount: int) -> None:
        """Add ``amount`` of ``block_id``; out-of-range ids are ignored."""
        if 0 <= block_id < MAX_BLOCKS:
            self._counts[block_id] += amount

    def count(self, block_id: int) -> int:
        return self._counts[block_id]

    def clear(self) -> None:
        self._counts.clear()

    def lines(self, registry: BlockRegistry) -> Iterator[str]:
        """Yield ``"<name> x<count>"`` for each registered block held, in id order."""
        for block_id, amount in sorted(self._counts.items()):
            block = registry.get(block_id)
            if amount > 0 and block is not None:
                yield f"{block.name} x{amount}"

    def show(self, registry: BlockRegistry, out: TextIO | None = None) -> None:
        """Print the inventory listing to ``out`` (standard output by default)."""
        stream = out or sys.stdout
        print("Inventari:", file=stream)
        for line in self.lines(registry):
            print(line, file=stream)