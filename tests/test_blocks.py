import dataclasses

import pytest

from arcomcraft.blocks import Block, BlockRegistry


def test_registry_holds_four_blocks():
    assert len(BlockRegistry()) == 4


def test_get_known_blocks():
    registry = BlockRegistry()
    assert registry.get(0).name == "Air"
    assert registry.get(1).texture == "stone.png"
    assert registry.get(3) == Block(3, "Grass", "grass.png")


@pytest.mark.parametrize("block_id", [-1, 4, 255, 1000])
def test_get_unknown_returns_none(block_id):
    assert BlockRegistry().get(block_id) is None


def test_ids_match_positions():
    registry = BlockRegistry()
    for position, block in enumerate(registry):
        assert block.id == position
        assert registry.get(position) is block


def test_block_is_immutable():
    registry = BlockRegistry()
    block = registry.get(2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        block.name = "Sand"
    assert registry.get(2).name == "Dirt"