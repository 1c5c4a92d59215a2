"""A small pygame block sandbox: blocks, inventory, game state, menu and a software 3D renderer."""

__version__ = "0.1.0"