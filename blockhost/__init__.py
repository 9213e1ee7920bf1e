"""Minecraft protocol building blocks: byte buffers, VarInts, NBT tags, packet framing, packet readers and login helpers."""

__version__ = "0.1.0"