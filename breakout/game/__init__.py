"""Breakout game internals: entities, physics, layout and skins."""
