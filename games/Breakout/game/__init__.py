"""Breakout game logic: entities, physics, session and simulation."""
