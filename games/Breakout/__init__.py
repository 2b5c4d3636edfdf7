"""Breakout - paddle, balls and a grid of blocks."""
