"""Simulation of a basketball team whose shot selection is shaped by players' mentality."""

__version__ = "0.1.0"