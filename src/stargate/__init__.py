"""stargate — astronaut duty tracking."""

__version__ = "0.1.0"
