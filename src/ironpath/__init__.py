"""IronPath — stateless 5/3/1 wave and race-pace computation engine."""

from ironpath.engine import WaveEngine

__all__ = ["WaveEngine"]
