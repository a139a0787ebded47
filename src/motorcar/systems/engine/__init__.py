"""Engines package.

Provides the abstract engine interface and a simple combustion engine with a
periodic idle fuel burn.
"""

from motorcar.systems.engine.base import EngineState, IEngine
from motorcar.systems.engine.simple import SimpleEngine

__all__ = [
    "EngineState",
    "IEngine",
    "SimpleEngine",
]
