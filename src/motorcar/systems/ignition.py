"""Ignition switch.

The switch position and the engine's run flag are separate: turning the
key to ON with an empty tank leaves the switch ON and the engine off.
"""

from enum import Enum

from motorcar.core.logging_system import get_logger
from motorcar.systems.engine import IEngine

logger = get_logger(__name__)


class IgnitionPosition(Enum):
    OFF = "off"
    ON = "on"


class Ignition:
    """Key switch that starts and stops an engine.

    Examples:
        >>> ignition = Ignition(engine)
        >>> ignition.turn_on()
        True
        >>> ignition.position
        <IgnitionPosition.ON: 'on'>
    """

    def __init__(self, engine: IEngine) -> None:
        self.engine = engine
        self._position = IgnitionPosition.OFF

    @property
    def position(self) -> IgnitionPosition:
        return self._position

    def is_on(self) -> bool:
        return self._position is IgnitionPosition.ON

    def turn_on(self) -> bool:
        """Turn the key to ON and try to start the engine.

        Returns:
            Whether the engine is running afterwards.
        """
        self._position = IgnitionPosition.ON
        started = self.engine.start()
        if not started:
            logger.info("Ignition on, engine did not start")
        return started

    def turn_off(self) -> None:
        """Turn the key to OFF, stopping the engine if it runs."""
        self._position = IgnitionPosition.OFF
        self.engine.stop(reason="ignition_off")

    def __repr__(self) -> str:
        return f"Ignition(position={self._position.name})"
