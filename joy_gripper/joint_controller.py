"""
Incremental angle control for a single gripper joint.

A joystick deflection sets a velocity; while the stick is outside the dead
zone a periodic timer integrates that velocity into a clamped angle and
publishes it on the joint's angle topic.
"""

import logging
from dataclasses import dataclass

import numpy as np

from joy_gripper.errors import NotReadyError


@dataclass(frozen=True)
class JointConfig:
    """Static configuration for one gripper joint."""

    name: str
    topic_suffix: str
    min_angle: float
    max_angle: float
    change_rate: float = 0.1  # fraction of the stick value added per tick
    dead_zone: float = 0.05
    reapply_period_ms: int = 100
    invert: bool = False


# Limits are taken from the physical rover (radians)
WRIST = JointConfig(
    name='wrist',
    topic_suffix='wristAngle',
    min_angle=0.0,
    max_angle=1.0,
    invert=True,  # stick down is the positive wrist angle
)
FINGERS = JointConfig(
    name='fingers',
    topic_suffix='fingerAngle',
    min_angle=0.0,
    max_angle=2.0,
)

# Angles this close to zero are published as 0.0; tiny values render with
# negative exponents, which the downstream string conversion cannot handle.
ZERO_SNAP = 0.001


class GripperJointController:
    """Tracks and re-publishes the commanded angle of one gripper joint.

    The controller owns its publisher and timer. ``bus`` is a shared
    transport session providing ``advertise(topic)``,
    ``create_timer(period_sec, callback)`` and ``destroy_timer(timer)``;
    it is not owned by the controller.
    """

    def __init__(self, bus, target_id: str, config: JointConfig, logger=None):
        self.ready = False

        self.bus = bus
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        self.angle = 0.0
        self.velocity_vector = 0.0

        self.timer = self._create_timer()

        self.target_id = target_id
        self.publisher = bus.advertise(self.topic)

        self.ready = True

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} owns a timer and publisher and cannot be copied")

    def __deepcopy__(self, memo):
        return self.__copy__()

    def _create_timer(self):
        # Timers start Idle; set_velocity arms them
        timer = self.bus.create_timer(self.config.reapply_period_ms / 1000.0, self.on_tick)
        timer.cancel()
        return timer

    @property
    def topic(self) -> str:
        return f"/{self.target_id}/{self.config.topic_suffix}"

    @property
    def active(self) -> bool:
        """True while the re-emission timer is running."""
        return self.timer is not None and not self.timer.is_canceled()

    def set_velocity(self, vec: float):
        """Record a stick deflection and start or stop the command timer."""
        if not self.ready:
            raise NotReadyError(self.config.name)

        # A non-finite sample would poison the angle; treat it as centered
        if not np.isfinite(vec):
            self.logger.warning(f"{self.config.name} ignoring non-finite stick value {vec}")
            vec = 0.0

        self.velocity_vector = -vec if self.config.invert else vec

        if abs(self.velocity_vector) < self.config.dead_zone:
            self.timer.cancel()
        elif self.timer.is_canceled():
            self.timer.reset()

    def on_tick(self):
        """Integrate the velocity into the angle and publish it."""
        angle = self.angle + self.velocity_vector * self.config.change_rate
        angle = float(np.clip(angle, self.config.min_angle, self.config.max_angle))

        if abs(angle) < ZERO_SNAP:
            angle = 0.0

        self.angle = angle
        self.publisher.publish(self.angle)
        self.logger.debug(f"{self.config.name} angle -> {self.angle:.3f} on {self.topic}")

    def retarget(self, target_id: str):
        """Point the controller at a different rover, resetting its state."""
        self.ready = False
        if self.timer is None:
            self.timer = self._create_timer()
        else:
            self.timer.cancel()
        if self.publisher is not None:
            self.publisher.close()

        self.angle = 0.0
        self.velocity_vector = 0.0

        self.target_id = target_id
        self.publisher = self.bus.advertise(self.topic)
        self.logger.info(f"{self.config.name} now commanding {self.topic}")

        self.ready = True

    def destroy(self):
        """Release the timer and publisher. Safe to call more than once."""
        self.ready = False

        if self.timer is not None:
            self.timer.cancel()
            self.bus.destroy_timer(self.timer)
            self.timer = None
            self.logger.info(f"{self.config.name} controller released")

        if self.publisher is not None:
            self.publisher.close()
            self.publisher = None
