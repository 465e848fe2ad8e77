"""Joystick control of a rover gripper's wrist and fingers."""

import logging

from joy_gripper.joint_controller import FINGERS, WRIST, GripperJointController


class JoystickGripperInterface:
    """Pairs a wrist and a finger controller over one bus session."""

    AXES = ('wrist', 'fingers')

    def __init__(self, bus, rover_name: str, wrist=WRIST, fingers=FINGERS, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.rover_name = rover_name

        self.wrist = GripperJointController(
            bus, rover_name, wrist, logger=self._child_logger(wrist.name))
        self.fingers = GripperJointController(
            bus, rover_name, fingers, logger=self._child_logger(fingers.name))

    def _child_logger(self, name):
        # rclpy loggers use get_child, stdlib loggers getChild
        if hasattr(self.logger, 'get_child'):
            return self.logger.get_child(name)
        return self.logger.getChild(name)

    @property
    def ready(self) -> bool:
        return self.wrist.ready and self.fingers.ready

    def set_velocity(self, axis: str, vec: float):
        if axis == 'wrist':
            self.wrist.set_velocity(vec)
        elif axis == 'fingers':
            self.fingers.set_velocity(vec)
        else:
            raise ValueError(f"Unknown gripper axis '{axis}', expected one of {self.AXES}")

    def move_wrist(self, vec: float):
        self.wrist.set_velocity(vec)

    def move_fingers(self, vec: float):
        self.fingers.set_velocity(vec)

    def change_rovers(self, rover_name: str):
        """Send all further commands to ``rover_name``, starting from zero."""
        self.wrist.retarget(rover_name)
        self.fingers.retarget(rover_name)
        self.rover_name = rover_name
        self.logger.info(f"Gripper control switched to rover '{rover_name}'")

    def shutdown(self):
        self.wrist.destroy()
        self.fingers.destroy()
