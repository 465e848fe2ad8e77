"""Exceptions raised by the gripper joystick controllers."""


class NotReadyError(RuntimeError):
    """Raised when a command is issued to a joint that is not initialized."""

    def __init__(self, joint_name: str):
        super().__init__(f"Gripper {joint_name} controller is not ready")
        self.joint_name = joint_name
