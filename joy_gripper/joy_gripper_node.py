#!/usr/bin/env python3
"""
Joystick control of a rover gripper's wrist and fingers.

Control mapping:
- axes[wrist_axis]: Wrist angle rate (stick down raises the wrist angle)
- axes[finger_axis]: Finger angle rate

While a stick is held outside the dead zone the commanded angle is
re-published every reapply_period_ms on /<rover>/wristAngle and
/<rover>/fingerAngle. Publishing a rover name on rover_select_topic
redirects commands to that rover.
"""

import rclpy
from rclpy.node import Node
from rclpy.callback_groups import MutuallyExclusiveCallbackGroup

from sensor_msgs.msg import Joy
from std_msgs.msg import String

from joy_gripper.errors import NotReadyError
from joy_gripper.gripper_interface import JoystickGripperInterface
from joy_gripper.joint_controller import FINGERS, WRIST, JointConfig
from joy_gripper.ros_bus import RosBus


class JoyGripperNode(Node):
    """Node translating joystick axes into gripper angle commands."""

    def __init__(self):
        super().__init__('joy_gripper_node')

        # Declare parameters
        self.declare_parameter('rover_name', 'rover')
        self.declare_parameter('joy_topic', 'joy')
        self.declare_parameter('rover_select_topic', 'rover_select')
        self.declare_parameter('wrist_axis', 4)
        self.declare_parameter('finger_axis', 3)
        self.declare_parameter('dead_zone', WRIST.dead_zone)
        self.declare_parameter('reapply_period_ms', WRIST.reapply_period_ms)  # ms
        self.declare_parameter('wrist_change_rate', WRIST.change_rate)
        self.declare_parameter('wrist_min', WRIST.min_angle)  # rad
        self.declare_parameter('wrist_max', WRIST.max_angle)
        self.declare_parameter('finger_change_rate', FINGERS.change_rate)
        self.declare_parameter('finger_min', FINGERS.min_angle)
        self.declare_parameter('finger_max', FINGERS.max_angle)

        # Get parameters
        rover_name = self.get_parameter('rover_name').value
        self.joy_topic = self.get_parameter('joy_topic').value
        self.rover_select_topic = self.get_parameter('rover_select_topic').value
        self.wrist_axis = self.get_parameter('wrist_axis').value
        self.finger_axis = self.get_parameter('finger_axis').value

        dead_zone = self.get_parameter('dead_zone').value
        reapply_period_ms = self.get_parameter('reapply_period_ms').value

        wrist_config = JointConfig(
            name=WRIST.name,
            topic_suffix=WRIST.topic_suffix,
            min_angle=self.get_parameter('wrist_min').value,
            max_angle=self.get_parameter('wrist_max').value,
            change_rate=self.get_parameter('wrist_change_rate').value,
            dead_zone=dead_zone,
            reapply_period_ms=reapply_period_ms,
            invert=WRIST.invert,
        )
        finger_config = JointConfig(
            name=FINGERS.name,
            topic_suffix=FINGERS.topic_suffix,
            min_angle=self.get_parameter('finger_min').value,
            max_angle=self.get_parameter('finger_max').value,
            change_rate=self.get_parameter('finger_change_rate').value,
            dead_zone=dead_zone,
            reapply_period_ms=reapply_period_ms,
            invert=FINGERS.invert,
        )

        # Joystick samples and command ticks must never interleave
        self.cb_group = MutuallyExclusiveCallbackGroup()

        self.bus = RosBus(self, callback_group=self.cb_group)
        self.gripper = JoystickGripperInterface(
            self.bus,
            rover_name,
            wrist=wrist_config,
            fingers=finger_config,
            logger=self.get_logger()
        )

        # Subscribe to joystick
        self.joy_sub = self.create_subscription(
            Joy,
            self.joy_topic,
            self.joy_callback,
            10,
            callback_group=self.cb_group
        )

        # Subscribe to rover selection
        self.rover_sub = self.create_subscription(
            String,
            self.rover_select_topic,
            self.rover_select_callback,
            10,
            callback_group=self.cb_group
        )

        self.get_logger().info("JoyGripperNode initialized")
        self.get_logger().info(f"  Joy topic: {self.joy_topic}")
        self.get_logger().info(f"  Rover: {rover_name}")
        self.get_logger().info(f"  Wrist: axes[{self.wrist_axis}] -> {self.gripper.wrist.topic}")
        self.get_logger().info(f"  Fingers: axes[{self.finger_axis}] -> {self.gripper.fingers.topic}")
        self.get_logger().info(f"  Reapply period: {reapply_period_ms} ms")

    @staticmethod
    def _axis(msg: Joy, index: int) -> float:
        if 0 <= index < len(msg.axes):
            return float(msg.axes[index])
        return 0.0

    def joy_callback(self, msg: Joy):
        """Forward stick deflections to the wrist and finger controllers."""
        try:
            self.gripper.move_wrist(self._axis(msg, self.wrist_axis))
            self.gripper.move_fingers(self._axis(msg, self.finger_axis))
        except NotReadyError as e:
            self.get_logger().warning(f"Dropping joystick input: {e}")

    def rover_select_callback(self, msg: String):
        """Redirect gripper commands to the selected rover."""
        rover_name = msg.data.strip()
        if not rover_name or rover_name == self.gripper.rover_name:
            return

        self.get_logger().info(f"Rover selection changed: {self.gripper.rover_name} -> {rover_name}")
        self.gripper.change_rovers(rover_name)

    def destroy_node(self):
        self.gripper.shutdown()
        return super().destroy_node()


def main(args=None):
    rclpy.init(args=args)

    node = JoyGripperNode()

    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.shutdown()


if __name__ == '__main__':
    main()
