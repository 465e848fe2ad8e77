"""Tests for the JoyGripperNode input callbacks."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

pytest.importorskip("rclpy")
pytest.importorskip("sensor_msgs")
pytest.importorskip("std_msgs")

from sensor_msgs.msg import Joy
from std_msgs.msg import String

from joy_gripper.errors import NotReadyError
from joy_gripper.joy_gripper_node import JoyGripperNode


@pytest.fixture
def node():
    """Stand-in carrying the attributes the callbacks read."""
    logger = MagicMock()
    gripper = MagicMock()
    gripper.rover_name = 'achilles'
    return SimpleNamespace(
        gripper=gripper,
        wrist_axis=4,
        finger_axis=3,
        _axis=JoyGripperNode._axis,
        get_logger=lambda: logger,
        logger=logger,
    )


def joy(axes):
    msg = Joy()
    msg.axes = [float(a) for a in axes]
    return msg


def rover(name):
    msg = String()
    msg.data = name
    return msg


class TestJoyCallback:
    def test_axes_map_to_joints(self, node):
        JoyGripperNode.joy_callback(node, joy([0.0, 0.0, 0.0, 0.25, -0.75]))
        node.gripper.move_wrist.assert_called_once_with(pytest.approx(-0.75))
        node.gripper.move_fingers.assert_called_once_with(pytest.approx(0.25))

    def test_missing_axis_reads_zero(self, node):
        JoyGripperNode.joy_callback(node, joy([0.5, 0.5]))
        node.gripper.move_wrist.assert_called_once_with(0.0)
        node.gripper.move_fingers.assert_called_once_with(0.0)

    def test_negative_index_reads_zero(self):
        assert JoyGripperNode._axis(joy([0.5]), -1) == 0.0

    def test_not_ready_is_logged_and_dropped(self, node):
        node.gripper.move_wrist.side_effect = NotReadyError('wrist')
        JoyGripperNode.joy_callback(node, joy([0.0, 0.0, 0.0, 0.5, 0.5]))

        node.logger.warning.assert_called_once()
        assert 'wrist' in node.logger.warning.call_args[0][0]
        node.gripper.move_fingers.assert_not_called()


class TestRoverSelectCallback:
    def test_new_rover_retargets(self, node):
        JoyGripperNode.rover_select_callback(node, rover(' aeneas '))
        node.gripper.change_rovers.assert_called_once_with('aeneas')

    @pytest.mark.parametrize("name", ['', '   ', 'achilles'])
    def test_empty_or_unchanged_is_ignored(self, node, name):
        JoyGripperNode.rover_select_callback(node, rover(name))
        node.gripper.change_rovers.assert_not_called()
