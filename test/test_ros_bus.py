"""Tests for the rclpy transport adapter."""

from unittest.mock import MagicMock

import pytest

pytest.importorskip("rclpy")
pytest.importorskip("std_msgs")

from joy_gripper.ros_bus import FloatChannel, RosBus


@pytest.fixture
def node():
    return MagicMock()


def test_publish_float32(node):
    channel = FloatChannel(node, '/achilles/wristAngle')
    channel.publish(0.5)

    msg = node.create_publisher.return_value.publish.call_args[0][0]
    assert msg.data == pytest.approx(0.5)


def test_close_once(node):
    channel = FloatChannel(node, '/achilles/wristAngle')
    pub = channel.pub
    channel.close()
    channel.close()
    node.destroy_publisher.assert_called_once_with(pub)

    channel.publish(1.0)
    pub.publish.assert_not_called()


def test_bus_timers(node):
    group = object()
    bus = RosBus(node, callback_group=group)
    callback = MagicMock()

    timer = bus.create_timer(0.1, callback)
    node.create_timer.assert_called_once_with(0.1, callback, callback_group=group)

    bus.destroy_timer(timer)
    node.destroy_timer.assert_called_once_with(timer)


def test_advertise_uses_qos_depth(node):
    bus = RosBus(node, qos_depth=5)
    channel = bus.advertise('/achilles/fingerAngle')
    assert channel.topic == '/achilles/fingerAngle'
    assert node.create_publisher.call_args[0][1:] == ('/achilles/fingerAngle', 5)
