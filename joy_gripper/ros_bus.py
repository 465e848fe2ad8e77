"""rclpy transport used by the gripper joint controllers."""

from rclpy.node import Node
from std_msgs.msg import Float32


class FloatChannel:
    """A Float32 publisher that can be closed exactly once."""

    def __init__(self, node: Node, topic: str, qos_depth: int = 10):
        self.node = node
        self.topic = topic
        self.pub = node.create_publisher(Float32, topic, qos_depth)

    def publish(self, value: float):
        if self.pub is None:
            return
        msg = Float32()
        msg.data = float(value)
        self.pub.publish(msg)

    def close(self):
        if self.pub is None:
            return
        self.node.destroy_publisher(self.pub)
        self.pub = None


class RosBus:
    """Shared node session: hands out publishers and timers to controllers.

    The node itself stays owned by the caller.
    """

    def __init__(self, node: Node, qos_depth: int = 10, callback_group=None):
        self.node = node
        self.qos_depth = qos_depth
        self.callback_group = callback_group

    def advertise(self, topic: str) -> FloatChannel:
        return FloatChannel(self.node, topic, self.qos_depth)

    def create_timer(self, period_sec: float, callback):
        return self.node.create_timer(
            period_sec,
            callback,
            callback_group=self.callback_group
        )

    def destroy_timer(self, timer):
        self.node.destroy_timer(timer)
