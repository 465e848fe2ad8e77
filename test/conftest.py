"""Shared fixtures: an in-process bus standing in for the rclpy node."""

import pytest


class FakeTimer:
    """Mimics the rclpy Timer calls the controllers rely on."""

    def __init__(self, period_sec, callback):
        self.period_sec = period_sec
        self.callback = callback
        self.canceled = False
        self.destroyed = False
        self.resets = 0

    def cancel(self):
        self.canceled = True

    def reset(self):
        self.canceled = False
        self.resets += 1

    def is_canceled(self):
        return self.canceled

    def fire(self, times=1):
        """Run the callback as the executor would, only while armed."""
        for _ in range(times):
            if not self.canceled and not self.destroyed:
                self.callback()


class FakeChannel:

    def __init__(self, topic):
        self.topic = topic
        self.published = []
        self.close_count = 0

    @property
    def closed(self):
        return self.close_count > 0

    def publish(self, value):
        assert not self.closed, f"publish on closed channel {self.topic}"
        self.published.append(value)

    def close(self):
        self.close_count += 1


class FakeBus:

    def __init__(self):
        self.channels = []
        self.timers = []

    def advertise(self, topic):
        channel = FakeChannel(topic)
        self.channels.append(channel)
        return channel

    def create_timer(self, period_sec, callback):
        timer = FakeTimer(period_sec, callback)
        self.timers.append(timer)
        return timer

    def destroy_timer(self, timer):
        timer.destroyed = True


@pytest.fixture
def bus():
    return FakeBus()
