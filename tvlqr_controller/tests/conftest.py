"""
pytest 配置和共享 fixtures

提供控制器测试共享的假协作对象:
- PassthroughConverter: 原样返回弧度命令，便于精确检查控制律
- MutableHover: 可在构造后修改 max_time 的时不变轨迹，用于测试配置错误保护
"""
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tvlqr_controller.core.interfaces import ICommandConverter
from tvlqr_controller.trajectory.time_invariant import TimeInvariantTrajectory
from tvlqr_controller.tracker.tvlqr_controller import TvlqrController
from tvlqr_controller.mock.test_data_generator import (
    FakeClock, create_hover_trajectory, create_line_trajectory
)


TRIM_VALUE = 7.0


class PassthroughConverter(ICommandConverter):
    """不做缩放的转换器，记录每次转换的输入"""

    def __init__(self, num_channels: int = 4):
        self.num_channels = num_channels
        self.calls = []

    def radians_to_servo_commands(self, command):
        command = np.array(command, dtype=float, copy=True)
        self.calls.append(command)
        return command

    def get_trim_commands(self):
        return np.full(self.num_channels, TRIM_VALUE)


class MutableHover(TimeInvariantTrajectory):
    """max_time 可修改的时不变轨迹"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.max_time = 0.0

    def get_max_time(self) -> float:
        return self.max_time


# =============================================================================
# pytest fixtures
# =============================================================================

@pytest.fixture
def converter():
    return PassthroughConverter()


@pytest.fixture
def clock():
    return FakeClock(start=100.0)


@pytest.fixture
def hover():
    return create_hover_trajectory()


@pytest.fixture
def line():
    """2 秒直线轨迹，速度 1 m/s，增益对角 -0.5"""
    return create_line_trajectory(duration=2.0, speed=1.0, num_points=21)


@pytest.fixture
def controller(converter, hover, clock):
    return TvlqrController(converter, hover, clock=clock)
