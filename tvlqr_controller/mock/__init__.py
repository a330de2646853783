"""测试与演示用数据"""
from .test_data_generator import (
    FakeClock,
    create_test_pose,
    create_default_gain,
    create_hover_trajectory,
    create_line_trajectory,
    create_turn_trajectory,
)

__all__ = [
    'FakeClock',
    'create_test_pose',
    'create_default_gain',
    'create_hover_trajectory',
    'create_line_trajectory',
    'create_turn_trajectory',
]
