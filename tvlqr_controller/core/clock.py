"""
时间工具

控制器通过注入的时钟函数获取当前时间 (秒)，便于测试时替换为假时钟。
"""
import time
from typing import Callable

from .enums import TimeSource


def get_monotonic_time() -> float:
    """
    获取单调时钟时间（秒）

    使用 time.monotonic() 而非 time.time()，避免系统时间跳变
    （如 NTP 同步）导致的时间间隔计算错误。
    """
    return time.monotonic()


def get_wall_time() -> float:
    """获取系统时间（秒）"""
    return time.time()


def make_clock(time_source: TimeSource) -> Callable[[], float]:
    """
    根据时间来源创建时钟函数

    POSE_STAMP 模式下位姿时间戳由控制器直接读取，
    此处返回的单调时钟仅用于位姿缺少时间戳时的回退。
    """
    if time_source == TimeSource.WALL:
        return get_wall_time
    return get_monotonic_time
