"""
数据类型定义

本模块定义了控制器使用的核心数据类型。

坐标系说明:
===========

1. 全局坐标系 (world)
   - 位姿估计器输出的坐标系
   - Z 轴朝上，航向角绕 Z 轴

2. 轨迹参考系 (trajectory frame)
   - 开始跟踪轨迹时捕获
   - 原点为捕获时刻的位置
   - 绕 Z 轴旋转 -yaw0，使 X 轴与初始航向对齐
   - 控制器在此坐标系下计算状态误差

数据流:
   Pose (world) → 减去原点、旋转 → 状态向量 (trajectory frame) → 控制律

关键数据类型:
   - Pose: 位姿采样，控制器每次更新的输入
   - ReferenceFrame: 每段轨迹开始时捕获的参考系
   - ControlResult: 最近一次控制计算的中间量，用于诊断
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import numpy as np


@dataclass
class Vector3:
    """3D 向量 (兼容 geometry_msgs/Vector3)"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass
class Quaternion:
    """四元数 (兼容 geometry_msgs/Quaternion)"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def to_array(self) -> np.ndarray:
        """返回 scalar-last 顺序 [x, y, z, w]"""
        return np.array([self.x, self.y, self.z, self.w], dtype=float)


@dataclass
class Pose:
    """
    位姿采样

    Attributes:
        position: 全局坐标系下的位置 (m)
        orientation: 全局坐标系下的姿态四元数
        stamp: 采样时间戳 (秒)，可选。仅在时间来源为 pose_stamp 时使用
    """
    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)
    stamp: Optional[float] = None


@dataclass(frozen=True, eq=False)
class ReferenceFrame:
    """
    轨迹参考系

    在设置轨迹后的第一次控制计算时捕获，直到下一次设置轨迹前保持不变。
    控制器持有 Optional[ReferenceFrame]，存在即表示已初始化。

    Attributes:
        origin: 捕获时刻的位置 [3]
        yaw: 捕获时刻的航向角 (弧度)
        heading_rotation: 绕 Z 轴旋转 -yaw 的旋转矩阵 [3x3]
        start_time: 捕获时刻的时间 (秒)
        clock_offset: 捕获时刻位姿时间戳与时钟之差 (秒)。
            None 表示该段轨迹以时钟计时；否则以位姿时间戳计时，
            无时间戳的位姿用 时钟 + clock_offset 折算到同一时间基准
    """
    origin: np.ndarray
    yaw: float
    heading_rotation: np.ndarray
    start_time: float
    clock_offset: Optional[float] = None

    @property
    def uses_pose_stamp(self) -> bool:
        return self.clock_offset is not None


@dataclass
class ControlResult:
    """单次控制计算结果"""
    time_along_trajectory: float
    state: np.ndarray
    state_error: np.ndarray
    correction: np.ndarray
    raw_command: np.ndarray
    command: np.ndarray
    used_stabilizing: bool = False
    fallback_engaged: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            't': self.time_along_trajectory,
            'state': self.state.tolist(),
            'state_error': self.state_error.tolist(),
            'correction': self.correction.tolist(),
            'raw_command': self.raw_command.tolist(),
            'command': np.asarray(self.command).tolist(),
            'used_stabilizing': self.used_stabilizing,
            'fallback_engaged': self.fallback_engaged,
        }
