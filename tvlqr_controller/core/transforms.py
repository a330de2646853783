"""
位姿到状态向量的转换

提供四元数与欧拉角转换、航向旋转矩阵以及位姿到 6 维状态向量的转换。
旋转计算统一使用 scipy.spatial.transform.Rotation。

欧拉角约定:
    roll, pitch, yaw 对应外旋 xyz (等价于内旋 ZYX)，
    即 R = Rz(yaw) · Ry(pitch) · Rx(roll)
"""
from typing import Optional, Tuple
import numpy as np
from scipy.spatial.transform import Rotation

from .constants import STATE_DIM, POSITION_SLICE, ATTITUDE_SLICE
from .data_types import Pose, Quaternion


def euler_from_quaternion(q: Quaternion) -> Tuple[float, float, float]:
    """
    从四元数计算欧拉角 (roll, pitch, yaw)

    Args:
        q: 四元数

    Returns:
        (roll, pitch, yaw) 弧度

    Raises:
        ValueError: 四元数范数为零
    """
    roll, pitch, yaw = Rotation.from_quat(q.to_array()).as_euler('xyz')
    return float(roll), float(pitch), float(yaw)


def yaw_rotation(yaw: float) -> np.ndarray:
    """绕 Z 轴旋转 yaw 的旋转矩阵 [3x3]"""
    return Rotation.from_euler('z', yaw).as_matrix()


def pose_to_state_vector(pose: Pose,
                         origin: Optional[np.ndarray] = None,
                         heading_rotation: Optional[np.ndarray] = None) -> np.ndarray:
    """
    将位姿转换为 6 维状态向量 [x, y, z, roll, pitch, yaw]

    先减去原点，再用航向旋转矩阵同时旋转位置和姿态，
    得到相对于参考系的状态。

    Args:
        pose: 全局坐标系下的位姿
        origin: 参考系原点 [3]，None 表示不平移
        heading_rotation: 参考系旋转矩阵 [3x3]，None 表示不旋转

    Returns:
        状态向量 [6]
    """
    position = pose.position.to_array()
    if origin is not None:
        position = position - origin

    attitude = Rotation.from_quat(pose.orientation.to_array())
    if heading_rotation is not None:
        position = heading_rotation @ position
        attitude = Rotation.from_matrix(heading_rotation) * attitude

    state = np.zeros(STATE_DIM)
    state[POSITION_SLICE] = position
    state[ATTITUDE_SLICE] = attitude.as_euler('xyz')
    return state
