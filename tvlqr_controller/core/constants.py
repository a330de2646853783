"""
通用常量和基础角度函数定义

本模块定义了整个控制器使用的通用常量和不依赖其他模块的基础数学函数。

常量分类:
=========

1. 数值稳定性常量 (Numerical Stability)
   - 用于避免除零、浮点比较等问题

2. 状态向量布局 (State Layout)
   - 控制器内部使用的 6 维状态向量:
     [x, y, z, roll, pitch, yaw]
   - 前 3 维为相对参考系的位置，后 3 维为姿态角

基础数学函数:
=============

角度归一化和角度展开 (unwrap) 放在本模块，避免循环导入。
角度展开是无状态的纯函数，跨 ±π 边界时选择与上一次角度最接近的等价角，
保证姿态误差不会因为角度回绕而突变一整圈。

使用示例:
=========

    from tvlqr_controller.core.constants import (
        STATE_DIM, ATTITUDE_SLICE, angle_unwrap, unwrap_attitude
    )

    yaw = angle_unwrap(raw_yaw, last_yaw)
    state = unwrap_attitude(state, last_state)
"""

import numpy as np


# =============================================================================
# 数值常量
# =============================================================================

TWO_PI = 2.0 * np.pi


# =============================================================================
# 状态向量布局
# =============================================================================

STATE_DIM = 6

IDX_X = 0
IDX_Y = 1
IDX_Z = 2
IDX_ROLL = 3
IDX_PITCH = 4
IDX_YAW = 5

POSITION_SLICE = slice(IDX_X, IDX_Z + 1)
ATTITUDE_SLICE = slice(IDX_ROLL, IDX_YAW + 1)


# =============================================================================
# 基础角度函数
# =============================================================================

def normalize_angle(angle: float) -> float:
    """
    将角度归一化到 [-π, π] 范围

    使用 arctan2(sin, cos) 方法，数值稳定且高效。

    Args:
        angle: 输入角度 (弧度)

    Returns:
        归一化后的角度 (弧度)，范围 [-π, π]
    """
    return float(np.arctan2(np.sin(angle), np.cos(angle)))


def angle_unwrap(angle: float, previous: float) -> float:
    """
    角度展开

    返回与 angle 相差 2π 整数倍、且数值上最接近 previous 的角度。
    结果满足 |result - previous| <= π。

    Args:
        angle: 新的原始角度 (弧度)
        previous: 参考角度 (弧度)，通常为上一次展开后的结果

    Returns:
        展开后的角度 (弧度)

    Examples:
        >>> angle_unwrap(-np.pi + 0.1, np.pi - 0.1)  # 约等于 π + 0.1
        >>> angle_unwrap(0.2, 4 * np.pi)             # 约等于 4π + 0.2
    """
    turns = np.floor((angle - previous + np.pi) / TWO_PI)
    return float(angle - turns * TWO_PI)


def unwrap_attitude(state: np.ndarray, previous_state: np.ndarray) -> np.ndarray:
    """
    对状态向量的 3 个姿态分量逐一做角度展开

    Args:
        state: 新的状态向量 [6]
        previous_state: 上一次的状态向量 [6]

    Returns:
        新的状态向量副本，姿态分量已展开，位置分量不变
    """
    result = np.array(state, dtype=float, copy=True)
    for i in range(IDX_ROLL, IDX_YAW + 1):
        result[i] = angle_unwrap(result[i], previous_state[i])
    return result
