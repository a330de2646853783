"""
轨迹加载

从字典或 YAML 文件构建轨迹对象。

时不变轨迹:
    type: time_invariant
    name: hover
    state: [0, 0, 0, 0, 0, 0]
    u_command: [0, 0, 0]
    gain_matrix: [[...6 个元素...], ...]     # m 行

表格轨迹:
    type: tabulated
    name: climb
    kind: linear
    times: [0.0, 0.5, 1.0]
    states: [[...], [...], [...]]             # N x 6
    u_commands: [[...], [...], [...]]         # N x m
    gains: [[[...], ...], ...]                # N x m x 6
"""
from typing import Dict, Any

import yaml

from ..core.interfaces import ITrajectory
from ..core.exceptions import TrajectoryError
from .time_invariant import TimeInvariantTrajectory
from .tabulated import TabulatedTrajectory


def _require(data: Dict[str, Any], keys, trajectory_type: str) -> None:
    missing = [key for key in keys if key not in data]
    if missing:
        raise TrajectoryError(f"{trajectory_type} trajectory is missing keys: {', '.join(missing)}")


def trajectory_from_dict(data: Dict[str, Any]) -> ITrajectory:
    """根据 'type' 字段构建轨迹"""
    if not isinstance(data, dict):
        raise TrajectoryError(f"Trajectory description must be a mapping, got {type(data).__name__}")

    trajectory_type = str(data.get('type', 'tabulated')).lower()

    if trajectory_type == 'time_invariant':
        _require(data, ('state', 'u_command', 'gain_matrix'), trajectory_type)
        return TimeInvariantTrajectory(
            data['state'], data['u_command'], data['gain_matrix'],
            name=data.get('name', 'stabilizing'))

    if trajectory_type == 'tabulated':
        _require(data, ('times', 'states', 'u_commands', 'gains'), trajectory_type)
        return TabulatedTrajectory(
            data['times'], data['states'], data['u_commands'], data['gains'],
            kind=data.get('kind', 'linear'),
            name=data.get('name', 'trajectory'))

    raise TrajectoryError(f"Unknown trajectory type '{trajectory_type}'")


def load_trajectory(path: str) -> ITrajectory:
    """从 YAML 文件加载轨迹"""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return trajectory_from_dict(data)
