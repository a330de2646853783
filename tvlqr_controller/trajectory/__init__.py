"""参考轨迹实现"""
from .time_invariant import TimeInvariantTrajectory
from .tabulated import TabulatedTrajectory
from .loader import trajectory_from_dict, load_trajectory

__all__ = [
    'TimeInvariantTrajectory',
    'TabulatedTrajectory',
    'trajectory_from_dict',
    'load_trajectory',
]
