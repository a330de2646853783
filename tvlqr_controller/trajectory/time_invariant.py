"""时不变轨迹 (单工作点稳定控制器)"""
import numpy as np

from ..core.interfaces import ITrajectory
from ..core.constants import STATE_DIM
from ..core.exceptions import TrajectoryError


class TimeInvariantTrajectory(ITrajectory):
    """
    时不变轨迹

    单个工作点的调节器 (如悬停/稳定控制器)：标称状态、标称命令和
    增益矩阵与时间无关，最大时间为 0，控制器始终在 t = 0 处查询。
    """

    def __init__(self, state, u_command, gain_matrix, name: str = 'stabilizing'):
        self.name = name
        self._state = np.asarray(state, dtype=float).reshape(-1)
        self._u_command = np.asarray(u_command, dtype=float).reshape(-1)
        self._gain_matrix = np.atleast_2d(np.asarray(gain_matrix, dtype=float))

        if self._state.shape != (STATE_DIM,):
            raise TrajectoryError(
                f"Trajectory '{name}': state must have {STATE_DIM} components, got {self._state.shape}")
        expected = (self._u_command.shape[0], STATE_DIM)
        if self._gain_matrix.shape != expected:
            raise TrajectoryError(
                f"Trajectory '{name}': gain matrix must be {expected}, got {self._gain_matrix.shape}")

    def __repr__(self) -> str:
        return f"TimeInvariantTrajectory(name={self.name!r}, num_commands={self._u_command.shape[0]})"

    def is_time_invariant(self) -> bool:
        return True

    def get_max_time(self) -> float:
        return 0.0

    def get_state(self, t: float) -> np.ndarray:
        return self._state.copy()

    def get_u_command(self, t: float) -> np.ndarray:
        return self._u_command.copy()

    def get_gain_matrix(self, t: float) -> np.ndarray:
        return self._gain_matrix.copy()
