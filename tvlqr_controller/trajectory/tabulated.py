"""
表格轨迹

由离散时间采样点 (时间、标称状态、标称命令、增益矩阵) 组成的时变轨迹，
采样点之间用 scipy.interpolate.interp1d 沿时间轴插值。

查询时间超出 [times[0], times[-1]] 时取首/末采样点，
控制器在 t > get_max_time() 时会切换到稳定控制器，不会查询越界时间。
"""
import numpy as np
from scipy.interpolate import interp1d

from ..core.interfaces import ITrajectory
from ..core.constants import STATE_DIM
from ..core.exceptions import TrajectoryError


class TabulatedTrajectory(ITrajectory):
    """
    表格时变轨迹

    Args:
        times: 采样时间 [N]，非负且严格递增 (秒)
        states: 标称状态 [N x 6]
        u_commands: 标称命令 [N x m]
        gains: 增益矩阵 [N x m x 6]
        kind: 插值方式，传给 interp1d ('linear', 'previous', 'nearest', ...)
        name: 轨迹名称，用于日志
    """

    def __init__(self, times, states, u_commands, gains, kind: str = 'linear',
                 name: str = 'trajectory'):
        self.name = name
        self.kind = kind
        self._times = np.asarray(times, dtype=float).reshape(-1)
        self._states = np.asarray(states, dtype=float)
        self._u_commands = np.asarray(u_commands, dtype=float)
        self._gains = np.asarray(gains, dtype=float)

        self._validate()

        def make(values):
            return interp1d(self._times, values, kind=kind, axis=0,
                            bounds_error=False,
                            fill_value=(values[0], values[-1]),
                            assume_sorted=True)

        try:
            self._state_interp = make(self._states)
            self._u_interp = make(self._u_commands)
            self._gain_interp = make(self._gains)
        except (ValueError, NotImplementedError) as e:
            raise TrajectoryError(
                f"Trajectory '{self.name}': cannot interpolate with kind={kind!r}: {e}") from e

    def _validate(self) -> None:
        n = self._times.shape[0]
        if n < 2:
            raise TrajectoryError(f"Trajectory '{self.name}': need at least 2 samples, got {n}")
        if self._times[0] < 0:
            raise TrajectoryError(f"Trajectory '{self.name}': times must be non-negative")
        if np.any(np.diff(self._times) <= 0):
            raise TrajectoryError(f"Trajectory '{self.name}': times must be strictly increasing")

        if self._states.shape != (n, STATE_DIM):
            raise TrajectoryError(
                f"Trajectory '{self.name}': states must be ({n}, {STATE_DIM}), got {self._states.shape}")
        if self._u_commands.ndim != 2 or self._u_commands.shape[0] != n:
            raise TrajectoryError(
                f"Trajectory '{self.name}': u_commands must be ({n}, m), got {self._u_commands.shape}")

        m = self._u_commands.shape[1]
        if self._gains.shape != (n, m, STATE_DIM):
            raise TrajectoryError(
                f"Trajectory '{self.name}': gains must be ({n}, {m}, {STATE_DIM}), got {self._gains.shape}")

    def __len__(self) -> int:
        return self._times.shape[0]

    def __repr__(self) -> str:
        return (f"TabulatedTrajectory(name={self.name!r}, samples={len(self)}, "
                f"max_time={self.get_max_time():.3f})")

    @property
    def times(self) -> np.ndarray:
        return self._times.copy()

    def is_time_invariant(self) -> bool:
        return False

    def get_max_time(self) -> float:
        return float(self._times[-1])

    def get_state(self, t: float) -> np.ndarray:
        return np.asarray(self._state_interp(t), dtype=float)

    def get_u_command(self, t: float) -> np.ndarray:
        return np.asarray(self._u_interp(t), dtype=float)

    def get_gain_matrix(self, t: float) -> np.ndarray:
        return np.asarray(self._gain_interp(t), dtype=float)
