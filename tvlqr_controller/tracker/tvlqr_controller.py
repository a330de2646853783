"""
时变 LQR 轨迹跟踪控制器

每次收到位姿时计算一次执行器命令:

    位姿 → 参考系相对状态 (减去初始位置，按初始航向旋转)
         → 姿态角展开
         → 沿轨迹时间
         → 查询标称状态 x0、标称命令 u0、增益矩阵 K
         → u = u0 + K · (x - x0)
         → 转换为执行器命令

状态转换:
    NO_TRAJECTORY --set_trajectory--> FRAME_PENDING --get_control--> TRACKING
    TRACKING --超出轨迹时域--> FRAME_PENDING (稳定控制器) --同一次 get_control--> STABILIZING

线程安全性说明:
- get_control() 和 set_trajectory() 应在同一个线程 (控制循环) 中调用
- 内部不加锁，同一时刻最多只有一次控制计算
- 轨迹和转换器对象由外部持有，控制器只读取不修改
"""
from typing import Dict, Any, Optional, Callable
import logging
import numpy as np

from ..core.interfaces import ILifecycleComponent, ITrajectory, ICommandConverter
from ..core.data_types import Pose, ReferenceFrame, ControlResult
from ..core.enums import TrackingState, TimeSource
from ..core.constants import unwrap_attitude
from ..core.transforms import euler_from_quaternion, yaw_rotation, pose_to_state_vector
from ..core.clock import make_clock
from ..core.exceptions import ConfigurationError, HorizonExceededError
from ..core.logging_config import ThrottledLogger
from ..config.default_config import TRACKING_CONFIG

logger = logging.getLogger(__name__)


class TvlqrController(ILifecycleComponent):
    """
    时变 LQR 轨迹跟踪控制器

    Args:
        converter: 命令转换器，提供弧度到执行器单位的转换和配平命令
        stabilizing_trajectory: 时不变稳定轨迹，超出当前轨迹时域后回退到此轨迹
        config: 配置字典，可以是完整配置或 'tracking' 子配置
        clock: 时钟函数，返回秒；None 时按 tracking.time_source 选择

    Raises:
        ConfigurationError: 稳定轨迹不是时不变轨迹，或时间来源无效
    """

    def __init__(self, converter: ICommandConverter,
                 stabilizing_trajectory: ITrajectory,
                 config: Optional[Dict[str, Any]] = None,
                 clock: Optional[Callable[[], float]] = None):
        config = config or {}
        tracking_config = config.get('tracking', config)

        if stabilizing_trajectory is None or not stabilizing_trajectory.is_time_invariant():
            raise ConfigurationError("Stabilizing trajectory must be time-invariant")
        if stabilizing_trajectory.get_max_time() < 0:
            raise ConfigurationError("Stabilizing trajectory must have a non-negative max time")

        try:
            self.time_source = TimeSource.from_string(
                tracking_config.get('time_source', TRACKING_CONFIG['time_source']))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        self._converter = converter
        self._stabilizing_trajectory = stabilizing_trajectory
        self._clock = clock if clock is not None else make_clock(self.time_source)
        self._throttled = ThrottledLogger(
            logger,
            tracking_config.get('missing_trajectory_warn_interval',
                                TRACKING_CONFIG['missing_trajectory_warn_interval']))
        self._activate_on_start = tracking_config.get(
            'activate_stabilizing_on_start', TRACKING_CONFIG['activate_stabilizing_on_start'])

        self._active_trajectory: Optional[ITrajectory] = None
        self._frame: Optional[ReferenceFrame] = None
        self._last_state: Optional[np.ndarray] = None
        self._last_result: Optional[ControlResult] = None
        self._fallback_count = 0
        self._missing_trajectory_count = 0

        if self._activate_on_start:
            self.set_trajectory(self._stabilizing_trajectory)

    # =========================================================================
    # 属性
    # =========================================================================

    @property
    def active_trajectory(self) -> Optional[ITrajectory]:
        return self._active_trajectory

    @property
    def stabilizing_trajectory(self) -> ITrajectory:
        return self._stabilizing_trajectory

    @property
    def frame(self) -> Optional[ReferenceFrame]:
        return self._frame

    @property
    def is_frame_initialized(self) -> bool:
        return self._frame is not None

    @property
    def last_state(self) -> Optional[np.ndarray]:
        """最近一次展开后的参考系相对状态 [6]"""
        return None if self._last_state is None else self._last_state.copy()

    @property
    def last_result(self) -> Optional[ControlResult]:
        return self._last_result

    @property
    def state(self) -> TrackingState:
        if self._active_trajectory is None:
            return TrackingState.NO_TRAJECTORY
        if self._frame is None:
            return TrackingState.FRAME_PENDING
        if self._active_trajectory is self._stabilizing_trajectory:
            return TrackingState.STABILIZING
        return TrackingState.TRACKING

    # =========================================================================
    # 控制接口
    # =========================================================================

    def set_trajectory(self, trajectory: Optional[ITrajectory]) -> None:
        """
        切换当前轨迹

        丢弃已捕获的参考系，下一次 get_control() 会重新捕获。
        传入 None 清除当前轨迹，之后输出配平命令。
        """
        self._active_trajectory = trajectory
        self._frame = None
        logger.info(f"Trajectory set: {trajectory!r}")

    def get_control(self, pose: Pose) -> np.ndarray:
        """
        根据位姿计算执行器命令

        Args:
            pose: 全局坐标系下的位姿采样

        Returns:
            执行器命令 (由转换器决定单位和类型)

        Raises:
            HorizonExceededError: 回退到稳定轨迹后仍超出其时域 (稳定轨迹配置错误)
        """
        if self._active_trajectory is None:
            self._missing_trajectory_count += 1
            self._throttled.warning("No active trajectory in get_control, returning trim commands",
                                    key='no_trajectory')
            return self._converter.get_trim_commands()

        fallback_engaged = False
        while True:
            trajectory = self._active_trajectory

            if self._frame is None:
                self._initialize_frame(pose)

            state = pose_to_state_vector(pose, self._frame.origin, self._frame.heading_rotation)
            state = unwrap_attitude(state, self._last_state)
            self._last_state = state

            t = self._time_along_trajectory(trajectory, pose)
            if t <= trajectory.get_max_time():
                break

            if fallback_engaged:
                raise HorizonExceededError(
                    f"Stabilizing trajectory exceeded its own horizon "
                    f"(t={t:.3f}, max_time={trajectory.get_max_time():.3f})")

            # 超出时域: 切换到稳定轨迹，并对同一位姿重新计算
            logger.info(f"Trajectory horizon exceeded (t={t:.3f} > {trajectory.get_max_time():.3f}), "
                        f"switching to stabilizing trajectory")
            fallback_engaged = True
            self._fallback_count += 1
            self.set_trajectory(self._stabilizing_trajectory)

        x0 = trajectory.get_state(t)
        gain_matrix = trajectory.get_gain_matrix(t)
        state_error = state - x0
        correction = gain_matrix @ state_error
        raw_command = trajectory.get_u_command(t) + correction

        command = self._converter.radians_to_servo_commands(raw_command)

        self._last_result = ControlResult(
            time_along_trajectory=t,
            state=state,
            state_error=state_error,
            correction=correction,
            raw_command=raw_command,
            command=command,
            used_stabilizing=trajectory is self._stabilizing_trajectory,
            fallback_engaged=fallback_engaged,
        )
        logger.debug(f"t={t:.3f} error={np.round(state_error, 4)} command={command}")
        return command

    def _initialize_frame(self, pose: Pose) -> None:
        """捕获参考系: 初始位置、绕 Z 轴 -yaw 的旋转、起始时间"""
        origin = pose.position.to_array()
        _, _, yaw = euler_from_quaternion(pose.orientation)

        # 时间基准在捕获时确定，整段轨迹内不再改变
        now = self._clock()
        if self.time_source == TimeSource.POSE_STAMP and pose.stamp is not None:
            start_time = float(pose.stamp)
            clock_offset = start_time - now
        else:
            start_time = now
            clock_offset = None

        self._frame = ReferenceFrame(
            origin=origin,
            yaw=yaw,
            heading_rotation=yaw_rotation(-yaw),
            start_time=start_time,
            clock_offset=clock_offset,
        )
        # 用捕获位姿自身的相对状态作为角度展开的初值
        self._last_state = pose_to_state_vector(pose, origin, self._frame.heading_rotation)
        logger.info(f"Reference frame captured: origin={np.round(origin, 3)}, yaw={yaw:.3f}")

    def _frame_time(self, pose: Pose) -> float:
        """按当前参考系的时间基准读取位姿时间"""
        frame = self._frame
        if not frame.uses_pose_stamp:
            return self._clock()
        if pose.stamp is not None:
            return float(pose.stamp)
        return self._clock() + frame.clock_offset

    def _time_along_trajectory(self, trajectory: ITrajectory, pose: Pose) -> float:
        # 时不变轨迹只有一个工作点
        if trajectory.is_time_invariant():
            return 0.0
        return self._frame_time(pose) - self._frame.start_time

    def get_time_along_trajectory(self) -> Optional[float]:
        """最近一次控制计算使用的轨迹时间，尚未计算时返回 None"""
        if self._last_result is None:
            return None
        return self._last_result.time_along_trajectory

    # =========================================================================
    # 生命周期与诊断
    # =========================================================================

    def reset(self) -> None:
        self._active_trajectory = None
        self._frame = None
        self._last_state = None
        self._last_result = None
        self._fallback_count = 0
        self._missing_trajectory_count = 0
        self._throttled.reset()
        if self._activate_on_start:
            self.set_trajectory(self._stabilizing_trajectory)

    def get_health_status(self) -> Dict[str, Any]:
        state = self.state
        healthy = state != TrackingState.NO_TRAJECTORY
        return {
            'healthy': healthy,
            'state': state.name,
            'message': 'tracking' if healthy else 'no active trajectory, sending trim commands',
            'details': {
                'fallback_count': self._fallback_count,
                'missing_trajectory_count': self._missing_trajectory_count,
                'time_along_trajectory': (self._last_result.time_along_trajectory
                                          if self._last_result is not None else None),
            },
        }

    def get_diagnostics(self) -> Dict[str, Any]:
        diagnostics = {
            'state': self.state.name,
            'frame_initialized': self.is_frame_initialized,
            'fallback_count': self._fallback_count,
            'missing_trajectory_count': self._missing_trajectory_count,
        }
        if self._frame is not None:
            diagnostics['frame'] = {
                'origin': self._frame.origin.tolist(),
                'yaw': self._frame.yaw,
                'start_time': self._frame.start_time,
                'uses_pose_stamp': self._frame.uses_pose_stamp,
            }
        if self._last_result is not None:
            diagnostics['last_result'] = self._last_result.to_dict()
        return diagnostics
