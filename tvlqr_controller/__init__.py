"""
TVLQR 轨迹跟踪控制器 (Time-Varying LQR Tracking Controller)

版本: v1.0.0

基于时变 LQR 增益的轨迹跟踪反馈控制器，用于闭环飞行器/地面机器人控制。

特性:
- 轨迹参考系: 开始跟踪时捕获初始位置和航向，误差在轨迹相对坐标系下计算
- 角度展开: 姿态角跨越 ±π 时保持连续，不产生整圈跳变
- 自动回退: 超出轨迹时域后同步切换到时不变稳定控制器
- 接口化协作对象: 轨迹和命令转换器均为抽象接口，便于替换和测试

使用示例:
    from tvlqr_controller import TvlqrController, ServoConverter, DEFAULT_CONFIG
    from tvlqr_controller.mock import create_hover_trajectory, create_line_trajectory

    controller = TvlqrController(ServoConverter(DEFAULT_CONFIG), create_hover_trajectory())
    controller.set_trajectory(create_line_trajectory())

    servo = controller.get_control(pose)
"""

__version__ = "1.0.0"
__author__ = "TVLQR Controller Team"

from .tracker.tvlqr_controller import TvlqrController
from .converter.servo_converter import ServoConverter
from .trajectory import (
    TimeInvariantTrajectory, TabulatedTrajectory, trajectory_from_dict, load_trajectory,
)
from .config import DEFAULT_CONFIG, get_config_value, validate_config, load_config
from .core.enums import TrackingState, TimeSource
from .core.data_types import Vector3, Quaternion, Pose, ReferenceFrame, ControlResult
from .core.interfaces import ILifecycleComponent, ITrajectory, ICommandConverter
from .core.constants import angle_unwrap, unwrap_attitude
from .core.exceptions import (
    ControllerError, ConfigurationError, ConfigValidationError,
    TrajectoryError, ControllerRuntimeError, HorizonExceededError,
)

__all__ = [
    '__version__',
    # 控制器
    'TvlqrController',
    # 协作对象
    'ServoConverter',
    'TimeInvariantTrajectory', 'TabulatedTrajectory', 'trajectory_from_dict', 'load_trajectory',
    # 配置
    'DEFAULT_CONFIG', 'get_config_value', 'validate_config', 'load_config',
    # 枚举
    'TrackingState', 'TimeSource',
    # 数据类型
    'Vector3', 'Quaternion', 'Pose', 'ReferenceFrame', 'ControlResult',
    # 接口
    'ILifecycleComponent', 'ITrajectory', 'ICommandConverter',
    # 工具函数
    'angle_unwrap', 'unwrap_attitude',
    # 异常
    'ControllerError', 'ConfigurationError', 'ConfigValidationError',
    'TrajectoryError', 'ControllerRuntimeError', 'HorizonExceededError',
]
