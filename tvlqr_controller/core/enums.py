"""枚举定义"""
from enum import Enum, IntEnum


class TrackingState(IntEnum):
    """跟踪控制器状态枚举"""
    NO_TRAJECTORY = 0     # 未设置轨迹，输出配平命令
    FRAME_PENDING = 1     # 已设置轨迹，等待下一帧位姿捕获参考系
    TRACKING = 2          # 正在跟踪时变轨迹
    STABILIZING = 3       # 正在使用时不变稳定控制器


class TimeSource(Enum):
    """轨迹时间来源"""
    MONOTONIC = 'monotonic'     # 单调时钟
    WALL = 'wall'               # 系统时间
    POSE_STAMP = 'pose_stamp'   # 位姿消息时间戳

    @classmethod
    def from_string(cls, value: str) -> 'TimeSource':
        try:
            return cls(value.lower())
        except ValueError:
            valid = ', '.join(member.value for member in cls)
            raise ValueError(f"Unknown time source '{value}', expected one of: {valid}")
