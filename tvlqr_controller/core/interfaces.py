"""接口定义"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import numpy as np


class ILifecycleComponent(ABC):
    """
    统一生命周期组件接口

    核心方法 (必须实现):
    - reset(): 重置内部状态，保留资源，可继续使用

    可选方法 (有默认实现):
    - shutdown(): 释放所有资源，对象不应再使用
    - initialize(): 初始化组件，分配资源
    - get_health_status(): 获取组件健康状态
    """

    @abstractmethod
    def reset(self) -> None:
        """
        重置组件内部状态

        调用后组件应恢复到初始状态，应该是幂等的。
        """
        pass

    def shutdown(self) -> None:
        """关闭组件，默认实现为空"""
        pass

    def initialize(self) -> bool:
        """初始化组件，默认认为构造时已完成初始化"""
        return True

    def get_health_status(self) -> Optional[Dict[str, Any]]:
        """
        获取组件健康状态

        Returns:
            Optional[Dict[str, Any]]: 健康状态字典，或 None 表示不支持
                如果返回字典，应至少包含：
                - 'healthy' (bool): 组件是否健康
                - 'state' (str): 当前状态名称
                - 'message' (str): 状态描述信息
        """
        return None


class ITrajectory(ABC):
    """
    参考轨迹接口

    按时间索引提供标称状态、标称命令和反馈增益矩阵。
    所有查询在 t ∈ [0, get_max_time()] 上有定义；
    时不变轨迹只在 t = 0 处查询。

    维度约定:
    - 状态向量 [6]: [x, y, z, roll, pitch, yaw]
    - 命令向量 [m]
    - 增益矩阵 [m x 6]，将状态误差映射为命令修正量
    """

    @abstractmethod
    def is_time_invariant(self) -> bool:
        pass

    @abstractmethod
    def get_max_time(self) -> float:
        """轨迹最大有效时间 (秒)"""
        pass

    @abstractmethod
    def get_state(self, t: float) -> np.ndarray:
        pass

    @abstractmethod
    def get_u_command(self, t: float) -> np.ndarray:
        pass

    @abstractmethod
    def get_gain_matrix(self, t: float) -> np.ndarray:
        pass


class ICommandConverter(ABC):
    """命令转换器接口，将弧度制命令转换为执行器单位"""

    @abstractmethod
    def radians_to_servo_commands(self, command: np.ndarray) -> np.ndarray:
        pass

    @abstractmethod
    def get_trim_commands(self) -> np.ndarray:
        """安全的配平/中立命令，用于回退"""
        pass
