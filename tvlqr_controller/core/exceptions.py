"""
自定义异常类

本模块定义了控制器系统使用的自定义异常类。

异常层次结构:
=============

ControllerError (基类)
├── ConfigurationError
│   └── ConfigValidationError
├── TrajectoryError
└── ControllerRuntimeError
    └── HorizonExceededError

使用指南:
=========

1. 配置错误 (ConfigurationError)
   - 在构造控制器或加载配置时抛出
   - 应该阻止系统启动
   - 示例：稳定控制器不是时不变轨迹、转换器通道数不一致

2. 轨迹错误 (TrajectoryError)
   - 轨迹数据本身不合法
   - 示例：时间序列非单调、增益矩阵维度不匹配

3. 运行时错误 (ControllerRuntimeError)
   - 只用于配置错误在运行时才暴露的情况
   - 示例：稳定控制器自身超出时域，无法再回退

注意:
=====

- 缺少轨迹、轨迹超出时域都是预期情况，返回值处理，不抛出异常
- 协作对象 (轨迹、命令转换器) 抛出的异常原样向上传播
"""


class ControllerError(Exception):
    """控制器错误基类"""
    pass


# =============================================================================
# 配置错误
# =============================================================================

class ConfigurationError(ControllerError):
    """配置错误基类"""
    pass


class ConfigValidationError(ConfigurationError):
    """
    配置验证错误

    当配置参数不满足验证规则时抛出。

    Attributes:
        errors: 错误列表，每个元素为 (key_path, error_message)
    """

    def __init__(self, message: str, errors: list = None):
        super().__init__(message)
        self.errors = errors or []


# =============================================================================
# 轨迹错误
# =============================================================================

class TrajectoryError(ControllerError):
    """
    轨迹数据错误

    当轨迹的时间、状态、命令或增益数据形状不一致时抛出。
    """
    pass


# =============================================================================
# 运行时错误
# =============================================================================

class ControllerRuntimeError(ControllerError):
    """
    控制器运行时错误基类

    注意：命名为 ControllerRuntimeError 以避免与内置 RuntimeError 冲突
    """
    pass


class HorizonExceededError(ControllerRuntimeError):
    """
    时域超出错误

    回退到稳定控制器后时间仍超出其最大时间时抛出，
    说明稳定控制器配置错误。
    """
    pass


__all__ = [
    'ControllerError',
    'ConfigurationError',
    'ConfigValidationError',
    'TrajectoryError',
    'ControllerRuntimeError',
    'HorizonExceededError',
]
