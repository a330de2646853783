"""默认配置

本模块合并所有配置子模块，提供统一的配置接口。

配置结构:
- tracking_config.py: 跟踪控制器配置
- converter_config.py: 舵机命令转换配置
- validation.py: 配置验证

使用示例:
    import copy
    from tvlqr_controller.config import DEFAULT_CONFIG

    config = copy.deepcopy(DEFAULT_CONFIG)
    config['tracking']['time_source'] = 'pose_stamp'
"""
from typing import Dict, Any

from .tracking_config import TRACKING_CONFIG, TRACKING_VALIDATION_RULES
from .converter_config import CONVERTER_CONFIG, CONVERTER_VALIDATION_RULES
from .validation import (
    ConfigValidationError,
    ValidationSeverity,
    get_config_value,
    validate_full_config,
)


# =============================================================================
# 合并所有配置
# =============================================================================
DEFAULT_CONFIG: Dict[str, Any] = {
    'tracking': TRACKING_CONFIG.copy(),
    'converter': CONVERTER_CONFIG.copy(),
}


# =============================================================================
# 合并所有验证规则
# =============================================================================
CONFIG_VALIDATION_RULES: Dict[str, tuple] = {}
CONFIG_VALIDATION_RULES.update(TRACKING_VALIDATION_RULES)
CONFIG_VALIDATION_RULES.update(CONVERTER_VALIDATION_RULES)


def validate_config(config: Dict[str, Any], raise_on_error: bool = True) -> list:
    """
    验证配置参数

    Args:
        config: 配置字典
        raise_on_error: 是否在发现错误时抛出异常

    Returns:
        错误列表，每个元素为 (key_path, error_message, severity)

    Raises:
        ConfigValidationError: 当 raise_on_error=True 且发现错误时

    Example:
        >>> config = copy.deepcopy(DEFAULT_CONFIG)
        >>> config['converter']['num_channels'] = 0
        >>> errors = validate_config(config, raise_on_error=False)
    """
    return validate_full_config(config, CONFIG_VALIDATION_RULES, raise_on_error)


__all__ = [
    'DEFAULT_CONFIG',
    'CONFIG_VALIDATION_RULES',
    'TRACKING_CONFIG',
    'CONVERTER_CONFIG',
    'validate_config',
    'get_config_value',
    'ConfigValidationError',
    'ValidationSeverity',
]
