"""配置模块

提供统一的配置接口，支持：
- 默认配置 (DEFAULT_CONFIG)
- 配置验证 (validate_config)
- YAML 配置加载 (load_config)

配置文件结构:
- tracking_config.py: 跟踪控制器配置
- converter_config.py: 舵机命令转换配置
- validation.py: 配置验证逻辑
- loader.py: YAML 加载与合并

使用示例:
    from tvlqr_controller.config import load_config, validate_config

    config = load_config('vehicle.yaml')
    errors = validate_config(config, raise_on_error=False)
"""

from .default_config import (
    DEFAULT_CONFIG,
    CONFIG_VALIDATION_RULES,
    TRACKING_CONFIG,
    CONVERTER_CONFIG,
    validate_config,
    get_config_value,
    ConfigValidationError,
    ValidationSeverity,
)
from .loader import load_config, merge_config

__all__ = [
    'DEFAULT_CONFIG',
    'CONFIG_VALIDATION_RULES',
    'TRACKING_CONFIG',
    'CONVERTER_CONFIG',
    'validate_config',
    'get_config_value',
    'ConfigValidationError',
    'ValidationSeverity',
    'load_config',
    'merge_config',
]
