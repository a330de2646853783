"""配置验证模块

提供配置参数的验证功能：
- 范围检查
- 类型检查
- 逻辑一致性检查
- 错误严重级别分类

错误严重级别:
- FATAL: 致命错误，必须阻止启动（如通道数与配平列表长度不一致）
- ERROR: 严重错误，默认阻止启动，可通过参数跳过
- WARNING: 警告，记录但不阻止启动
"""
from typing import Dict, Any, List, Tuple, Optional
from enum import Enum
import logging

from ..core.exceptions import ConfigValidationError
from .tracking_config import VALID_TIME_SOURCES

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """验证错误严重级别"""
    FATAL = 'fatal'      # 致命错误，必须阻止启动
    ERROR = 'error'      # 严重错误，默认阻止启动
    WARNING = 'warning'  # 警告，记录但不阻止启动


def get_config_value(
    config: Dict[str, Any],
    key_path: str,
    default: Any = None,
    fallback_config: Optional[Dict[str, Any]] = None
) -> Any:
    """
    从配置字典中获取值，支持点分隔的路径

    Args:
        config: 配置字典
        key_path: 点分隔的键路径，如 'tracking.time_source'
        default: 默认值
        fallback_config: 备选配置字典，当 config 中找不到时从此获取

    Returns:
        配置值或默认值

    Example:
        >>> config = {'converter': {'num_channels': 4}}
        >>> get_config_value(config, 'converter.num_channels')
        4
    """
    keys = key_path.split('.')
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            if fallback_config is not None:
                return get_config_value(fallback_config, key_path, default, None)
            return default
    return value


def _is_numeric(value) -> bool:
    """检查值是否为数值类型"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(
    config: Dict[str, Any],
    validation_rules: Dict[str, Tuple],
    raise_on_error: bool = True
) -> List[Tuple[str, str]]:
    """
    验证配置参数范围和类型

    Args:
        config: 配置字典
        validation_rules: 验证规则字典，格式为 {key_path: (min, max, description)}
        raise_on_error: 是否在发现错误时抛出异常

    Returns:
        错误列表，每个元素为 (key_path, error_message)

    Raises:
        ConfigValidationError: 当 raise_on_error=True 且发现错误时
    """
    errors = []

    for key_path, (min_val, max_val, description) in validation_rules.items():
        value = get_config_value(config, key_path)

        if value is None:
            continue  # 使用默认值，跳过验证

        if not _is_numeric(value):
            errors.append((key_path, f'{description} 类型错误，期望数值，实际为 {type(value).__name__}'))
            continue

        if min_val is not None and value < min_val:
            errors.append((key_path, f'{description} 值 {value} 小于最小值 {min_val}'))
        elif max_val is not None and value > max_val:
            errors.append((key_path, f'{description} 值 {value} 大于最大值 {max_val}'))

    if errors and raise_on_error:
        error_messages = '\n'.join([f'  - {key}: {msg}' for key, msg in errors])
        raise ConfigValidationError(f'配置验证失败:\n{error_messages}', errors)

    return errors


def validate_logical_consistency(config: Dict[str, Any]) -> List[Tuple[str, str, ValidationSeverity]]:
    """
    验证配置的逻辑一致性

    检查配置参数之间的逻辑关系，返回带严重级别的错误列表。

    Args:
        config: 配置字典

    Returns:
        错误列表，每个元素为 (key_path, error_message, severity)
    """
    errors = []

    def add_error(key: str, msg: str, severity: ValidationSeverity = ValidationSeverity.ERROR):
        errors.append((key, msg, severity))

    # ==========================================================================
    # 跟踪配置
    # ==========================================================================

    time_source = get_config_value(config, 'tracking.time_source')
    if time_source is not None:
        if not isinstance(time_source, str) or time_source.lower() not in VALID_TIME_SOURCES:
            add_error('tracking.time_source',
                      f"未知的时间来源 '{time_source}'，可选值: {', '.join(VALID_TIME_SOURCES)}",
                      ValidationSeverity.FATAL)

    warn_interval = get_config_value(config, 'tracking.missing_trajectory_warn_interval')
    if _is_numeric(warn_interval) and warn_interval == 0:
        add_error('tracking.missing_trajectory_warn_interval',
                  '未设置轨迹告警不节流 (值为 0)，控制循环中可能产生大量日志',
                  ValidationSeverity.WARNING)

    # ==========================================================================
    # 转换器配置
    # ==========================================================================

    num_channels = get_config_value(config, 'converter.num_channels')
    if _is_numeric(num_channels):
        for key in ('trim', 'scale', 'direction'):
            values = get_config_value(config, f'converter.{key}')
            if values is None:
                continue
            if not isinstance(values, (list, tuple)) or len(values) != num_channels:
                add_error(f'converter.{key}',
                          f'{key} 长度必须等于通道数 {num_channels}',
                          ValidationSeverity.FATAL)

    direction = get_config_value(config, 'converter.direction')
    if isinstance(direction, (list, tuple)):
        if any(d not in (1, -1) for d in direction):
            add_error('converter.direction', '通道方向只能为 1 或 -1')

    min_command = get_config_value(config, 'converter.min_command')
    max_command = get_config_value(config, 'converter.max_command')
    if _is_numeric(min_command) and _is_numeric(max_command):
        if min_command >= max_command:
            add_error('converter.min_command',
                      f'最小执行器命令 ({min_command}) 必须小于最大执行器命令 ({max_command})',
                      ValidationSeverity.FATAL)
        else:
            trim = get_config_value(config, 'converter.trim')
            if isinstance(trim, (list, tuple)):
                for i, value in enumerate(trim):
                    if _is_numeric(value) and not (min_command <= value <= max_command):
                        add_error('converter.trim',
                                  f'通道 {i} 配平命令 {value} 超出范围 [{min_command}, {max_command}]')

    return errors


def validate_full_config(
    config: Dict[str, Any],
    validation_rules: Dict[str, Tuple],
    raise_on_error: bool = True
) -> List[Tuple[str, str, ValidationSeverity]]:
    """
    完整配置验证（包括范围检查和逻辑一致性检查）

    Args:
        config: 配置字典
        validation_rules: 验证规则字典
        raise_on_error: 是否在发现 FATAL/ERROR 级别错误时抛出异常

    Returns:
        错误列表，每个元素为 (key_path, error_message, severity)

    Raises:
        ConfigValidationError: 当 raise_on_error=True 且发现 FATAL/ERROR 级别错误时
    """
    range_errors = validate_config(config, validation_rules, raise_on_error=False)
    errors = [(key, msg, ValidationSeverity.ERROR) for key, msg in range_errors]
    errors.extend(validate_logical_consistency(config))

    fatal_errors = [(k, m) for k, m, s in errors if s == ValidationSeverity.FATAL]
    error_errors = [(k, m) for k, m, s in errors if s == ValidationSeverity.ERROR]
    warning_errors = [(k, m) for k, m, s in errors if s == ValidationSeverity.WARNING]

    for key, msg in warning_errors:
        logger.warning(f"配置警告 [{key}]: {msg}")

    if raise_on_error:
        if fatal_errors:
            fatal_msgs = '\n'.join([f'  - [FATAL] {key}: {msg}' for key, msg in fatal_errors])
            raise ConfigValidationError(f'配置存在致命错误，无法启动:\n{fatal_msgs}', fatal_errors)
        if error_errors:
            error_msgs = '\n'.join([f'  - [ERROR] {key}: {msg}' for key, msg in error_errors])
            raise ConfigValidationError(f'配置验证失败:\n{error_msgs}', error_errors)

    return errors
