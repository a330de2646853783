"""YAML 配置加载

在默认配置之上合并用户 YAML 文件，并做完整验证。

YAML 文件示例:
    tracking:
      time_source: pose_stamp
    converter:
      num_channels: 3
      trim: [1500, 1500, 1100]
      scale: [400.0, 400.0, 300.0]
      direction: [1, -1, 1]
"""
import copy
import logging
from typing import Dict, Any, Optional

import yaml

from ..core.exceptions import ConfigurationError
from .default_config import DEFAULT_CONFIG, validate_config

logger = logging.getLogger(__name__)


def merge_config(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    递归合并配置，返回新的字典，不修改输入

    override 中的字典与 base 中同名字典递归合并，其他值直接覆盖。
    """
    result = copy.deepcopy(base)
    if not override:
        return result
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_config(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_config(path: Optional[str] = None, validate: bool = True) -> Dict[str, Any]:
    """
    加载配置

    Args:
        path: YAML 配置文件路径，None 表示只使用默认配置
        validate: 是否验证合并后的配置

    Returns:
        合并后的配置字典

    Raises:
        ConfigurationError: 文件内容不是映射
        ConfigValidationError: 配置验证失败
    """
    override = None
    if path is not None:
        with open(path, 'r', encoding='utf-8') as f:
            override = yaml.safe_load(f)
        if override is not None and not isinstance(override, dict):
            raise ConfigurationError(f"配置文件 {path} 顶层必须是映射，实际为 {type(override).__name__}")
        logger.info(f"Loaded config from {path}")

    config = merge_config(DEFAULT_CONFIG, override)
    if validate:
        validate_config(config, raise_on_error=True)
    return config
