"""舵机命令转换器"""
from typing import Dict, Any, Optional
import numpy as np

from ..core.interfaces import ICommandConverter
from ..core.exceptions import ConfigurationError
from ..config.default_config import CONVERTER_CONFIG


class ServoConverter(ICommandConverter):
    """
    弧度制命令到舵机命令的线性转换

    每个通道:
        servo = clip(round(trim + direction * scale * radians), min_command, max_command)

    输出为整数数组 (执行器单位，如 PWM 微秒)。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        config = config or {}
        converter_config = config.get('converter', config)

        self.num_channels = int(converter_config.get('num_channels', CONVERTER_CONFIG['num_channels']))
        self.trim = np.asarray(converter_config.get('trim', CONVERTER_CONFIG['trim']), dtype=float)
        self.scale = np.asarray(converter_config.get('scale', CONVERTER_CONFIG['scale']), dtype=float)
        self.direction = np.asarray(converter_config.get('direction', CONVERTER_CONFIG['direction']),
                                    dtype=float)
        self.min_command = converter_config.get('min_command', CONVERTER_CONFIG['min_command'])
        self.max_command = converter_config.get('max_command', CONVERTER_CONFIG['max_command'])

        for name, values in (('trim', self.trim), ('scale', self.scale), ('direction', self.direction)):
            if values.shape != (self.num_channels,):
                raise ConfigurationError(
                    f"converter.{name} must have {self.num_channels} entries, got {values.shape}")
        if self.min_command >= self.max_command:
            raise ConfigurationError(
                f"converter.min_command ({self.min_command}) must be below max_command ({self.max_command})")

        self._trim_commands = self._to_servo(self.trim)

    def _to_servo(self, values: np.ndarray) -> np.ndarray:
        clipped = np.clip(np.rint(values), self.min_command, self.max_command)
        return clipped.astype(int)

    def radians_to_servo_commands(self, command: np.ndarray) -> np.ndarray:
        command = np.asarray(command, dtype=float).reshape(-1)
        if command.shape != (self.num_channels,):
            raise ValueError(
                f"Expected command with {self.num_channels} channels, got {command.shape[0]}")
        return self._to_servo(self.trim + self.direction * self.scale * command)

    def get_trim_commands(self) -> np.ndarray:
        return self._trim_commands.copy()
