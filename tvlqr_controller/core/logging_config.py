"""
统一日志配置模块

使用方式:
=========

方式 1: 标准 Python 日志 (推荐)
    import logging
    logger = logging.getLogger(__name__)

方式 2: 使用 get_logger() (可选)
    from tvlqr_controller.core.logging_config import get_logger
    logger = get_logger(__name__)

方式 3: 使用 ThrottledLogger (频繁日志场景)
    from tvlqr_controller.core.logging_config import ThrottledLogger
    throttled = ThrottledLogger(logger, min_interval=1.0)

    # 控制循环以控制频率调用，未设置轨迹时的告警需要节流
    throttled.warning("No active trajectory", key="no_trajectory")

日志级别规范:
=============

DEBUG:   每次控制更新的数值 (时间、误差、命令)
INFO:    轨迹切换、回退到稳定控制器、参考系捕获
WARNING: 未设置轨迹、配置验证警告
ERROR:   配置错误导致的运行时异常
"""
import logging
import sys
import time
from typing import Optional

# 默认日志格式
DEFAULT_FORMAT = '[%(name)s] %(levelname)s: %(message)s'
DEFAULT_LEVEL = logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    获取模块日志器

    Args:
        name: 日志器名称，通常使用 __name__
        level: 日志级别，默认为 INFO

    Returns:
        配置好的 Logger 实例
    """
    logger = logging.getLogger(name)

    # 只在根日志器未配置时进行配置
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(DEFAULT_LEVEL)

    return logger


def configure_logging(level: int = logging.INFO,
                      format_str: str = DEFAULT_FORMAT) -> None:
    """
    配置全局日志设置

    Args:
        level: 日志级别
        format_str: 日志格式字符串
    """
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def parse_log_level(level_name: str) -> int:
    """将 'info' / 'DEBUG' 等字符串转换为 logging 级别"""
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'")
    return level


class ThrottledLogger:
    """
    节流日志器

    用于避免频繁触发的日志消息导致日志泛滥。
    同一 key 在 min_interval 秒内最多记录一次；key 为 None 时不节流。
    """

    def __init__(self, logger: logging.Logger, min_interval: float = 1.0):
        """
        Args:
            logger: 底层日志器
            min_interval: 同一 key 的最小日志间隔（秒）
        """
        self._logger = logger
        self._min_interval = min_interval
        self._last_log_times: dict = {}

    def _should_log(self, key: str) -> bool:
        current_time = time.monotonic()
        last_time = self._last_log_times.get(key)

        if last_time is None or current_time - last_time >= self._min_interval:
            self._last_log_times[key] = current_time
            return True
        return False

    def reset(self) -> None:
        self._last_log_times.clear()

    def debug(self, msg: str, key: str = None, *args, **kwargs):
        if key is None or self._should_log(key):
            self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, key: str = None, *args, **kwargs):
        if key is None or self._should_log(key):
            self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, key: str = None, *args, **kwargs):
        if key is None or self._should_log(key):
            self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, key: str = None, *args, **kwargs):
        if key is None or self._should_log(key):
            self._logger.error(msg, *args, **kwargs)
