"""命令转换器"""
from .servo_converter import ServoConverter

__all__ = ['ServoConverter']
