"""轨迹跟踪控制器"""
from .tvlqr_controller import TvlqrController

__all__ = ['TvlqrController']
