"""跟踪控制器配置

包含跟踪控制器的运行参数：
- 轨迹时间来源
- 未设置轨迹告警节流间隔
- 启动时是否直接启用稳定控制器
- 日志级别
"""

# 跟踪配置
# 注意:
# - time_source 为 'pose_stamp' 时，沿轨迹时间由位姿时间戳之差计算，
#   位姿缺少时间戳时回退到单调时钟
# - activate_stabilizing_on_start 为 False 时，控制器构造后没有激活轨迹，
#   在外部调用 set_trajectory() 之前一直输出配平命令
TRACKING_CONFIG = {
    'time_source': 'monotonic',                # 时间来源: monotonic / wall / pose_stamp
    'missing_trajectory_warn_interval': 1.0,   # 未设置轨迹告警最小间隔 (秒)
    'activate_stabilizing_on_start': False,    # 构造后立即激活稳定控制器
    'log_level': 'info',                       # 日志级别
}

VALID_TIME_SOURCES = ('monotonic', 'wall', 'pose_stamp')

# 跟踪配置验证规则
TRACKING_VALIDATION_RULES = {
    'tracking.missing_trajectory_warn_interval': (0.0, 3600.0, '未设置轨迹告警间隔 (秒)'),
}
