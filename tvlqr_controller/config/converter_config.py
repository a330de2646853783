"""舵机命令转换配置

每个通道的转换关系:
    servo = clip(round(trim + direction * scale * radians), min_command, max_command)

默认值对应 4 通道舵机 (升降舵、副翼左右、油门/方向舵)，
PWM 脉宽单位为微秒，配平为 1500 us，±1 rad 约对应 ±500 us。
"""

CONVERTER_CONFIG = {
    'num_channels': 4,                          # 通道数，必须与命令向量长度一致
    'trim': [1500, 1500, 1500, 1500],           # 配平命令 (执行器单位)
    'scale': [500.0, 500.0, 500.0, 500.0],      # 每弧度对应的执行器单位
    'direction': [1, 1, 1, 1],                  # 通道方向 (1 或 -1)
    'min_command': 1000,                        # 最小执行器命令
    'max_command': 2000,                        # 最大执行器命令
}

# 转换配置验证规则
CONVERTER_VALIDATION_RULES = {
    'converter.num_channels': (1, 64, '转换器通道数'),
    'converter.min_command': (None, None, '最小执行器命令'),
    'converter.max_command': (None, None, '最大执行器命令'),
}
