"""
TVLQR 控制器主入口 - 演示脚本

使用模拟位姿和假时钟运行一段直线轨迹，越过轨迹时域后
自动切换到悬停稳定控制器。不适用于生产环境。

生产环境使用示例:
    from tvlqr_controller import TvlqrController, ServoConverter, load_config, load_trajectory

    config = load_config('vehicle.yaml')
    converter = ServoConverter(config)
    controller = TvlqrController(converter, load_trajectory('hover.yaml'), config)
    controller.set_trajectory(load_trajectory('maneuver.yaml'))

    # 在位姿回调中
    servo = controller.get_control(pose)

演示用法:
    python -m tvlqr_controller.main [--config configs/vehicle.yaml]
                                    [--stabilizing configs/hover.yaml] [--steps 40]
"""
import argparse
import numpy as np

from . import __version__
from .config import load_config
from .converter import ServoConverter
from .core.logging_config import configure_logging, parse_log_level
from .mock.test_data_generator import (
    FakeClock, create_test_pose, create_hover_trajectory, create_line_trajectory
)
from .tracker import TvlqrController
from .trajectory import load_trajectory


def main(argv=None):
    """主函数"""
    parser = argparse.ArgumentParser(description='TVLQR trajectory tracking demo')
    parser.add_argument('--config', default=None, help='YAML 配置文件')
    parser.add_argument('--stabilizing', default=None, help='稳定控制器轨迹 YAML 文件')
    parser.add_argument('--steps', type=int, default=40, help='控制步数')
    parser.add_argument('--dt', type=float, default=0.1, help='控制周期 (秒)')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(parse_log_level(config['tracking']['log_level']))

    print("=" * 60)
    print(f"TVLQR 轨迹跟踪控制器 v{__version__}")
    print("=" * 60)

    num_channels = config['converter']['num_channels']
    converter = ServoConverter(config)
    if args.stabilizing:
        stabilizing = load_trajectory(args.stabilizing)
    else:
        stabilizing = create_hover_trajectory(num_channels)

    clock = FakeClock()
    controller = TvlqrController(converter, stabilizing, config, clock=clock)

    trajectory = create_line_trajectory(duration=2.0, speed=1.0, num_commands=num_channels)
    controller.set_trajectory(trajectory)

    # 车辆从 (5, 3, 1) 出发，航向 90°，以略低于参考的速度前进
    x0, y0, z0, yaw0 = 5.0, 3.0, 1.0, np.pi / 2
    speed = 0.8

    print("\n开始控制循环...")
    print("-" * 60)
    for i in range(args.steps):
        t = i * args.dt
        pose = create_test_pose(x0, y0 + speed * min(t, 2.0), z0, yaw=yaw0 + 0.05 * np.sin(t))
        servo = controller.get_control(pose)
        if i % 5 == 0:
            print(f"Step {i:3d}: t={t:.1f}s state={controller.state.name:<12s} servo={servo.tolist()}")
        clock.advance(args.dt)

    print("-" * 60)
    health = controller.get_health_status()
    print(f"\n最终状态: {health['state']}, 回退次数: {health['details']['fallback_count']}")


if __name__ == "__main__":
    main()
