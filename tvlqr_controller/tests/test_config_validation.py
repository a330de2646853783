"""配置验证测试"""
import copy

import pytest

from tvlqr_controller.config import (
    DEFAULT_CONFIG,
    validate_config,
    get_config_value,
    load_config,
    merge_config,
    ConfigValidationError,
    ValidationSeverity,
)
from tvlqr_controller.core.exceptions import ConfigurationError


def _config():
    return copy.deepcopy(DEFAULT_CONFIG)


def test_default_config_valid():
    """测试默认配置应该通过验证"""
    errors = validate_config(DEFAULT_CONFIG, raise_on_error=False)
    assert len(errors) == 0, f"Default config has errors: {errors}"


def test_invalid_num_channels():
    """测试无效的通道数"""
    config = _config()
    config['converter']['num_channels'] = 0

    errors = validate_config(config, raise_on_error=False)
    assert any(key == 'converter.num_channels' for key, _, _ in errors)


def test_channel_list_length_mismatch_is_fatal():
    """测试配平列表长度与通道数不一致"""
    config = _config()
    config['converter']['trim'] = [1500, 1500]

    errors = validate_config(config, raise_on_error=False)
    assert ('converter.trim', ValidationSeverity.FATAL) in [(k, s) for k, _, s in errors]

    with pytest.raises(ConfigValidationError) as exc_info:
        validate_config(config, raise_on_error=True)
    assert exc_info.value.errors


def test_min_max_command_order():
    """测试最小/最大执行器命令顺序"""
    config = _config()
    config['converter']['min_command'] = 2000
    config['converter']['max_command'] = 1000

    errors = validate_config(config, raise_on_error=False)
    assert any(key == 'converter.min_command' for key, _, _ in errors)


def test_trim_out_of_range():
    """测试配平命令超出执行器范围"""
    config = _config()
    config['converter']['trim'] = [1500, 1500, 2500, 1500]

    errors = validate_config(config, raise_on_error=False)
    assert any('通道 2' in msg for _, msg, _ in errors)


def test_invalid_direction():
    """测试通道方向只能为 ±1"""
    config = _config()
    config['converter']['direction'] = [1, 0, 1, 1]

    with pytest.raises(ConfigValidationError):
        validate_config(config)


def test_unknown_time_source():
    """测试未知时间来源"""
    config = _config()
    config['tracking']['time_source'] = 'gps'

    with pytest.raises(ConfigValidationError):
        validate_config(config)


def test_zero_warn_interval_is_warning_only():
    """测试告警间隔为 0 只产生警告"""
    config = _config()
    config['tracking']['missing_trajectory_warn_interval'] = 0.0

    errors = validate_config(config, raise_on_error=True)
    assert [s for _, _, s in errors] == [ValidationSeverity.WARNING]


def test_type_error_detected():
    """测试类型错误检测"""
    config = _config()
    config['tracking']['missing_trajectory_warn_interval'] = 'often'

    errors = validate_config(config, raise_on_error=False)
    assert any('类型错误' in msg for _, msg, _ in errors)


def test_get_config_value():
    """测试点分隔路径取值"""
    assert get_config_value(DEFAULT_CONFIG, 'tracking.time_source') == 'monotonic'
    assert get_config_value({}, 'converter.num_channels', fallback_config=DEFAULT_CONFIG) == 4
    assert get_config_value({}, 'nonexistent.path', 'default') == 'default'


def test_merge_config_is_deep_and_pure():
    """测试递归合并且不修改输入"""
    base = _config()
    merged = merge_config(base, {'converter': {'num_channels': 2}})

    assert merged['converter']['num_channels'] == 2
    assert merged['converter']['min_command'] == 1000
    assert base['converter']['num_channels'] == 4

    merged['converter']['trim'].append(0)
    assert len(base['converter']['trim']) == 4


def test_load_config_yaml(tmp_path):
    """测试从 YAML 加载并合并配置"""
    path = tmp_path / 'vehicle.yaml'
    path.write_text(
        "tracking:\n"
        "  time_source: pose_stamp\n"
        "converter:\n"
        "  num_channels: 2\n"
        "  trim: [1500, 1200]\n"
        "  scale: [400.0, 300.0]\n"
        "  direction: [1, -1]\n",
        encoding='utf-8',
    )
    config = load_config(str(path))
    assert config['tracking']['time_source'] == 'pose_stamp'
    assert config['tracking']['missing_trajectory_warn_interval'] == 1.0
    assert config['converter']['trim'] == [1500, 1200]


def test_load_config_invalid_yaml(tmp_path):
    """测试 YAML 验证失败和顶层非映射"""
    bad = tmp_path / 'bad.yaml'
    bad.write_text("converter:\n  num_channels: 2\n", encoding='utf-8')
    with pytest.raises(ConfigValidationError):
        load_config(str(bad))

    not_mapping = tmp_path / 'list.yaml'
    not_mapping.write_text("- 1\n- 2\n", encoding='utf-8')
    with pytest.raises(ConfigurationError):
        load_config(str(not_mapping))


def test_load_config_defaults_only():
    """测试不指定文件时返回默认配置副本"""
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
