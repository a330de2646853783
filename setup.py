#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TVLQR Controller 安装脚本

安装方法:
    # 可编辑安装 (推荐开发时使用)
    pip install -e .[test]

    # 普通安装
    pip install .
"""

from setuptools import setup, find_packages

setup(
    name='tvlqr-controller',
    version='1.0.0',
    author='TVLQR Controller Team',
    description='基于时变 LQR 增益的轨迹跟踪反馈控制器',

    # 自动查找包
    packages=find_packages(include=['tvlqr_controller', 'tvlqr_controller.*']),

    # 依赖
    install_requires=[
        'numpy>=1.20.0',
        'scipy>=1.7.0',
        'PyYAML>=5.4.0',
    ],
    extras_require={
        'test': ['pytest>=6.0'],
    },

    entry_points={
        'console_scripts': [
            'tvlqr-demo=tvlqr_controller.main:main',
        ],
    },

    # Python 版本要求
    python_requires='>=3.8',

    include_package_data=True,
    zip_safe=False,
)
