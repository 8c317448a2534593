# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
#
# testo - generate, build and run C++ test suites

from setuptools import setup, find_packages

# 读取README文件作为长描述
def read_readme():
    try:
        with open('README.md', 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return "testo - lightweight C++ test harness generator"

setup(
    name='testo',
    version='1.0.0',
    description='Lightweight C++ test harness generator',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    author='testo Development Team',
    license='MIT',

    packages=find_packages(exclude=['tests', 'tests.*']),

    # 命令行工具
    entry_points={
        'console_scripts': [
            'testo = testo.__main__:main',
        ],
    },

    # 运行时依赖
    install_requires=[
        'jinja2>=3.0.0',
        'tabulate>=0.9.0',
        'humanfriendly>=10.0',
        'argcomplete>=2.0.0',
    ],

    # 额外依赖（可选安装）
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'black>=22.0.0',
            'flake8>=4.0.0',
        ],
        'test': [
            'pytest>=7.0.0',
        ],
    },

    # Python版本要求
    python_requires='>=3.8',

    # 分类信息
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: C++',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Testing',
        'Topic :: Software Development :: Code Generators',
    ],

    # 关键词
    keywords='c++ unit testing test runner code generation',

    # 包含数据文件
    include_package_data=True,
    package_data={
        'testo': [
            'runtime/templates/*.j2',
        ],
    },

    # zip安全
    zip_safe=False,
)
