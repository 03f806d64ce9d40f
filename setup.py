#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="safe-fileutils",
    version="1.0.0",
    description="Zip-slip safe archive extraction and file-system helpers",
    author="JustAmply",
    packages=find_packages(include=["safe_fileutils", "safe_fileutils.*"]),
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'safe-fileutils=safe_fileutils.cli:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: System :: Archiving",
        "Topic :: Security",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
