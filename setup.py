# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="shamir-recover",
    version="0.1.0",
    description="Exact-arithmetic Shamir secret reconstruction from base-encoded shares",
    author="shamir-recover contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "shamir-recover=shamir_recover.cli:main",
        ],
    },
)
