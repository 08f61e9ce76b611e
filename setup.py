"""Setup script for filedigest."""

from setuptools import find_packages, setup

setup(
    name="filedigest",
    version="0.1.0",
    description="Compute many cryptographic digests and checksums of a file in one pass",
    python_requires=">=3.10",
    packages=find_packages(include=["filedigest", "filedigest.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.7",
        "tomli>=1.1.0; python_version < '3.11'",
        "dependency-injector>=4.41",
        "pycryptodome>=3.15",
        "whirlpool>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "filedigest=filedigest.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Security :: Cryptography",
        "Topic :: Utilities",
    ],
)
