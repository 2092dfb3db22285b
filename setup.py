"""Setup script for dualcargo."""

from pathlib import Path

from setuptools import find_packages, setup

README = Path(__file__).parent / "README.md"

setup(
    name="dualcargo",
    version="0.1.0",
    description="Run cargo test/check with default features, then with --all-features",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["dualcargo", "dualcargo.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.7",
        "dependency-injector>=4.41",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "dualcargo=dualcargo.__main__:main",
            "cargo-test-all=dualcargo.cli.commands.test:cargo_test",
            "cargo-check-all=dualcargo.cli.commands.check:cargo_check",
        ],
    },
    classifiers=[
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Build Tools",
    ],
)
