from setuptools import find_packages, setup

setup(
    name="svctrl",
    version="0.1.0",
    description="svctrl - enable, disable, signal and inspect runit service directories",
    packages=find_packages(include=["svctrl", "svctrl.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schema validation
        "typer>=0.12",  # Command line interface
        "click",  # Usage error types underneath Typer
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Highlighted output on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "svctrl=svctrl.cli:main",
        ],
    },
)
