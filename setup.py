from setuptools import find_packages, setup

setup(
    name="unitgen",
    version="0.1.0",
    description="Build systemd service units as data and render .service files",
    packages=find_packages(include=["unitgen", "unitgen.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.6",  # Unit records, config and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "PyYAML",  # YAML definitions and output
        "pygments",  # Highlighted JSON/YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "unitgen=unitgen.cli:main",
        ],
    },
)
