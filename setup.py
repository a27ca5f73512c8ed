from setuptools import find_packages, setup

setup(
    name="snapkit",
    version="0.1.0",
    description="Snapkit image delivery engine - optimized image URLs, srcsets and format negotiation",
    packages=find_packages(include=["snapkit", "snapkit.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Transform and environment models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for CLI outputs
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
    entry_points={
        "console_scripts": [
            "snapkitc=snapkit.cli:main",
        ],
    },
)
