from setuptools import find_packages, setup

setup(
    name="snapaio",
    version="0.1.0",
    description="snapaio - SnapRAID maintenance orchestrator (diff, sync, scrub, report)",
    author="snapaio contributors",
    packages=find_packages(include=["snapaio", "snapaio.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (0.26+ vendors click; code uses click directly)
        "click",  # Imported directly for context and exceptions
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration and output schemas
        "jinja2",  # HTML report wrapper
        "markdown",  # Markdown to HTML for the report body
        "PyYAML",  # YAML output for --display yaml
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "snapaio=snapaio.cli:main",
        ],
    },
)
