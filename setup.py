from setuptools import find_packages, setup

setup(
    name="qmpo",
    version="0.1.0",
    description="qmpo - Open Directory With Browser (directory:// URI handler)",
    author="qmpo contributors",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI framework (0.26+ vendors click; code uses click context)
        "click",  # Typer context and usage errors
        "rich",  # Terminal formatting
        "jinja2",  # Desktop entry and launcher templates
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "qmpo=qmpo.cli:main",
        ],
    },
)
