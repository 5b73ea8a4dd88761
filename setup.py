from setuptools import setup, find_packages

setup(
    name="dicepool",
    version="0.1.0",
    description="Notation parser and roller for numeric and narrative tabletop dice",
    author="Samuel",
    python_requires=">=3.11",
    packages=find_packages(include=["dicepool", "dicepool.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "jsonschema>=4.20.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.12.0",
            "mypy>=1.7.0",
            "pylint>=3.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "dicepool=dicepool.cli.commands:main",
        ]
    },
)
