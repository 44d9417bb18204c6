from setuptools import setup, find_packages

setup(
    name="tafl_engine",
    version="0.1.0",
    packages=find_packages(include=["tafl_engine", "tafl_engine.*"]),
    install_requires=[
        "numpy>=1.24.3",
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'tafl=tafl_engine.cli.main:cli',
        ],
    },
    python_requires=">=3.9",
)
