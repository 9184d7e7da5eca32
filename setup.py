from setuptools import setup, find_packages

setup(
    name="swingsynth",
    version="0.1.0",
    description="Synthetic golf swing data generator for visualization and demos",
    author="SwingSynth",
    packages=find_packages(include=["swingsynth", "swingsynth.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyQt6>=6.6.0",
        "numpy>=1.26.0",
    ],
    extras_require={
        "test": ["pytest>=8.0", "pytest-qt>=4.4.0"],
    },
    entry_points={
        "console_scripts": [
            "swingsynth=swingsynth.main:main",
        ],
    },
)
