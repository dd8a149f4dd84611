from setuptools import setup, find_packages

setup(
    name="xclips",
    version="0.1.0",
    description="Extract clips from a media file at human-readable time spans with ffmpeg",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "xclips=xclips.cli:main",
        ],
    },
)
