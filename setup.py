#!/usr/bin/env python3
"""
Setup script for the lfmc package.
"""

from setuptools import setup, find_packages

# Read version from package metadata without importing it
version = {}
with open("lfmc/__init__.py", encoding="utf-8") as f:
    for line in f:
        if line.startswith(("__version__", "__author__", "__description__")):
            exec(line, version)

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="lfmc",
    version=version["__version__"],
    author=version["__author__"],
    description=version["__description__"],
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["lfmc", "lfmc.*"]),
    py_modules=["run_lfmc"],
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "lfmc=lfmc.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    keywords="lastfm scrobbling top-artists cli",
)
