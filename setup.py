# -*- coding: utf-8 -*-

from setuptools import setup, find_packages


setup(
    name="mid2chart",
    version="0.2.0",
    description="Converts rhythm game MIDI files into the textual .chart format",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mid2chart", "mid2chart.*"]),
    python_requires=">=3.8",
    install_requires=[
        "mido",
        "more-itertools",
    ],
    extras_require={
        "test": ["parameterized"],
    },
    entry_points={"console_scripts": []},
    scripts=["tools/midiToChart.py"],
    classifiers=[
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)
