#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="monument",
        packages=["monument", "monument.graph", "monument.tween"],
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Scene navigation core: waypoint graph, rotating-ring bridges, walking character",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["pathfinding", "navigation", "scene"],
        classifiers=[],
        install_requires=[
            "numpy",
        ],
        extras_require={
            "test": [
                "pytest",
                "scipy",
            ],
        },
        entry_points={
            "console_scripts": [
                "monument-sim=monument.__main__:main",
            ],
        },
        zip_safe=False,
    )
