#!/usr/bin/env python
import os
import re

from setuptools import find_packages, setup

with open(os.path.join("src", "aapc", "version.py")) as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)


setup(
    name="aapc",
    version=version,
    description="Run-length byte codec with escape-marker disambiguation",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "attrs>=23.1.0",
        "numpy",
        "Pillow>=10.3.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={"console_scripts": ["aapc=aapc.__main__:main"]},
)
