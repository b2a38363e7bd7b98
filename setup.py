"""setup.py for packstat.

Installs the ``packstat`` package and the ``packstat`` console command
(equivalent to ``python -m packstat``).
"""

import os
import re

from setuptools import setup, find_packages


def _read_version():
    """Read __version__ from packstat/__init__.py without importing it."""
    init_path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                             "packstat", "__init__.py")
    with open(init_path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find __version__ in packstat/__init__.py")
    return match.group(1)


setup(
    name="packstat",
    version=_read_version(),
    description="Top-K and last-K statistics over densely packed 12-bit streams",
    packages=find_packages(include=["packstat", "packstat.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "packstat=packstat.__main__:main",
        ],
    },
)
