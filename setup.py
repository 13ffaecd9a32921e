# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.3.0",
    description="A small tree-walking interpreter for a Scheme-like dialect",
    packages=find_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sprig=sprig.__main__:main"],
    },
    zip_safe=False,
)
