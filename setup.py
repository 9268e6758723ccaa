# -*- coding: utf-8 -*-

import os.path

import setuptools


def readme():
    """Load README contents."""
    path = os.path.join(os.path.dirname(__file__), "README.rst")
    with open(path) as readme:
        return readme.read()


setuptools.setup(
    name="python-steamid",
    version="0.1.0",
    description=("Parse, validate and render SteamIDs in their 64-bit, "
                 "STEAM_X:Y:Z and [T:U:W] formats."),
    long_description=readme(),
    author="Oliver Ainsworth",
    author_email="ottajay@googlemail.com",
    packages=setuptools.find_packages(exclude=["tests"]),
    python_requires=">=3.6",
    install_requires=[
        "docopt>=0.6.2",
    ],
    extras_require={
        "development": [
            "pylint",
        ],
        "test": [
            "mock",
            "pytest>=3.6.0",
            "pytest-cov",
            "pytest-timeout",
        ],
    },
    license="MIT License",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Games/Entertainment",
    ],
)
