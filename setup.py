#!/usr/bin/env python

"""The setup script."""

from __future__ import annotations

from setuptools import find_packages, setup

with open("README.rst", encoding="utf-8") as readme_file:
    readme = readme_file.read()

with open("HISTORY.rst", encoding="utf-8") as history_file:
    history = history_file.read()

requirements: list[str] = [
    "graphql-core>=3.2",
    "PyYAML>=5.4",
]

requirements_dev = [
    "black>=21.5b0",
    "bump2version>=1.0.1",
    "coverage>=5.5",
    "flake8>=3.9.1",
    "isort>=5.8.0",
    "mypy>=0.812",
    "pre-commit>=2.12.1",
    "pylint>=2.8.2",
    "pytest>=6.2.4",
    "pytest-cov>=2.11.1",
    "pytest-xdist>=2.2.1",
    "types-PyYAML>=5.4",
]

requirements_docs = [
    "Sphinx>=3.5.4",
    "sphinx-autoapi>=1.8.1",
]

requirements_examples = [
    "aiohttp>=3.7",
    "pytest-asyncio>=0.15",
    "requests>=2.25",
    "strawberry-graphql>=0.80",
]

requirements_dev += requirements_docs

setup(
    author="Shogo Sawai",
    author_email="shogo.sawai+graphqlcompiler@gmail.com",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    description="GraphQL request bodies and response envelopes",  # noqa: E501
    install_requires=requirements,
    extras_require={
        "dev": requirements_dev,
        "docs": requirements_docs,
        "examples": requirements_examples,
        "test": ["pytest>=6.2.4"],
    },
    license="MIT",
    long_description=readme + "\n\n" + history,
    name="python_graphql_envelope",
    packages=find_packages(include=["python_graphql_envelope", "python_graphql_envelope.*"]),
    include_package_data=True,
    test_suite="tests",
    url="https://github.com/s1s5/python-graphql-envelope",
    version="0.1.0",
    zip_safe=False,
)
