#!/usr/bin/env python
import os
from setuptools import setup, find_packages

with open("README.md") as readme_file:
    readme = readme_file.read()

requirements = []
test_requirements = ["pytest"]

on_rtd = os.environ.get("READTHEDOCS", None)

if not on_rtd:
    with open("requirements.txt") as requirements_file:
        requirements_lines = requirements_file.readlines()
        for line in requirements_lines:
            requirements.append(line.strip())

setup(
    name="binning",
    version="1.0.0",
    description="UCSC interval binning scheme for fast overlap queries",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords=["binning", "intervals", "UCSC", "genome browser"],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={
        "console_scripts": [
            "binning = binning.commands:app",
        ]
    },
    include_package_data=True,
    install_requires=requirements,
    extras_require={"test": test_requirements},
    python_requires=">=3.10",
    classifiers=[
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)
