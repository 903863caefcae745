#!/usr/bin/env python
# -*- coding: utf-8 -*-

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="oucost",
    version="0.1.0",
    python_requires='>=3.6.0',
    description="Cost of an AWS Organizations OU, optionally including every OU under it",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords=["aws", "organizations", "cost explorer", "billing"],
    packages=setuptools.find_packages(exclude=["tests"]),
    include_package_data=True,
    entry_points={"console_scripts": ["oucost=oucost.main:main"]},
    install_requires=[
        'boto3',
        'click',
        'tabulate'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
    ],
    zip_safe=False
)
