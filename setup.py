#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Dec  3 13:37:26 2020

Install the pattern database modules
pip install -e .
pip install -e .[test]   for the pytest suite
"""

from setuptools import setup

setup(
        name="rubik_patterndb",
        version="0.1.0",
        description="Lehmer code indexing and BFS pattern databases for the rubik's cube",
        py_modules=[
                "lehmer_code",
                "pattern_errors",
                "pattern_db",
                "pattern_encodings",
                "rubik_cubie_model",
                "rubik_cornerdb_gen",
        ],
        python_requires=">=3.8",
        install_requires=["numpy"],
        extras_require={"test": ["pytest"]},
)
