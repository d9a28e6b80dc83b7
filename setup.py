#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pyantoine',
    include_package_data=True,
    version='1.0.0',  # Ideally should be same as your GitHub release tag version
    packages=find_packages(include=['pyantoine', 'pyantoine.*']),
    description='pyAntoine - Piecewise Antoine vapor pressure and ideal binary VLE',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Mark W. Burgoyne',
    author_email='mark.w.burgoyne@gmail.com',
    keywords=['antoine', 'vapor pressure', 'vle', 'raoult'],
    classifiers=[],
    python_requires='>=3.8',
    install_requires=[
        'requests',
        'numpy',
        'scipy',
        'pandas',
        'tabulate'
    ],
    extras_require={
        'test': ['pytest']
    }
)
