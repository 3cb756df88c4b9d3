#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = []

color_requirements = [
    'pygments',
    'colorful',
]

test_requirements = [
    'pytest',
    *color_requirements,
]

setup(
    name='paretoprint',
    version='0.1.0',
    description="Optimal document layout engine for pretty-printers",
    long_description=readme,
    packages=find_packages(include=['paretoprint', 'paretoprint.*']),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'color': color_requirements,
        'test': test_requirements,
    },
    license="MIT license",
    zip_safe=False,
    keywords='paretoprint pretty printer layout',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.6',
)
