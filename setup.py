#! /usr/bin/env python
# -*- coding:utf-8 -*-

from setuptools import setup, find_namespace_packages

setup(
    name='svgmorph',
    version='0.1',
    description='SVG shape morphing',
    url='',
    license='MIT',
    packages=find_namespace_packages(include=['svgmorph', 'svgmorph.*']),
    classifiers=['Development Status :: 4 - Beta',
                 'Programming Language :: Python',
                 'Programming Language :: Python :: 3'],
    entry_points={
        'console_scripts': ['svgmorph=svgmorph.cli:main'],
    },
    install_requires=['svgwrite', 'svgpathtools'],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
)
