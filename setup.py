#!/usr/bin/env python3
# encoding=utf-8
# vim: set filetype=python
import os

from setuptools import setup, find_packages

PATH = os.path.abspath(os.path.dirname(__file__))


def read_requirements(filename):
    with open(os.path.join(PATH, filename)) as requirements_file:
        return [
            line.strip() for line in requirements_file
            if line.strip() and not line.startswith('#')
        ]


setup(
    name='mockql',
    version='0b0',
    description='Deterministic in-process GraphQL API fixtures',
    author='Gigaquads',
    author_email='notdsk@gmail.com',
    url='https://github.com/gigaquads/mockql',
    classifiers=['Programming Language :: Python :: 3'],
    python_requires='>=3.7',
    packages=find_packages(include=['mockql', 'mockql.*']),
    package_data={'mockql': ['schema/*.graphql']},
    include_package_data=True,
    install_requires=read_requirements('requirements.txt'),
    extras_require={'test': ['pytest', 'mock']},
    entry_points={'pytest11': ['mockql = mockql.test.plugin']},
)
