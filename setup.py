#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import inspect
import os
import sys

import setuptools
from setuptools import setup

if sys.version_info < (3, 8, 0):
    sys.stderr.write('FATAL: ami-helper needs to be run with Python 3.8+\n')
    sys.exit(1)

__location__ = os.path.join(os.getcwd(), os.path.dirname(inspect.getfile(inspect.currentframe())))


def read_version(package):
    with open(os.path.join(__location__, package, '__init__.py'), 'r') as fd:
        for line in fd:
            if line.startswith('__version__ = '):
                return line.split()[-1].strip().strip("'")


NAME = 'ami-helper'
MAIN_PACKAGE = 'amihelper'
VERSION = read_version(MAIN_PACKAGE)
DESCRIPTION = 'Select the most recent EC2 machine image for an operating system, architecture and region'
URL = 'https://github.com/Coding-Badly/rusty-tools'
KEYWORDS = 'aws ec2 ami image'

# Add here all kinds of additional classifiers as defined under
# https://pypi.python.org/pypi?%3Aaction=list_classifiers
CLASSIFIERS = [
    'Development Status :: 3 - Alpha',
    'Environment :: Console',
    'Intended Audience :: Developers',
    'Intended Audience :: System Administrators',
    'Operating System :: POSIX :: Linux',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: Implementation :: CPython',
]

CONSOLE_SCRIPTS = [
    'ami-helper = amihelper.cli:cli'
]

TESTS_REQUIRE = ['pytest-cov', 'pytest']


def read(fname):
    with open(os.path.join(__location__, fname)) as f:
        return f.read()


def setup_package():
    setup(
        name=NAME,
        version=VERSION,
        url=URL,
        description=DESCRIPTION,
        keywords=KEYWORDS,
        classifiers=CLASSIFIERS,
        python_requires='>=3.8',
        packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
        install_requires=[req for req in read('requirements.txt').splitlines() if req.strip()],
        extras_require={'test': TESTS_REQUIRE},
        entry_points={
            'console_scripts': CONSOLE_SCRIPTS,
        },
    )


if __name__ == '__main__':
    setup_package()
