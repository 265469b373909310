#!/usr/bin/env python3
#
# Setup script for Revision List.

import os
import sys

from setuptools import setup, find_packages

from revlist import get_package_version
from revlist.dependencies import (PYTHON_MIN_VERSION,
                                  PYTHON_MIN_VERSION_STR,
                                  build_dependency_list,
                                  package_dependencies,
                                  test_dependencies)


# Make sure this is a version of Python we are compatible with. This should
# prevent people on older versions from unintentionally trying to install
# the source tarball, and failing.
pyver = sys.version_info[:2]

if pyver < PYTHON_MIN_VERSION:
    sys.stderr.write(
        'Revision List %s is incompatible with your version of Python '
        '(%s.%s).\n'
        'Please upgrade to Python %s or newer.\n'
        % (get_package_version(), pyver[0], pyver[1], PYTHON_MIN_VERSION_STR))
    sys.exit(1)


# Make sure we're actually in the directory containing setup.py.
root_dir = os.path.dirname(__file__)

if root_dir != '':
    os.chdir(root_dir)


PACKAGE_NAME = 'RevisionList'


setup(
    name=PACKAGE_NAME,
    version=get_package_version(),
    license='MIT',
    description='Card-style revision lists for a web-based code review tool',
    packages=find_packages(include=['revlist', 'revlist.*']),
    package_data={
        'revlist': [
            'templates/*.html',
            'templates/*/*.html',
            'static/revlist/css/*.css',
        ],
    },
    install_requires=build_dependency_list(package_dependencies),
    extras_require={
        'test': build_dependency_list(test_dependencies),
    },
    zip_safe=False,
    python_requires='>=%s' % PYTHON_MIN_VERSION_STR,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Web Environment',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Quality Assurance',
    ],
)
