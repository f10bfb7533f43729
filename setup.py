#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'wsdlmodel', '__init__.py'),
                                                                     'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC = "Parses Wsdl 1.1 documents and their inline Xml Schema into an " \
"immutable model of the service's types, operations, bindings and endpoints."

LONG_DESC = """wsdlmodel reconciles the schema types, the abstract port type
operations and the concrete soap bindings of a Wsdl document into one
consistent, read-only description that code generators can consume.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='wsdlmodel',
    packages=find_packages(include=['wsdlmodel', 'wsdlmodel.*']),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Code Generators',
        'Topic :: Text Processing :: Markup :: XML',
    ],
    keywords='soap wsdl xml schema xsd parser codegen',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.7',
    install_requires=[
        'lxml',
        'colorama',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
)
