#!/usr/bin/env python
# -*- encoding: utf-8 -*-
from setuptools import setup, find_packages


with open('README.rst', encoding='utf-8') as f:
    README_RST = f.read()

SHORT_DESCRIPTION = (
    'Draws commit history as a lane graph in ASCII, Unicode or compact glyphs, '
    'with optional per-lane ANSI colors.'
)

INSTALL_REQUIRES = [
    'click>=8.0',
    'pyyaml>=5.1',
]

EXTRAS_REQUIRE = {
    'test': [
        'pytest',
        'hypothesis',
    ],
}

setup(
    name='commitgraph',
    version='0.1.0',
    license='Apache 2.0',
    # Package Meta Info (for PyPi)
    description=SHORT_DESCRIPTION,
    long_description=README_RST,
    long_description_content_type='text/x-rst',
    platforms=['any'],
    # Module Source Files
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={'': ['*.yml']},
    include_package_data=True,
    zip_safe=False,
    entry_points={
        'console_scripts': ['commitgraph = commitgraph.cli:main']
    },
    # Requirements
    python_requires='>= 3.7.0',
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    # PyPi classifiers
    # http://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Topic :: Software Development :: Version Control',
        'Topic :: Utilities',
    ],
)
