#!/usr/bin/env python
from setuptools import setup

setup(
    name='iirfilter',
    version='0.1.0',
    description='Single-channel recursive (IIR) digital filter',
    license='MIT',
    packages=['iirfilter'],
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    platforms=['POSIX'],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Sound/Audio :: Analysis',
        'Topic :: Scientific/Engineering',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
