#!/usr/bin/env python3
from setuptools import setup

setup(
    name='lessvfs',
    version='0.1',
    packages=[
        'lessvfs',
        'lessvfs.stores',
        'lessvfs.commands',
        'lessvfs.commands.builtins'],
    scripts=['scripts/lessvfs'],
    install_requires=['docopt', 'lesscpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
    license='Apache License, Version 2.0',
    description='LESS source reader and compiler over virtual file stores'
)
