#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import find_packages, setup

VERSION = '0.1'

setup(
    name = 'webauthn-assertion',
    packages = find_packages(exclude=['tests', 'tests.*']),
    include_package_data = True,
    version = VERSION,
    description = 'Signature verification for WebAuthn / FIDO2 authentication assertions.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    keywords = 'webauthn FIDO2 passkey assertion signature',
    license='BSD',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
        'Topic :: Security :: Cryptography',
    ],
    python_requires='>=3.8',
    install_requires=[
        'cbor2>=5.0.0',
        'cryptography>=3.1',
    ],
    extras_require={
        'test': [
            'pytest>=6.0',
        ],
    },
)
