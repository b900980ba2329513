#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = [
    'aiohttp>=3.8.0',
    'attrs>=20.1.0',
    'inflection>=0.3.1',
    'multidict>=4.5.0',
    'python-mimeparse>=1.6.0',
    'trafaret>=2.0.0',
    'yarl>=1.3.0',
]

test_requirements = [
    'pytest>=7.0',
    'pytest-aiohttp>=1.0.0',
    'pytest-asyncio>=0.17.0',
]

setup(
    name='aiohttp_json_result',
    version='0.1.0',
    description='JSON results with soft content negotiation for aiohttp',
    long_description=readme + '\n\n' + history,
    author='Vladimir Bolshakov',
    author_email='vovanbo@gmail.com',
    url='https://github.com/vovanbo/aiohttp_json_result',
    packages=[
        'aiohttp_json_result',
    ],
    package_dir={'aiohttp_json_result': 'aiohttp_json_result'},
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.9',
    license='MIT license',
    zip_safe=False,
    keywords='aiohttp_json_result',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Framework :: AsyncIO',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
    ],
    test_suite='tests',
)
