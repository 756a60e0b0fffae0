"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    setup.py                                                                                             *
*        Project: filedup                                                                                              *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-10-02                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-18     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from setuptools import setup, find_packages

setup(
    name='filedup',
    version='0.1.0',
    packages=find_packages(include=['filedup', 'filedup.*']),
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Jess Mann",
    python_requires=">=3.11",
    install_requires=[
        'alive-progress',
        'colorlog',
        'pydantic',
        'xxhash',
        'cachetools',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'filedup=filedup.cli:main',
        ],
    },
)
