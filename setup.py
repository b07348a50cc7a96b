
from setuptools import setup, find_packages

setup(
    name='pnr_parser',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'click',
        'python-dateutil',
        'PyYAML',
        'regex',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'pnr-parser=pnr_parser.cli:main'
        ]
    }
)
