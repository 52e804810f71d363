from setuptools import setup, find_packages
import re

# Read version from payledger/__init__.py
with open('payledger/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='payledger',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'payledger=payledger.cli.__main__:main',
        ],
    },
    author='Personal',
    description='Payroll ledger: employees, timecards, union dues and paydays.',
    python_requires='>=3.10',
)
