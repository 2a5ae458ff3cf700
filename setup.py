"""
Setup script for space3.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[test]"   # With test dependencies

The math kernel is pure Python. numpy is used for array interop
(Matrix3.to_numpy / Matrix3.from_numpy) and as the reference in tests.
"""

from setuptools import setup, find_packages


setup(
    name='space3',
    version='1.1.1',
    description='Fixed-size 3D vectors and 3x3 matrices for graphics and simulation',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
