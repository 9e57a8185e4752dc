'''Setup.py'''

from setuptools import setup, find_packages

setup(
    name='socialellipse',
    version='0.1.0',
    packages=find_packages(),
    scripts=[],
    license='GPLv3',
    description='Ellipse occupancy models for small groups of people',
    long_description=open('README.rst', encoding='utf-8').read(),
    install_requires=[
        "numpy>=1.19.1",
        "scipy>=1.5.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires='>=3.7',
)
