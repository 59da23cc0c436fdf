'''Setup.py'''

from setuptools import find_packages, setup

setup(
    name='gradellipse',
    version='0.1.0',
    packages=find_packages(),
    entry_points={
        'console_scripts': [
            'gradellipse-fit=gradellipse.cli:main',
        ],
    },
    license='GPLv3',
    description='Ellipse fitting from points and gradient directions',
    long_description=open('README.rst', encoding='utf-8').read(),
    install_requires=[
        "numpy>=1.19.1",
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
)
