from setuptools import setup

__version__ = '0.1'

setup(
    name='pycalc',
    version=__version__,
    description='Line calculator built on a two-stack operator-precedence parser.',
    packages=['pycalc'],
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['pycalc = pycalc.__main__:main'],
    },
)
