"""
Setup configuration for mixsim package.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / 'README.md'
long_description = readme_path.read_text() if readme_path.exists() else ''

setup(
    name='mixsim',
    version='1.0.0',
    description='Minimal stream mixing process simulation',
    long_description=long_description,
    long_description_content_type='text/markdown',

    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'mixsim.config': ['schemas/*.json'],
    },

    install_requires=[
        'numpy>=1.21.0',
        'pyyaml>=6.0',
        'jsonschema>=4.0.0',
        'pydantic>=2.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=3.0.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'mixsim-demo=mixsim.simulation.runner:main',
        ],
    },

    python_requires='>=3.10',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
