from setuptools import setup, find_packages
from pathlib import Path

# Read the long description from your README
long_description = Path(__file__).parent.joinpath("README.md").read_text()

setup(
    name='bugcount',
    version='0.3.0',
    description='Count matching findings in FindBugs-style XML bug collections without loading them into memory',
    long_description=long_description,
    long_description_content_type='text/markdown',

    packages=find_packages(exclude=['tests', 'tests.*']),

    # Runtime dependencies
    install_requires=[
        'lxml>=4.6',
        'toml>=0.10.0',
        'PyYAML>=5.1',
        'colorama>=0.4.6',
    ],
    # Optional dependencies for development
    extras_require={
        'dev': [
            'pytest>=6.0',
            'flake8',
        ],
    },

    # Define console entry point for the CLI
    entry_points={
        'console_scripts': [
            'bugcount=bugcount.cli:main',
        ],
    },

    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
