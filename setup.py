#!/usr/bin/env python3
"""
Setup script for the Workshop Survey Analysis project

Install in development mode:
    pip install -e .

This allows importing from anywhere:
    from config.paths import RAW, FIGURES
    from analysis.sankey import build_sankey_data
"""

import re
from setuptools import setup, find_packages
from pathlib import Path

HERE = Path(__file__).parent


def read_requirements(path):
    """Requirement lines from a pip requirements file, comments dropped"""
    lines = (line.split('#', 1)[0].strip() for line in path.read_text().splitlines())
    requirements = {}
    for line in filter(None, lines):
        # First requirement for a package wins
        name = re.split(r'[<>=!~\[;\s]', line, maxsplit=1)[0].lower()
        requirements.setdefault(name, line)
    return list(requirements.values())


requirements = read_requirements(HERE / "requirements.txt")
long_description = (HERE / "README.md").read_text(encoding='utf-8')

setup(
    name="workshop-survey-analysis",
    version="1.0.0",
    description="Bar charts, mosaic plots and Sankey diagrams from a coded workshop survey",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests', 'tests.*', 'notebooks', 'docs']),
    python_requires='>=3.10',
    install_requires=requirements,
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
            'mypy>=1.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'survey-figures=analysis.reports.generate_all_figures:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Visualization',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
