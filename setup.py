#!/usr/bin/env python3
"""
Gradient Engine Setup
"""

from setuptools import setup, find_packages

# Read requirements from requirements.txt
with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="gradient-engine",
    version="1.0.0",
    description="Parses CSS linear gradients into gradient line geometry and color stops",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Gradient Engine Team",
    packages=find_packages(include=["gradient_engine", "gradient_engine.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "gradient-engine=gradient_engine.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Markup",
        "Topic :: Multimedia :: Graphics",
    ],
    keywords="css, gradient, linear-gradient, parser",
)
