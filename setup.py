"""
Setup script for the SVG Scanner package.
"""

from setuptools import setup, find_packages
import os

# Read the README
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "Allow-list based security scanner for SVG files."

setup(
    name="svgscanner",
    version="1.0.0",
    author="SVG Scanner Team",
    author_email="security@example.com",
    description="Allow-list based security scanner for SVG files with CI-friendly reports",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/svgscanner/svgscanner",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    python_requires=">=3.8",
    install_requires=[
        "lxml>=4.9",
        "defusedxml>=0.7",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "mypy>=1.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "svgscanner=svgscanner.cli:main",
            "svg-scanner=svgscanner.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="security, scanner, svg, sanitizer, xss, ci",
    project_urls={
        "Bug Reports": "https://github.com/svgscanner/svgscanner/issues",
        "Source": "https://github.com/svgscanner/svgscanner",
    },
)
