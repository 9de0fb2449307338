import setuptools
from pathlib import Path

with Path("README.md").open(encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="snakeline",
    version="0.1.0",
    author="snakeline developers",
    description="Snake-layout geometry for timeline placement games",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "pandas>=1.3.0",
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    packages=setuptools.find_packages(),
    entry_points={
        "console_scripts": [
            "snakeline=snakeline.__main__:main",
        ],
    },
    python_requires=">=3.8",
)
