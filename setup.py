"""Setup configuration for Diamonds."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="diamonds",
    version="0.1.0",
    description="Diamonds - per-project color codes and links in the terminal",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Diamonds Team",
    python_requires=">=3.8",
    packages=find_packages(include=["common", "store", "ui_service"]),
    py_modules=["cli"],
    install_requires=[
        "rich>=13.0.0",
        "pyperclip>=1.8.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "diamonds=cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Utilities",
    ],
)
