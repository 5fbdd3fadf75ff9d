"""
Setup script for the trivia-session package.

Installs the trivia_session library and the ``trivia-session`` console
command.
"""

from setuptools import setup, find_packages

setup(
    name="trivia-session",
    version="1.0.0",
    description="Turn-based multiple-choice trivia sessions with an auditable event log",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "trivia-session=trivia_session.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
