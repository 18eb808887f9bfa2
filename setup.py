#!/usr/bin/env python3
"""
Setup script for StudyFlow

Install with:
    pip install -e .

With the test tooling:
    pip install -e ".[dev]"
"""

from setuptools import setup, find_packages, find_namespace_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = ""
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

# Backend dependencies
backend_requirements = [
    "fastapi>=0.110.0",
    "uvicorn[standard]>=0.27.0",
    "pydantic>=2.5.0",
    "pydantic-settings>=2.1.0",
]

# CLI dependencies
cli_requirements = [
    "httpx>=0.26.0",
    "rich>=13.7.0",
    "python-dotenv>=1.0.0",
]

setup(
    name="studyflow",
    version="1.0.0",
    description="StudyFlow - pomodoro timer, task planner and mind maps for students",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="StudyFlow Team",
    license="MIT",
    # The FastAPI service lives in backend/app but imports as `app`
    packages=(
        find_packages(include=["cli", "cli.*"])
        + find_namespace_packages(where="backend", include=["app", "app.*"])
    ),
    package_dir={"app": "backend/app"},
    python_requires=">=3.9",
    install_requires=backend_requirements + cli_requirements,
    extras_require={
        "cli": cli_requirements,
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "faker>=22.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "studyflow=cli.main:main",
            "sf=cli.main:main",  # Short alias
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Framework :: FastAPI",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Utilities",
    ],
    keywords="pomodoro productivity students fastapi cli",
)
