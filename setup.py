"""Setup for Pom Pilot.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,  # Replace with .icns path when a proper icon exists
    "plist": {
        "CFBundleName": "Pom Pilot",
        "CFBundleDisplayName": "Pom Pilot",
        "CFBundleIdentifier": "com.pompilot.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="pompilot",
    version="0.1.0",
    description="Desktop Pomodoro timer",
    packages=find_packages(include=["pompilot", "pompilot.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "loguru>=0.7",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "gui_scripts": ["pompilot = pompilot.__main__:main"],
    },
    **py2app_kwargs,
)
