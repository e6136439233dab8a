[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amendedit"
version = "0.1.0"
description = "A small plain-text editor that loads files in the background and shows progress while it reads"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "tkinter", "notepad"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
amend-editor = "amendedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["amendedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
