[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portable-dialogs"
version = "1.0.0"
description = "File, message and notification dialogs shown through the desktop's own helper programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["dialog", "file dialog", "message box", "notification", "zenity", "kdialog", "osascript"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
portable-dialogs-demo = "portable_dialogs.demo:main"
portable-dialogs-kill-demo = "portable_dialogs.killdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["portable_dialogs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
