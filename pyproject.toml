[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeplay"
version = "1.0.0"
description = "A classic snake arcade game with selectable board sizes, unlockable skins and a persistent high score."
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
snakeplay = "snakeplay.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeplay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
