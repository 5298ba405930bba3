[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardboard-pirates"
version = "1.0.0"
description = "A two-player local pirate ship duel: steer, fire cannons and sink your rival in a best-of-three match."
requires-python = ">=3.10"
keywords = ["game", "pygame", "arcade", "pirates", "two-player", "local-multiplayer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
cardboard-pirates = "cardboard_pirates.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cardboard_pirates"]

[tool.hatch.build.targets.sdist]
include = ["cardboard_pirates", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
