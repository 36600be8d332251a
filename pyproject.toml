[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ideapad-applet"
version = "0.1.0"
description = "Read and change Lenovo IdeaPad laptop settings exposed by the ideapad-laptop kernel driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["ideapad", "lenovo", "sysfs", "laptop", "battery", "fan", "applet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ideapad_applet_writer = "ideapad_applet.writer:main"

[tool.hatch.build.targets.wheel]
packages = ["ideapad_applet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 88

[tool.mypy]
python_version = "3.10"
strict = true
