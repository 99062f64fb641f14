[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leptographic"
version = "0.1.0"
description = "Accessible, Tailwind-styled UI components (checkbox, switch, progress, separator) rendered to HTML, with state hooks and a demo server"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "components", "html", "accessibility", "aria", "tailwind", "checkbox", "switch", "progress", "separator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leptographic = "leptographic.server:main"

[tool.hatch.build.targets.wheel]
packages = ["leptographic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
