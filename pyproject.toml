[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gostudy"
version = "0.1.0"
description = "Classic algorithms, design patterns and small service building blocks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "heap",
    "linked-list",
    "design-patterns",
    "factory",
    "builder",
    "singleton",
    "pipe-filter",
    "framing",
    "wsgi",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gostudy-route-errors = "gostudy.route_errors:main"
gostudy-employee-service = "gostudy.employee_service:main"
gostudy-word-file = "gostudy.word_file:main"

[tool.hatch.build.targets.wheel]
packages = ["gostudy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
