[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kolosal-agent"
version = "2.0.0"
description = "Agent building blocks: typed agent data, a function registry, built-in tools, a job queue and event delivery"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "agents",
    "multi-agent",
    "function-calling",
    "tools",
    "job-queue",
    "events",
    "pdf",
    "docx",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kolosal-launcher = "kolosal_agent.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["kolosal_agent"]

[tool.hatch.build.targets.sdist]
include = ["kolosal_agent", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
