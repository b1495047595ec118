[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syncdemos"
version = "0.1.0"
description = "Small, runnable demonstrations of thread synchronisation primitives and a tensor axis swap"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threading",
    "concurrency",
    "mutex",
    "semaphore",
    "spinlock",
    "compare-and-swap",
    "test-and-set",
    "readers-writer-lock",
    "producer-consumer",
    "condition-variable",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syncdemos-atomics = "syncdemos.atomics:main"
syncdemos-locks = "syncdemos.locks:main"
syncdemos-tensor = "syncdemos.tensor:main"
syncdemos-producer-consumer = "syncdemos.producer_consumer:main"

[tool.hatch.build.targets.wheel]
packages = ["syncdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
