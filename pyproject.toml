[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashcrack"
version = "0.1.0"
description = "Distributed MD5 brute-force service: a manager that splits work across HTTP workers"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "brute-force", "distributed", "manager", "worker", "wsgi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hashcrack-manager = "hashcrack.manager.app:main"
hashcrack-worker = "hashcrack.worker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hashcrack"]

[tool.hatch.build.targets.sdist]
include = ["hashcrack", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
