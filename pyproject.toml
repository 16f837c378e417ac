[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordersvc"
version = "0.1.0"
description = "Order service: a small HTTP API for creating and looking up customer orders backed by MySQL"
requires-python = ">=3.10"
keywords = ["orders", "ecommerce", "rest", "flask", "mysql", "domain-driven-design"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "flask>=2.2",
    "pymysql>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
ordersvc = "ordersvc.api:main"

[tool.hatch.build.targets.wheel]
packages = ["ordersvc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
