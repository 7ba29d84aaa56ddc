[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "megjoni"
version = "0.1.0"
description = "Server-rendered storefront pages for a second-hand clothing shop, with a small WSGI server"
requires-python = ">=3.10"
dependencies = []
keywords = ["storefront", "shop", "second-hand", "html", "wsgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
megjoni = "megjoni.server:main"

[tool.hatch.build.targets.wheel]
packages = ["megjoni"]

[tool.pytest.ini_options]
addopts = "-ra"
