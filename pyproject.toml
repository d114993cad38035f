[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hubhooks"
version = "0.1.0"
description = "Client for managing HubSpot app webhook settings and event subscriptions."
requires-python = ">=3.11"
dependencies = []
keywords = ["hubspot", "webhooks", "subscriptions", "api", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hubhooks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
