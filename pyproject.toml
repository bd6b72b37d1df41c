[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edf"
version = "0.1.0"
description = "Event-driven framework: active objects, state machines, publish/subscribe and tick timers"
requires-python = ">=3.10"
dependencies = []
keywords = ["event-driven", "active-object", "state-machine", "publish-subscribe", "embedded"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edf-hello = "edf.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["edf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
