[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vncproto"
version = "0.10.0"
description = "Building blocks for RFB (VNC) servers: protocol structures, security handshakes, crypto helpers and damage tracking"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["vnc", "rfb", "remote-desktop", "protocol", "vencrypt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vncproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
