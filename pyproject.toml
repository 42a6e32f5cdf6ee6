[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "malcolm"
version = "0.1.0"
description = "ARP reply spoofing tool for lab networks, with small text, memory and formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["arp", "spoofing", "networking", "raw-socket", "ethernet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
malcolm = "malcolm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["malcolm"]

[tool.pytest.ini_options]
addopts = "-ra"
