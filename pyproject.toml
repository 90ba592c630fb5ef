[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunpacket"
version = "0.1.0"
description = "Mutable IPv4, IPv6, TCP, UDP and ICMP packet views with Internet checksums, plus sockaddr records, address enumerations and netsh DNS helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ip", "ipv4", "ipv6", "tcp", "udp", "icmp", "checksum", "tun", "packet", "netsh"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tunpacket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
