[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iso8583"
version = "0.1.0"
description = "ISO 8583 field encoders, message type indicators, message reports and EMV ICC data handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["iso8583", "payments", "emv", "icc", "bcd", "ebcdic", "ber-tlv", "card"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iso8583"]

[tool.pytest.ini_options]
addopts = "-ra"
