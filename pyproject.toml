[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledfx"
version = "0.1.0"
description = "RTSP, SDP, DAAP and DACP building blocks for AirPlay audio streams, plus UDP LED output for WLED devices"
requires-python = ">=3.10"
keywords = ["airplay", "raop", "rtsp", "sdp", "daap", "dacp", "wled", "led", "audio"]
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
    "Topic :: Multimedia :: Sound/Audio",
]
dependencies = [
    "requests",
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["ledfx"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
