[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microqr"
version = "4.0.2"
description = "Micro QR Code symbol construction: bit streams, specification tables, masking and module placement"
requires-python = ">=3.10"
dependencies = []
keywords = ["qrcode", "micro-qr", "barcode", "2d-symbology", "masking"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["microqr"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
