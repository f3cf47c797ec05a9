[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinycrypt"
version = "0.1.0"
description = "Small pure-Python implementations of Base64, CRC-16, RC4, AES, MD5, big integers and textbook RSA"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "rc4", "md5", "crc16", "base64", "rsa", "bigint", "cryptography"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tinycrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
