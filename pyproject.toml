[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockhost"
version = "0.1.0"
description = "Building blocks for a Minecraft Java Edition protocol server: byte buffers, VarInts, NBT, packet framing and login helpers"
requires-python = ">=3.11"
keywords = ["minecraft", "protocol", "nbt", "varint", "server"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["blockhost"]

[tool.pytest.ini_options]
addopts = "-ra"
