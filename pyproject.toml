[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "offloadkit"
version = "0.1.0"
description = "Pipeline descriptions, device capabilities, color and image comparison, and DirectX/Metal resource layout planning for GPU compute shader tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["gpu", "shader", "testing", "pipeline", "color", "image-comparison", "directx", "metal"]
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
    "Topic :: Software Development :: Testing",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["offloadkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
