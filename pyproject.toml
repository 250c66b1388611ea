[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustlings-runner"
version = "4.3.0"
description = "Compile, test, verify and watch a course of small Rust exercises from the command line"
requires-python = ">=3.11"
keywords = ["rust", "exercises", "learning", "education", "course", "rustc", "clippy"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Software Development :: Compilers",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rustlings = "rustlings_runner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rustlings_runner"]

[tool.pytest.ini_options]
addopts = "-ra"
