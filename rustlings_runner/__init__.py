"""Compile, test, verify and watch a course of small Rust exercises."""

__version__ = "4.3.0"