#!/usr/bin/python3
"""Asserts."""
import os
from collections.abc import Sized


def assert_len(seq: Sized, size: int, msg: str | None = None) -> None:
    """Assert Python list has expected length."""
    default = f"Expect sequence of length {size}. Got length {len(seq)}."
    assert len(seq) == size, default if msg is None else f"{msg}. {default}"


def assert_isfile(path: str) -> None:
    """Assert file exists."""
    assert os.path.isfile(path), f"File {path} doesn't exist"
