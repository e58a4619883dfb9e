#!/usr/bin/python3
"""Numpy helpers for type annotations."""

from typing import Any
from typing import TypeAlias

import numpy as np

NpIntArrayType: TypeAlias = np.ndarray[Any, np.dtype[np.integer[Any]]]
NpBoolArrayType: TypeAlias = np.ndarray[Any, np.dtype[np.bool_]]
