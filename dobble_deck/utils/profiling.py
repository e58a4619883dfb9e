#!/usr/bin/python3
"""Profiling decorator."""
import inspect
import json
import os
import threading
import time
from collections.abc import Callable
from functools import wraps
from queue import Queue
from typing import Any

from dobble_deck.utils.logger import logger

PROFILE = False
PROFILING_T0: float = time.perf_counter()
PROFILING_EVENTS_QUEUE: Queue = Queue()  # [tuple[str, str, float, float]]


def set_profiling(enabled: bool) -> None:
    """Turn profiling on or off. Pending events are dropped when turning it off."""
    global PROFILE
    PROFILE = enabled
    if not enabled:
        while not PROFILING_EVENTS_QUEUE.empty():
            PROFILING_EVENTS_QUEUE.get()


def get_function_name(func: Callable[..., Any]) -> str:
    """Get module and function name."""
    module_name = func.__module__.split('.')[-1]
    if module_name == "__main__":
        module_name = os.path.basename(inspect.getfile(func))
    return f"{module_name}::{func.__name__}"


def push_profiling_event(name: str, start_time: float, end_time: float, thread_id: str | None = None) -> None:
    """Push profiling event."""
    if thread_id is None:
        thread_id = threading.current_thread().name
    # Queue is thread-safe
    PROFILING_EVENTS_QUEUE.put(
        (name, thread_id, start_time-PROFILING_T0, end_time-PROFILING_T0))


def profile(func: Callable[..., Any]) -> Callable[..., Any]:
    """Profiling decorator."""
    # Events pushed from a worker process stay in that process
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not PROFILE:
            return func(*args, **kwargs)

        start_time = time.perf_counter()
        retval = func(*args, **kwargs)
        end_time = time.perf_counter()

        push_profiling_event(get_function_name(func), start_time, end_time)
        return retval
    return wrapper


def export_profiling_events(output_path: str) -> None:
    """Dump profiling events into a JSON file that can be provided to the Chrome Tracing Viewer."""
    if not PROFILE:
        return

    events: list[dict[str, str | int | float]] = []
    while not PROFILING_EVENTS_QUEUE.empty():
        name, tid, t_begin, t_end = PROFILING_EVENTS_QUEUE.get()
        events.append({"name": name, "ph": "B",
                       "ts": t_begin*1e6, "tid": tid, "pid": 0})
        events.append({"name": name, "ph": "E",
                       "ts": t_end*1e6, "tid": tid, "pid": 0})

    dir_name = os.path.dirname(output_path)
    if dir_name != "":
        os.makedirs(dir_name, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as _f:
        json.dump({"traceEvents": events}, _f)

    logger.info(f"Open Chrome, type chrome://tracing/ and load the file located at {os.path.abspath(output_path)}")


class LogScopeTime:
    """Log the time spent inside a scope. Use as context `with LogScopeTime(name):`."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._start_time = 0.0

    def __enter__(self) -> None:
        self._start_time = time.perf_counter()
        logger.info(self._name)

    def __exit__(self, exception_type, exception_value, exception_traceback) -> None:
        end_time = time.perf_counter()
        logger.info(f"--- {(end_time - self._start_time): .2f} s ({self._name}) ---")
