#!/usr/bin/python3
"""Multiprocessing."""
import math
from collections.abc import Callable
from multiprocessing import cpu_count
from typing import Any
from typing import TypeVar

from mpire.pool import WorkerPool
from tqdm import tqdm

from dobble_deck.utils.logger import logger

T = TypeVar('T')


def _batch_func(process_func: Callable[..., T],
                list_kwargs: list[dict[str, Any]]) -> list[T]:
    """Process a batch."""
    return [process_func(**kwargs) for kwargs in list_kwargs]


def multiprocess(process_func: Callable[..., T],
                 list_kwargs: list[dict[str, Any]],
                 tqdm_title: str | None = None,
                 n_jobs: int | None = None) -> list[T]:
    """Parallelize the process of a given function on a list of inputs.

    Results are returned in the same order as the inputs.
    """
    if tqdm_title is None:
        tqdm_title = process_func.__name__

    n_process = len(list_kwargs)
    if n_process == 0:
        return []

    if n_jobs is None:
        n_jobs = math.floor(0.8 * cpu_count())
    elif n_jobs < 0:
        n_jobs = cpu_count()

    n_jobs = max(1, min(n_jobs, cpu_count(), n_process))

    logger.info(f"Use {n_jobs} cpus out of {cpu_count()}")

    if n_jobs == 1:
        return [process_func(**kwargs)
                for kwargs in tqdm(list_kwargs, desc=tqdm_title)]

    # Chunk the list of arguments into N approximately equal batches
    batch_size = math.ceil(n_process / float(n_jobs))

    with WorkerPool(n_jobs=n_jobs) as pool:
        params = [(process_func, list_kwargs[i: i + batch_size])
                  for i in range(0, n_process, batch_size)]

        progress_bar_options = {"desc": tqdm_title, 'unit': "batch"}

        batches = pool.map(_batch_func, params,
                           progress_bar=True,
                           progress_bar_options=progress_bar_options)

    return [res for batch in batches for res in batch]
