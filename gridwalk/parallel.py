import logging
from functools import reduce
from typing import Callable, Iterable, TypeVar

from joblib import Parallel, delayed, effective_n_jobs

from gridwalk.errors import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def map_reduce(
    func: Callable[[T], R],
    items: Iterable[T],
    combine: Callable[[R, R], R],
    n_jobs: int = 1,
) -> R:
    """
    Applies func to every item on worker threads and folds the results with combine.

    Workers share no mutable state: each call reads only its own item and
    whatever immutable data func closes over. combine must be associative and
    is applied once all workers have finished.
    """
    work = list(items)
    if not work:
        raise ConfigurationError("map_reduce needs at least one item")

    n_workers = effective_n_jobs(n_jobs)
    logger.debug("Dispatching %d tasks to %d workers", len(work), n_workers)

    if n_workers == 1:
        results = [func(item) for item in work]
    else:
        results = Parallel(n_jobs=n_workers, prefer="threads")(delayed(func)(item) for item in work)
    return reduce(combine, results)
