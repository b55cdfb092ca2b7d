import collections
from typing import Callable, Optional

import numpy as np

from .errors import InvalidParameter
from .population import Population
from .sumstats import make_sumstats


def validate_obs(obs) -> np.ndarray:
    obs = np.asarray(obs, dtype=np.bool_).reshape(-1)
    if len(obs) == 0:
        raise InvalidParameter("The observed data must contain at least one time step.")
    return obs


def validate_num_samples(numSamples) -> int:
    if isinstance(numSamples, (bool, np.bool_)) or not isinstance(numSamples, (int, np.integer)):
        raise InvalidParameter(f"The number of samples must be an integer, got {numSamples!r}.")
    if numSamples < 1:
        raise InvalidParameter(f"The number of samples must be positive, got {numSamples}.")
    return int(numSamples)


def validate_batch_size(batchSize: Optional[int], numSamples: int, numProcs: int) -> int:
    if numProcs == 0:
        raise InvalidParameter("The number of processes cannot be zero.")
    if batchSize is None:
        # A handful of batches per worker, so the progress bar has something to show.
        batchSize = max(1, int(np.ceil(numSamples / 10)))
    if batchSize < 1:
        raise InvalidParameter(f"The batch size must be positive, got {batchSize}.")
    return int(batchSize)


def validate_sumstats(sumstats) -> Callable[[np.ndarray], np.ndarray]:
    # Either an ordered list of statistics, or an already bound sumstats function.
    if isinstance(sumstats, collections.abc.Iterable):
        return make_sumstats(sumstats)
    if not callable(sumstats):
        raise InvalidParameter("The summary statistics must be a function or a list of functions.")
    return sumstats


def print_header(numSamples: int, T: int, numSumStats: int, simulationLength: int, numProcs: int):
    potentialPlural = "processes" if numProcs != 1 else "process"
    print(
        f"Starting rejection ABC with {numSamples} samples, observed data of length "
        + f"{T} (~> {numSumStats}) and simulations of length {simulationLength} on {numProcs} {potentialPlural}."
    )


def print_update(numSims: int, numSamples: int, elapsed: float, pool: Population, eps: float):
    """
    After each batch of simulations, print out how many samples have been
    drawn so far and how many of them fall below the threshold.
    """
    numAccepted = int(np.sum(pool.dists < eps))
    update = f"Finished {numSims} of {numSamples} simulations, "
    elapsedMins = np.round(elapsed / 60, 1)
    update += f"time = {np.round(elapsed)}s / {elapsedMins}m, "
    update += f"eps = {eps:.4f}, # accepted = {numAccepted}"
    if pool.size() > 0:
        update += f", min dist = {np.min(pool.dists):.4f}"
    print(update)
