# -*- coding: utf-8 -*-
"""
@author: Patrick Laub and Pierre-O Goffard
"""
from __future__ import annotations

from dataclasses import dataclass
from time import time
from typing import Callable, Optional, Union

import joblib  # type: ignore
import numpy as np
import numpy.random as rnd
from numpy.random import SeedSequence, default_rng
from tqdm.auto import tqdm  # type: ignore

from .distance import compute_distance, l2
from .errors import EmptyPosterior, EmptyPosteriorError
from .population import Population, PosteriorSummary
from .prior import IndependentPrior, IndependentUniformPrior
from .simulate import simulate_occupancy_model, simulate_true_state
from .sumstats import DEFAULT_SUMSTATS, occupancy
from .utils import (
    print_header,
    print_update,
    validate_batch_size,
    validate_num_samples,
    validate_obs,
    validate_sumstats,
)

Prior = Union[IndependentPrior, IndependentUniformPrior]

# Create a type alias for the simulator method
Simulator = Callable[[rnd.Generator, np.ndarray, int], np.ndarray]


@dataclass
class SamplingConfig:
    sumstats: Callable[[np.ndarray], np.ndarray]
    distance: Callable[[np.ndarray, np.ndarray], float]
    ssData: np.ndarray
    simulationLength: int


class Model:
    def __init__(self, simulator: Simulator, prior: Prior):
        self.simulator = simulator
        self.prior = prior

    def __call__(self, theta, rg, n):
        return self.simulator(rg, theta, n)


def default_prior() -> IndependentUniformPrior:
    return IndependentUniformPrior([(0, 1), (0, 1), (0, 1)], ("e", "c", "m"))


def sample_one(seed: int, model: Model, opts: SamplingConfig) -> tuple[np.ndarray, np.ndarray, float]:
    rg = default_rng(seed)

    theta = model.prior.sample(rg)
    xFake = model(theta, rg, opts.simulationLength)
    ssFake = np.atleast_1d(np.asarray(opts.sumstats(xFake), dtype=np.float64))
    dist = compute_distance(opts.distance, opts.ssData, ssFake)

    return theta, ssFake, dist


def sample_batch(seeds, parallel, model: Model, opts: SamplingConfig, names) -> Population:
    sample = joblib.delayed(sample_one)
    results = parallel(sample(seed, model, opts) for seed in seeds)

    samples = [theta for theta, _, _ in results]
    sumstats = [ssFake for _, ssFake, _ in results]
    dists = [dist for _, _, dist in results]

    return Population(samples, sumstats, dists, names)


class ABCFit:
    """
    The outcome of a rejection ABC run. The pool holds every sample that was
    simulated, and the posterior is the part of the pool whose distance to the
    observed data fell below the threshold eps.
    """

    def __init__(self, pool: Population, eps: float, ssData: np.ndarray, numSamples: Optional[int] = None):
        self.pool = pool
        self.eps = eps
        self.ssData = ssData
        self.numSamples = numSamples if numSamples is not None else pool.size()
        self.posterior = pool.below(eps)

    @property
    def accepted(self) -> bool:
        return self.posterior.size() > 0

    @property
    def samples(self) -> np.ndarray:
        return self.posterior.samples

    @property
    def dists(self) -> np.ndarray:
        return self.posterior.dists

    def accepted_indices(self) -> np.ndarray:
        return np.flatnonzero(self.pool.dists < self.eps)

    def acceptance_rate(self) -> float:
        if self.pool.size() == 0:
            return 0.0
        return self.posterior.size() / self.pool.size()

    def with_threshold(self, eps: float) -> "ABCFit":
        """
        Filter the same pool of simulations with a different threshold,
        without running any new simulations.
        """
        return ABCFit(self.pool, eps, self.ssData, self.numSamples)

    def estimates(self, level: float = 0.95) -> Union[PosteriorSummary, EmptyPosterior]:
        if not self.accepted:
            minDist = float(np.min(self.pool.dists)) if self.pool.size() > 0 else None
            return EmptyPosterior(self.eps, self.pool.size(), minDist)
        return self.posterior.summarise(level)


def abc_rejection(
    numSamples: int,
    obs,
    prior: Optional[Prior] = None,
    simulator: Optional[Simulator] = None,
    sumstats=DEFAULT_SUMSTATS,
    distance=l2,
    eps: float = 0.02,
    simulationLength: int = 200,
    seed: Optional[int] = None,
    numProcs: int = 1,
    batchSize: Optional[int] = None,
    verbose: bool = False,
    showProgressBar: bool = False,
) -> ABCFit:
    """
    Fit the parameters of a simulation model to observed data by rejection ABC.

    Parameters
    ----------
    numSamples : the number of draws from the prior to simulate
    obs : the observed presence/absence sequence
    prior : a prior over theta, defaults to independent U(0, 1) priors on (e, c, m)
    simulator : a function simulator(rg, theta, n) returning a fake dataset of
        length n, defaults to the colonization/extinction/measurement error model
    sumstats : an ordered list of summary statistics (or a single function
        mapping a dataset to a vector of summary statistics)
    distance : a function comparing two summary statistic vectors
    eps : samples whose distance is strictly less than eps are accepted
    simulationLength : the number of time steps in each simulation
    seed : the seed for the random number generators
    numProcs : the number of processes used to run the simulations


    Returns
    -------
    ABCFit
    The full pool of simulations and the accepted subset of them
    """
    numSamples = validate_num_samples(numSamples)
    obs = validate_obs(obs)
    batchSize = validate_batch_size(batchSize, numSamples, numProcs)
    sumstats = validate_sumstats(sumstats)

    if prior is None:
        prior = default_prior()
    if simulator is None:
        simulator = simulate_occupancy_model

    model = Model(simulator, prior)
    names = getattr(prior, "names", None)

    ssData = np.atleast_1d(np.asarray(sumstats(obs), dtype=np.float64))

    opts = SamplingConfig(sumstats, distance, ssData, simulationLength)

    # Each simulation gets its own stream of random numbers, so that
    # the results do not depend on the number of processes or batches.
    sg = SeedSequence(seed)
    seeds = [s.generate_state(1)[0] for s in sg.spawn(numSamples)]

    if verbose:
        print_header(numSamples, len(obs), len(ssData), simulationLength, numProcs)

    if showProgressBar:
        bar = tqdm(total=numSamples, position=0, leave=False)

    pool = Population([], [], [], names)
    startTime = time()

    with joblib.Parallel(n_jobs=numProcs) as parallel:
        for start in range(0, numSamples, batchSize):
            batchSeeds = seeds[start : start + batchSize]

            try:
                batch = sample_batch(batchSeeds, parallel, model, opts, names)
            except KeyboardInterrupt:
                if pool.size() == 0:
                    print("A running occupancyabc.abc_rejection(..) call was cancelled.")
                    raise
                else:
                    print(
                        "A running occupancyabc.abc_rejection(..) call was cancelled, "
                        + f"the {pool.size()} completed simulations have been returned."
                    )
                    break

            pool = pool.combine(batch)

            if verbose:
                print_update(pool.size(), numSamples, time() - startTime, pool, eps)

            if showProgressBar:
                bar.update(len(batchSeeds))

    if showProgressBar:
        bar.close()

    return ABCFit(pool, eps, ssData, numSamples)


def predict_occupancy(rg: rnd.Generator, fit: ABCFit, n: int = 200) -> np.ndarray:
    """
    Simulate the true (noise-free) state sequence once for every accepted
    (e, c) pair, and return the occupancy of each of these sequences.
    """
    if not fit.accepted:
        raise EmptyPosteriorError(
            f"No samples were accepted at eps = {fit.eps}, so there is nothing to predict from."
        )

    occupancies = np.empty(fit.posterior.size(), np.float64)
    for i in range(fit.posterior.size()):
        e, c = fit.samples[i, 0], fit.samples[i, 1]
        occupancies[i] = occupancy(simulate_true_state(rg, e, c, n))

    return occupancies
