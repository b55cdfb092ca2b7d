# -*- coding: utf-8 -*-
"""
@author: Pat and Pierre-O
"""
import numpy as np
import scipy.stats as st
from numba import float64, njit  # type: ignore


@njit(float64(float64[:], float64[:], float64[:], float64), nogil=True)
def uniform_prior_pdf(theta, lower, upper, normConst):
    for i in range(len(theta)):
        if theta[i] < lower[i] or theta[i] > upper[i]:
            return 0
    return normConst


class IndependentUniformPrior(object):
    def __init__(self, bounds, names=None):
        self.dim = len(bounds)
        self.lower = np.array([bound[0] for bound in bounds], dtype=np.float64)
        self.upper = np.array([bound[1] for bound in bounds], dtype=np.float64)
        self.widths = self.upper - self.lower
        self.names = names
        self.normConst = 1.0 / np.prod(self.widths)
        self.marginals = [st.uniform(self.lower[i], self.widths[i]) for i in range(self.dim)]

    def pdf(self, theta):
        theta = np.asarray(theta, dtype=np.float64).reshape(-1)
        return uniform_prior_pdf(theta, self.lower, self.upper, self.normConst)

    def sample(self, rg):
        return self.lower + self.widths * rg.uniform(size=self.dim)


class IndependentPrior(object):
    def __init__(self, marginals, names=None):
        self.marginals = marginals
        self.dim = len(marginals)
        self.names = names

    def pdf(self, theta):
        theta = np.asarray(theta).reshape(-1)
        return np.prod([marginal.pdf(theta_i) for marginal, theta_i in zip(self.marginals, theta)])

    def sample(self, rg):
        return np.array([marginal.rvs(random_state=rg) for marginal in self.marginals], dtype=np.float64).reshape(-1)


def truncated_normal(mean, std, lower=0.0, upper=1.0):
    """A normal distribution restricted to [lower, upper], frozen in scipy's style."""
    return st.truncnorm((lower - mean) / std, (upper - mean) / std, loc=mean, scale=std)


def occupancy_prior(ePrior, cPrior, mPrior):
    """
    Combine the priors for the extinction, colonization and measurement error
    rates into one prior over theta = (e, c, m).
    """
    return IndependentPrior([ePrior, cPrior, mPrior], names=("e", "c", "m"))
