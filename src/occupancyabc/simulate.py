# -*- coding: utf-8 -*-
"""
@author: Patrick Laub and Pierre-O Goffard
"""
import numpy as np
from numba import boolean, float64, njit  # type: ignore

from .errors import InvalidParameter


def check_probability(name, value):
    if not 0 <= value <= 1:
        raise InvalidParameter(f"The {name} rate must lie in [0, 1], got {value}.")


def check_length(n):
    if n < 1:
        raise InvalidParameter(f"The number of time steps must be positive, got {n}.")


@njit(boolean[:](float64, float64, float64[:]), nogil=True)
def two_state_markov_chain(e, c, us):
    # The site starts empty and each step consumes one of the uniforms.
    X = np.zeros(len(us) + 1, np.bool_)

    X_i = False
    for i in range(len(us)):
        if X_i:
            X_i = us[i] >= e
        else:
            X_i = us[i] < c
        X[i + 1] = X_i

    return X


@njit(boolean[:](boolean[:], float64, float64[:]), nogil=True)
def false_negatives(state, m, us):
    measured = np.zeros(len(state), np.bool_)
    for i in range(len(state)):
        measured[i] = state[i] and us[i] >= m
    return measured


def simulate_true_state(rg, e, c, n=200):
    """
    Simulate the presence (True) or absence (False) of a species at a site
    over n time steps. The site is empty at the first step, an occupied site
    goes extinct with probability e, and an empty site is colonised with
    probability c.
    """
    check_probability("extinction", e)
    check_probability("colonization", c)
    check_length(n)

    return two_state_markov_chain(float(e), float(c), rg.random(n - 1))


def simulate_measured_state(rg, state, m):
    """
    Apply measurement error to a true state sequence. Each presence is missed
    with probability m, whereas an absence is never recorded as a presence.
    """
    check_probability("measurement error", m)
    state = np.array(state, dtype=np.bool_)

    return false_negatives(state, float(m), rg.random(len(state)))


def simulate(rg, e, c, m, n=200):
    state = simulate_true_state(rg, e, c, n)
    return simulate_measured_state(rg, state, m)


def simulate_occupancy_model(rg, theta, n=200):
    e, c, m = theta
    return simulate(rg, e, c, m, n)
