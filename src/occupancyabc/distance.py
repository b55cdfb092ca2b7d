# -*- coding: utf-8 -*-
"""
@author: Patrick Laub and Pierre-O Goffard
"""
import numpy as np
from numba import float64, njit  # type: ignore

from .errors import DimensionMismatch


@njit(float64(float64[:], float64[:]), nogil=True)
def l1(x, y):
    return np.linalg.norm(x - y, 1)


@njit(float64(float64[:], float64[:]), nogil=True)
def l2(x, y):
    return np.linalg.norm(x - y, 2)


def check_dimensions(ssData, ssFake):
    if ssData.ndim != 1 or ssFake.ndim != 1:
        raise DimensionMismatch(
            f"Summary statistics must be vectors, got arrays with {ssData.ndim} and {ssFake.ndim} dimensions."
        )
    if ssData.shape != ssFake.shape:
        raise DimensionMismatch(
            f"Observed summary statistics have shape {ssData.shape} but the simulated ones have shape {ssFake.shape}."
        )


def compute_distance(distance, ssData, ssFake):
    """
    Compare the summary statistics of the observed and the fake data.

    Parameters
    ----------
    distance : function of two 1D float arrays returning a non-negative scalar
    ssData, ssFake : the summary statistic vectors to compare


    Returns
    -------
    scalar
    The distance between the two vectors
    """
    ssData = np.atleast_1d(np.asarray(ssData, dtype=np.float64))
    ssFake = np.atleast_1d(np.asarray(ssFake, dtype=np.float64))
    check_dimensions(ssData, ssFake)
    return distance(ssData, ssFake)
