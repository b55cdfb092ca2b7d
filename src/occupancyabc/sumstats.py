# -*- coding: utf-8 -*-
"""
Summary statistics of presence/absence sequences.

Every statistic maps a boolean sequence to a single real number, so any
ordered list of them can be used to reduce simulated and observed data to
vectors which are then compared by a distance function.
"""
import numpy as np


def as_sequence(seq):
    seq = np.asarray(seq, dtype=np.bool_).reshape(-1)
    if len(seq) == 0:
        raise ValueError("Cannot summarise an empty sequence")
    return seq


def occupancy(seq):
    """Fraction of the time steps where the species was present."""
    seq = as_sequence(seq)
    return np.sum(seq) / len(seq)


def transition_rate(seq):
    """Fraction of consecutive pairs of time steps where the state changed."""
    seq = as_sequence(seq)
    if len(seq) < 2:
        return 0.0
    return np.sum(seq[1:] != seq[:-1]) / (len(seq) - 1)


def colonizations(seq):
    seq = as_sequence(seq)
    return float(np.sum(~seq[:-1] & seq[1:]))


def extinctions(seq):
    seq = as_sequence(seq)
    return float(np.sum(seq[:-1] & ~seq[1:]))


DEFAULT_SUMSTATS = (occupancy, transition_rate)


def summarize(seq, stats=DEFAULT_SUMSTATS):
    """
    Apply each of the summary statistics to the sequence.

    Parameters
    ----------
    seq : sequence of booleans
    stats : ordered list of functions taking a sequence to a real number

    Returns
    -------
    ndarray
    The statistics in the same order as they were supplied.
    """
    seq = as_sequence(seq)
    return np.array([stat(seq) for stat in stats], dtype=np.float64)


def make_sumstats(stats=DEFAULT_SUMSTATS):
    stats = tuple(stats)

    def sumstats(seq):
        return summarize(seq, stats)

    sumstats.stats = stats
    return sumstats
