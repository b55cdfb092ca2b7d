# -*- coding: utf-8 -*-
"""
@author: Patrick Laub and Pierre-O Goffard
"""
import collections


class InvalidParameter(ValueError):
    """A model or sampler setting lies outside of its allowed range."""


class DimensionMismatch(ValueError):
    """The simulated and observed summary statistics have different shapes."""


class EmptyPosteriorError(RuntimeError):
    """An operation needed at least one accepted sample but got none."""


# Returned in place of posterior estimates when no sample was accepted.
EmptyPosterior = collections.namedtuple("EmptyPosterior", ["eps", "numSamples", "minDist"])
