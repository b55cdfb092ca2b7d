# -*- coding: utf-8 -*-
"""
@author: Patrick Laub and Pierre-O Goffard
"""
__version__ = "0.1.0"

from .data import OBSERVED_PRESENCE
from .distance import compute_distance, l1, l2
from .errors import DimensionMismatch, EmptyPosterior, EmptyPosteriorError, InvalidParameter
from .population import Parameters, Population, PosteriorSummary
from .prior import IndependentPrior, IndependentUniformPrior, occupancy_prior, truncated_normal
from .rejection import ABCFit, Model, abc_rejection, predict_occupancy
from .simulate import simulate, simulate_measured_state, simulate_occupancy_model, simulate_true_state
from .sumstats import (
    DEFAULT_SUMSTATS,
    colonizations,
    extinctions,
    make_sumstats,
    occupancy,
    summarize,
    transition_rate,
)
