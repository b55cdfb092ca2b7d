import collections
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .errors import EmptyPosteriorError

Parameters = collections.namedtuple("Parameters", ["e", "c", "m"])

PosteriorSummary = collections.namedtuple(
    "PosteriorSummary", ["names", "mean", "std", "lower", "upper", "numAccepted"]
)


class Population:
    """
    A Population object stores a collection of samples drawn during
    rejection ABC. Each sample is a potential theta parameter which
    could explain the observed data, together with the summary statistics
    of its fake data and the distance of those to the observed data.
    The samples are kept in the order they were drawn.
    """

    def __init__(self, samples, sumstats, dists, names: Optional[Sequence[str]] = None) -> None:
        self.samples = self._as_matrix(samples)
        self.sumstats = self._as_matrix(sumstats)
        self.dists = np.array(dists, dtype=np.float64).reshape(-1)
        self.names = tuple(names) if names is not None else None

    @staticmethod
    def _as_matrix(rows) -> np.ndarray:
        if isinstance(rows, list):
            if len(rows) == 0:
                return np.empty((0, 0), dtype=np.float64)
            return np.vstack(rows).astype(np.float64)
        return np.array(rows, dtype=np.float64)

    def size(self) -> int:
        return len(self.dists)

    def dim(self) -> int:
        return self.samples.shape[1] if self.samples.ndim == 2 else 0

    def parameters(self, i: int) -> Union[Parameters, Tuple[float, ...]]:
        """
        Return the i-th sample, as a Parameters tuple when the samples
        are (e, c, m) triples.
        """
        theta = tuple(float(x) for x in self.samples[i])
        if len(theta) == 3:
            return Parameters(*theta)
        return theta

    def subpopulation(self, keep) -> "Population":
        """
        Create a subpopulation of samples from this population where we keep
        only the samples at the locations of True in the supplied boolean vector.
        """
        keep = np.asarray(keep, dtype=bool)
        if self.size() == 0:
            return self.clone()
        return Population(self.samples[keep, :], self.sumstats[keep, :], self.dists[keep], self.names)

    def below(self, eps: float) -> "Population":
        return self.subpopulation(self.dists < eps)

    def clone(self) -> "Population":
        """
        Create a deep copy of this population object.
        """
        return Population(self.samples.copy(), self.sumstats.copy(), self.dists.copy(), self.names)

    def combine(self, other: "Population") -> "Population":
        """
        Combine this population with another to create one larger population.
        The samples of the other population are placed after this one's.
        """
        if self.size() == 0:
            return other.clone()
        if other.size() == 0:
            return self.clone()

        samples = np.concatenate([self.samples, other.samples], axis=0)
        sumstats = np.concatenate([self.sumstats, other.sumstats], axis=0)
        dists = np.concatenate([self.dists, other.dists])
        return Population(samples, sumstats, dists, self.names)

    def mean(self) -> np.ndarray:
        return self.samples.mean(axis=0)

    def std(self) -> np.ndarray:
        return self.samples.std(axis=0)

    def quantile(self, q: float) -> np.ndarray:
        return np.quantile(self.samples, q, axis=0)

    def summarise(self, level: float = 0.95) -> PosteriorSummary:
        """
        Summarise the samples by their means, standard deviations,
        and central credible intervals at the given level.
        """
        if self.size() == 0:
            raise EmptyPosteriorError("Cannot summarise a population without any samples.")

        alpha = (1 - level) / 2
        names = self.names if self.names is not None else tuple(f"θ{i}" for i in range(self.dim()))
        return PosteriorSummary(
            names, self.mean(), self.std(), self.quantile(alpha), self.quantile(1 - alpha), self.size()
        )
