"""
Jenks natural breaks classification.

Arranges a dataset into classes by minimizing each class's deviation from its own
mean, using iterative reassignment to the nearest class mean.
"""

__all__ = ['JenksClassifier', 'jenks_breaks']

from numbers import Integral
from typing import Iterable, List

import numpy as np

from geomeasures.utils.mixins import LoggingMixin


class JenksClassifier(LoggingMixin):
    """
    Computes Jenks natural breaks.

    Args:
        max_iterations: (Default 1000)
            Upper bound on reassignment passes. Refinement stops early, with a one-time
            warning, if the class assignments are still changing at this point.
    """

    def __init__(self, max_iterations: int = 1000):
        super().__init__()
        if max_iterations < 1:
            raise ValueError(f'max_iterations must be at least 1, got {max_iterations}')

        self.max_iterations = max_iterations

    @staticmethod
    def _initial_means(numbers: np.ndarray, num_classes: int) -> np.ndarray:
        """Seeds one mean per class, spaced evenly through the sorted data"""
        freq = len(numbers) // num_classes
        positions = np.arange(1, num_classes + 1) * freq - freq // 2
        return numbers[positions - 1].copy()

    @staticmethod
    def _nearest_class(numbers: np.ndarray, means: np.ndarray) -> np.ndarray:
        # argmin keeps the lowest-numbered class on ties
        return np.argmin(np.abs(numbers[:, None] - means[None, :]), axis=1)

    @staticmethod
    def _class_means(numbers: np.ndarray, assigned: np.ndarray, num_classes: int) -> np.ndarray:
        """Mean of each class; empty classes collapse to zero"""
        sums = np.bincount(assigned, weights=numbers, minlength=num_classes)
        counts = np.bincount(assigned, minlength=num_classes)
        return np.divide(
            sums, counts,
            out=np.zeros(num_classes, dtype=float),
            where=counts > 0
        )

    def breaks(self, data: Iterable[float], num_classes: int = 7) -> List[float]:
        """
        Calculate the class breaks for a dataset.

        Args:
            data:
                The values to classify, in any order

            num_classes: (Default 7)
                The number of classes requested. Capped at the number of distinct
                values in the data.

        Returns:
            Ascending break values: the minimum, one midpoint between each pair of
            adjacent classes, and the maximum
        """
        if isinstance(num_classes, bool) or not isinstance(num_classes, Integral):
            raise ValueError(f'num_classes must be an integer, got {num_classes!r}')

        if num_classes < 1:
            raise ValueError(f'num_classes must be at least 1, got {num_classes}')

        numbers = np.sort(np.asarray(list(data), dtype=float))
        if numbers.size == 0:
            raise ValueError('Cannot classify an empty dataset.')

        if not np.all(np.isfinite(numbers)):
            raise ValueError('Data must not contain NaN or infinite values.')

        num_classes = min(num_classes, len(np.unique(numbers)))

        means = self._initial_means(numbers, num_classes)
        assigned = np.full(len(numbers), -1)

        for _ in range(self.max_iterations):
            reassigned = self._nearest_class(numbers, means)
            if np.array_equal(reassigned, assigned):
                break

            assigned = reassigned
            means = self._class_means(numbers, assigned, num_classes)
        else:
            self.warn_once(
                'Jenks classification did not settle within %d iterations; '
                'returning the last assignment.',
                self.max_iterations
            )

        boundaries = np.flatnonzero(assigned[1:] != assigned[:-1]) + 1
        midpoints = (numbers[boundaries] + numbers[boundaries - 1]) / 2

        return [float(numbers[0]), *map(float, midpoints), float(numbers[-1])]


def jenks_breaks(data: Iterable[float], num_classes: int = 7) -> List[float]:
    """
    Calculate Jenks natural breaks for a dataset.

    Convenience wrapper around JenksClassifier().breaks()

    Args:
        data:
            The values to classify

        num_classes: (Default 7)
            The number of classes requested

    Returns:
        Ascending break values, starting with the minimum and ending with the maximum
    """
    return JenksClassifier().breaks(data, num_classes)
