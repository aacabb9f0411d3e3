import numpy as np

from numpy import ndarray as ndarr
from numba import njit, prange

EUCLIDEAN = 0
QUADRATIC = 1
COSINE = 2


@njit(cache=True)
def quadratic_distance(first: ndarr, second: ndarr) -> float:
    diff_vector = first - second
    return np.sum(diff_vector * diff_vector)


@njit(cache=True)
def euclidean_distance(first: ndarr, second: ndarr) -> float:
    return np.sqrt(quadratic_distance(first, second))


@njit(cache=True)
def cosine_distance(first: ndarr, second: ndarr) -> float:
    norms = np.sqrt(np.sum(first * first)) * np.sqrt(np.sum(second * second))
    if norms == 0:
        return 0.0
    else:
        return 1.0 - np.sum(first * second) / norms


@njit(cache=True)
def distance(first: ndarr, second: ndarr, measure: int) -> float:
    if measure == QUADRATIC:
        return quadratic_distance(first, second)
    elif measure == COSINE:
        return cosine_distance(first, second)
    else:
        return euclidean_distance(first, second)


@njit(cache=True, nogil=True, parallel=True)
def pairwise_distances(data: ndarr, measure: int) -> ndarr:
    distances = np.zeros((data.shape[0], data.shape[0]))

    for row in prange(data.shape[0]):
        for column in range(row + 1, data.shape[0]):
            distances[row, column] = distance(data[row], data[column], measure)
            distances[column, row] = distances[row, column]

    return distances
