"""
Reduce sampled pixels to a short list of dominant colors, most frequent first.
"""

import numpy as np
from sklearn.cluster import KMeans

from .color import rgb_to_hex
from .config import (
    CANDIDATE_FACTOR,
    DEFAULT_NUM_COLORS,
    FALLBACK_COLOR,
    QUANTIZE_PRECISION,
)

METHODS = ("bucket", "kmeans")


def _average_hex(sums, counts):
    # Round half up, matching rgb_to_hex
    averages = np.floor(sums / counts[:, None] + 0.5).astype(int)
    return [rgb_to_hex(*avg) for avg in averages]


def bucket_colors(pixels, n_candidates, precision=QUANTIZE_PRECISION):
    """Group pixels by coarsened RGB and average each group.

    Buckets are ranked by population; equal populations keep the order in
    which the bucket was first seen.
    """
    keys = pixels // precision
    _, first_seen, inverse, counts = np.unique(
        keys, axis=0, return_index=True, return_inverse=True, return_counts=True
    )
    inverse = inverse.reshape(-1)

    sums = np.zeros((len(counts), 3), dtype=np.float64)
    np.add.at(sums, inverse, pixels)

    order = np.lexsort((first_seen, -counts))[:n_candidates]
    return _average_hex(sums[order], counts[order])


def kmeans_colors(pixels, n_candidates):
    """Cluster pixels with k-means and average each cluster."""
    distinct = len(np.unique(pixels, axis=0))
    n_clusters = min(n_candidates, distinct)

    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    labels = kmeans.fit_predict(pixels)

    counts = np.bincount(labels, minlength=n_clusters)
    sums = np.zeros((n_clusters, 3), dtype=np.float64)
    np.add.at(sums, labels, pixels)

    populated = np.flatnonzero(counts)
    order = populated[np.argsort(-counts[populated], kind="stable")]
    return _average_hex(sums[order], counts[order])


def quantize_colors(
    samples,
    num_colors=DEFAULT_NUM_COLORS,
    precision=QUANTIZE_PRECISION,
    method="bucket",
):
    """Return up to 2 * num_colors dominant hex colors, most frequent first.

    Each color is the average of its member samples rather than the bucket
    anchor. With no samples the result is [FALLBACK_COLOR], never empty.

    Args:
        samples: (n, 3) array-like of RGB samples
        num_colors: Desired palette size
        precision: Bucket width per channel ("bucket" method only)
        method: "bucket" or "kmeans"
    """
    if method not in METHODS:
        raise ValueError(f"Unknown quantization method: {method!r}")
    if num_colors < 1:
        raise ValueError("num_colors must be positive")
    if precision < 1:
        raise ValueError("precision must be positive")

    pixels = np.asarray(samples, dtype=np.int64).reshape(-1, 3)
    if len(pixels) == 0:
        return [FALLBACK_COLOR]

    n_candidates = num_colors * CANDIDATE_FACTOR
    if method == "kmeans":
        return kmeans_colors(pixels, n_candidates)
    return bucket_colors(pixels, n_candidates, precision)
