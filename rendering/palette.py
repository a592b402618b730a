"""Mass-based colour banding for stars."""

import numpy as np


def mass_bands(masses: np.ndarray, mass_range: tuple, num_bands: int) -> np.ndarray:
    """
    Band index for every mass.

    Masses are normalised over ``mass_range`` and split into ``num_bands``
    equal slices. Merged stars heavier than the range land in the last band.
    """
    lo, hi = mass_range
    span = hi - lo
    if span <= 0:
        t = np.zeros(len(masses), dtype=np.float64)
    else:
        t = (np.asarray(masses, dtype=np.float64) - lo) / span
    bands = np.floor(t * num_bands).astype(np.int64)
    return np.clip(bands, 0, num_bands - 1)


def mass_colors(masses: np.ndarray, mass_range: tuple, palette) -> np.ndarray:
    """RGB (float32, N x 3) per mass, picked from ``palette`` by band."""
    palette = np.asarray(palette, dtype=np.float32)
    if len(masses) == 0:
        return np.zeros((0, 3), dtype=np.float32)
    return palette[mass_bands(masses, mass_range, len(palette))]
