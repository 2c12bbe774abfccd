"""pandas adapters for spectra and peak tables."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import pandas as pd

from peakpick.peak import Peak
from peakpick.spectrum import Spectrum

__all__ = ["spectrum_from_dataframe", "peaks_to_dataframe"]

PEAK_COLUMNS = [
    "start", "end", "max", "min", "int_start", "int_end",
    "deconv_x", "deconv_y", "integ_num", "integ_analyt",
]


def spectrum_from_dataframe(
    df: pd.DataFrame,
    x_column: str = 'x',
    y_column: str = 'y',
) -> Spectrum:
    """
    Build a :class:`Spectrum` from two DataFrame columns.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame containing the signal
    x_column : str
        Name of the (strictly increasing) coordinate column
    y_column : str
        Name of the intensity column

    Returns
    -------
    Spectrum
    """
    for col in (x_column, y_column):
        if col not in df.columns:
            raise ValueError(f"Column '{col}' not found in DataFrame")

    x = pd.to_numeric(df[x_column], errors='coerce').to_numpy(dtype=float)
    y = pd.to_numeric(df[y_column], errors='coerce').to_numpy(dtype=float)

    if np.any(np.isnan(x)) or np.any(np.isnan(y)):
        raise ValueError("DataFrame contains non-numeric or NaN values")

    return Spectrum(x, y)


def peaks_to_dataframe(peaks: Iterable[Peak], spectrum: Optional[Spectrum] = None) -> pd.DataFrame:
    """
    Tabulate peaks, one row per peak.

    With ``spectrum`` the x coordinates of ``start``, ``max`` and ``end`` are
    added as ``x_start``, ``x_max`` and ``x_end``.
    """
    records = [p.as_dict() for p in peaks]
    frame = pd.DataFrame.from_records(records, columns=PEAK_COLUMNS)
    if spectrum is not None:
        axis = spectrum.x_values
        last = axis.size - 1
        for col in ("start", "max", "end"):
            idx = frame[col].to_numpy(dtype=int).clip(0, last)
            frame[f"x_{col}"] = axis[idx]
    return frame
