#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Probability engine.

Normal approximations of the project completion time. Project duration is
treated as a normal variable with mean ``duration`` and standard deviation
``sigma`` (the critical path sigma). All functions are pure.

Functions
---------
- :func:`normal_cdf`, :func:`normal_inverse_cdf`: rational approximations
- :func:`probability_for_days`: chance (percent) to finish by a given day
- :func:`days_for_probability`: days needed for a given chance (percent)
- :func:`z_score`
- :func:`sigma_range_probability`, :func:`probability_table`: summaries
"""
#==============================================================================
"""
    CrazyPERT
    Copyright (C) 2025 anonimous

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.

    Please contact with me by E-mail: shkolnick.kun@gmail.com
"""

#==============================================================================
import numpy as np
import pandas as pd

from .dates import add_days

# Hastings approximation of the normal CDF
_CDF_P  = 0.2316419
_CDF_D  = 0.3989423
_CDF_B  = (0.3193815, -0.3565638, 1.781478, -1.821256, 1.330274)

# Abramowitz & Stegun 26.2.23
_INV_C  = (2.515517, 0.802853, 0.010328)
_INV_D  = (1.432788, 0.189269, 0.001308)

DEFAULT_Z_VALUES = (-3, -2, -1, 0, 1, 2, 3)

#==============================================================================
def _ret(x):
    """Return python float for scalars, array otherwise."""
    return float(x) if 0 == np.ndim(x) else x

#==============================================================================
def normal_cdf(z):
    """
    Standard normal CDF, absolute error about 1e-7.

    Parameters
    ----------
    z : float or array-like

    Returns
    -------
    float or numpy.ndarray
        P(Z <= z)
    """
    z = np.asarray(z, dtype=float)

    t = 1.0 / (1.0 + _CDF_P * np.abs(z))
    d = _CDF_D * np.exp(-z * z / 2.0)
    b1, b2, b3, b4, b5 = _CDF_B
    p = d * t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))

    return _ret(np.where(z > 0, 1.0 - p, p))

#==============================================================================
def normal_inverse_cdf(p):
    """
    Standard normal quantile, absolute error below 4.5e-4.

    Parameters
    ----------
    p : float or array-like
        Probability, the open interval (0, 1)

    Returns
    -------
    float or numpy.ndarray
        z such that P(Z <= z) == p, zero for p outside (0, 1)
    """
    p = np.asarray(p, dtype=float)
    valid = (p > 0.0) & (p < 1.0)

    # Tail probability, kept inside (0, 0.5]
    q = np.where(valid, np.minimum(p, 1.0 - p), 0.5)
    t = np.sqrt(-2.0 * np.log(q))

    c0, c1, c2 = _INV_C
    d1, d2, d3 = _INV_D
    z = t - (c0 + c1 * t + c2 * t * t) / (1.0 + d1 * t + d2 * t * t + d3 * t * t * t)

    z = np.where(p < 0.5, -z, z)
    return _ret(np.where(valid, z, 0.0))

#==============================================================================
def z_score(target, duration, sigma):
    """Standard score of the target day, zero for deterministic projects."""
    if 0 == sigma:
        return 0.0
    return (target - duration) / sigma

#==============================================================================
def probability_for_days(target, duration, sigma):
    """
    Probability (percent) to finish the project within target days.

    Parameters
    ----------
    target : float
        Target project duration
    duration : float
        Expected project duration
    sigma : float
        Project duration standard deviation

    Returns
    -------
    float
        Value in [0, 100]; for zero sigma either 0 or 100
    """
    if 0 == sigma:
        return 100.0 if target >= duration else 0.0
    return normal_cdf((target - duration) / sigma) * 100.0

#==============================================================================
def days_for_probability(target_percent, duration, sigma):
    """
    Project duration which is met with the given probability.

    Parameters
    ----------
    target_percent : float
        Probability in percent, the open interval (0, 100)
    duration : float
        Expected project duration
    sigma : float
        Project duration standard deviation

    Returns
    -------
    float
        ``duration + z*sigma``; ``duration`` itself for zero sigma or for
        probabilities outside (0, 100)
    """
    if 0 == sigma:
        return float(duration)
    return duration + normal_inverse_cdf(target_percent / 100.0) * sigma

#==============================================================================
def sigma_range_probability(duration, sigma, k=1.0):
    """
    Probability (percent) to finish within ``duration +- k*sigma``.

    A deterministic project always finishes inside the range.
    """
    if 0 == sigma:
        return 100.0
    hi = probability_for_days(duration + k * sigma, duration, sigma)
    lo = probability_for_days(duration - k * sigma, duration, sigma)
    return hi - lo

#==============================================================================
def probability_table(duration, sigma, z_values=DEFAULT_Z_VALUES, start_date=None):
    """
    Completion probabilities for target days at whole sigma offsets.

    Parameters
    ----------
    duration : float
        Expected project duration
    sigma : float
        Project duration standard deviation
    z_values : sequence of float
        Sigma offsets of the target days
    start_date : datetime.date, optional
        Project start, adds a ``date`` column with the target finish dates

    Returns
    -------
    pandas.DataFrame
        Columns ``z``, ``days``, ``probability`` (and ``date``)
    """
    rows = []
    for z in z_values:
        days = duration + z * sigma
        row = {
            'z': float(z),
            'days': days,
            'probability': probability_for_days(days, duration, sigma),
        }
        if start_date is not None:
            row['date'] = add_days(start_date, days)
        rows.append(row)

    columns = ['z', 'days', 'probability']
    if start_date is not None:
        columns.append('date')
    return pd.DataFrame(rows, columns=columns)
