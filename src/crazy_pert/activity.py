#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Activity entity with a three-point (PERT) duration estimate.
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


#==============================================================================
def parse_predecessors(text):
    """
    Split free-form predecessor text into activity names.

    Parameters
    ----------
    text : str, list or None
        Comma separated names, e.g. ``'A, B,,C '``, or a ready list of names

    Returns
    -------
    list
        Trimmed non-empty names in their original order
    """
    if text is None:
        return []

    if isinstance(text, (list, tuple)):
        tokens = [str(t) for t in text]
    else:
        tokens = str(text).split(',')

    return [t.strip() for t in tokens if t.strip()]

#==============================================================================
def coerce_estimate(value):
    """Convert a raw estimate field to float, malformed values become 0."""
    try:
        ret = float(value)
    except (TypeError, ValueError):
        return 0.0

    if not np.isfinite(ret):
        return 0.0
    return ret

#==============================================================================
class Activity:
    """
    Single project task with a three-point duration estimate.

    Parameters
    ----------
    id : int
        Unique activity identifier assigned by the caller
    name : str
        Activity name, used as a key in the dependency graph
    predecessors : str or list
        Comma separated names of the activities which must finish first
    a : float
        Optimistic duration
    m : float
        Most likely duration
    b : float
        Pessimistic duration

    Notes
    -----
    Expected duration and variance are derived on access:

    - ``te = (a + 4*m + b)/6``
    - ``variance = ((b - a)/6)**2``
    """

    def __init__(self, id, name, predecessors='', a=1.0, m=2.0, b=3.0):
        assert isinstance(id, int)
        assert isinstance(name, str)

        a, m, b = float(a), float(m), float(b)
        if not np.all(np.isfinite([a, m, b])):
            raise ValueError(f"Activity '{name}': estimates must be finite. Got: {a}, {m}, {b}")
        if a < 0.0 or m < 0.0 or b < 0.0:
            raise ValueError(f"Activity '{name}': estimates must be non-negative. Got: {a}, {m}, {b}")

        self.id = id
        self.name = name
        if isinstance(predecessors, (list, tuple)):
            predecessors = ', '.join(parse_predecessors(predecessors))
        self.predecessors = predecessors if predecessors is not None else ''
        self.a = a
        self.m = m
        self.b = b

    @property
    def te(self):
        """Expected duration."""
        return (self.a + 4.0 * self.m + self.b) / 6.0

    @property
    def variance(self):
        return ((self.b - self.a) / 6.0) ** 2

    @property
    def sigma(self):
        return float(np.sqrt(self.variance))

    def predecessor_names(self):
        """Parsed list of predecessor names."""
        return parse_predecessors(self.predecessors)

    def __repr__(self):
        return str(self.to_dict())

    def to_dict(self):
        """
        Convert activity to its persistence record.

        Returns
        -------
        dict
            ``{'id', 'name', 'predecessors', 'a', 'm', 'b'}``
        """
        return {
            'id': self.id,
            'name': self.name,
            'predecessors': self.predecessors,
            'a': self.a,
            'm': self.m,
            'b': self.b,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Create activity from a persistence record.

        Missing estimates fall back to zero, as do values which can not be
        read as numbers.
        """
        return cls(int(data.get('id', 0)),
                   str(data.get('name', '')),
                   data.get('predecessors', ''),
                   coerce_estimate(data.get('a')),
                   coerce_estimate(data.get('m')),
                   coerce_estimate(data.get('b')))
