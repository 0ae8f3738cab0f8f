#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schedule result snapshots.
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
from collections import namedtuple

import pandas as pd

ACTIVITY_FIELDS = ['id', 'name', 'predecessors', 'a', 'm', 'b',
                   'te', 'variance', 'sigma', 'duration',
                   'es', 'ef', 'ls', 'lf', 'slack', 'is_critical']

#==============================================================================
class ActivityResult(namedtuple('ActivityResult', ACTIVITY_FIELDS)):
    """
    Computed parameters of a single activity.

    ``te``, ``variance`` and ``sigma`` always come from the unrounded
    estimates, ``duration`` is the value used by the timing passes.
    """
    __slots__ = ()

    def to_dict(self):
        ret = self._asdict()
        ret['predecessors'] = list(self.predecessors)
        return dict(ret)

#==============================================================================
class ScheduleResult(namedtuple('ScheduleResult', ['activities', 'project_duration',
                                                   'project_variance', 'project_sigma',
                                                   'critical_path'])):
    """
    Snapshot of one schedule computation.

    Sequences are tuples, :meth:`to_dict` converts them back to lists.

    Attributes
    ----------
    activities : tuple
        :class:`ActivityResult` items in the order of the input list
    project_duration : float
        Maximum early finish over all activities
    project_variance : float
        Sum of the variances of critical activities
    project_sigma : float
        Square root of ``project_variance``
    critical_path : tuple
        Names of critical activities
    """
    __slots__ = ()

    @classmethod
    def empty(cls):
        return cls((), 0.0, 0.0, 0.0, ())

    def is_empty(self):
        return 0 == len(self.activities)

    def critical_activities(self):
        """Activity results flagged as critical."""
        return [a for a in self.activities if a.is_critical]

    def get(self, name):
        """
        Get activity result by name.

        Returns
        -------
        ActivityResult or None
        """
        for a in self.activities:
            if a.name == name:
                return a
        return None

    def __repr__(self):
        return str(self.to_dict())

    def to_dict(self):
        """
        Convert result to dictionary representation.

        Returns
        -------
        dict
            Project aggregates plus ``'activities'`` as a list of dicts
        """
        return {
            'activities': [a.to_dict() for a in self.activities],
            'project_duration': self.project_duration,
            'project_variance': self.project_variance,
            'project_sigma': self.project_sigma,
            'critical_path': list(self.critical_path),
        }

    def to_dataframe(self):
        """
        Convert per-activity results to a pandas DataFrame indexed by name.

        Predecessor lists are joined into comma separated text.
        """
        rows = []
        for a in self.activities:
            row = a.to_dict()
            row['predecessors'] = ', '.join(a.predecessors)
            rows.append(row)

        df = pd.DataFrame(rows, columns=ACTIVITY_FIELDS)
        return df.set_index('name')
