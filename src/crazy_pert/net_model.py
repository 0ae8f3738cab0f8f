#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CrazyPERT - PERT/CPM scheduling and completion probability library
==================================================================

This module provides the :class:`PertModel` class which computes a
PERT/CPM schedule for a list of activities with three-point duration
estimates and answers completion probability questions about it.

Features
--------
- Activity-on-node network built from predecessor names
- Forward and backward passes with cycle detection
- Optional integer rounding of expected durations
- Critical path, project variance and standard deviation
- Normal approximation of completion probabilities
- Export to dictionaries and pandas DataFrames
- Network diagram generation using Graphviz

Usage Example
-------------
>>> acts = [
...     Activity(1, 'A', '',  2, 4, 6),
...     Activity(2, 'B', 'A', 1, 2, 9),
... ]
>>> model = PertModel(acts)
>>> model.project_duration
7.0
>>> activities_df = model.to_dataframe()
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
import logging
import os

import graphviz

from .activity import Activity
from .dates import timeline
from .probability import (days_for_probability, probability_for_days,
                          probability_table, sigma_range_probability, z_score)
from .schedule import ScheduleOptions, compute

logger = logging.getLogger(__name__)

_RECORD_SPECIAL = '\\|{}<>'

#==============================================================================
def _record_escape(text):
    """Escape characters with a meaning in Graphviz record labels."""
    return ''.join('\\' + c if c in _RECORD_SPECIAL else c for c in text)

#==============================================================================
class PertModel:
    """
    PERT/CPM analysis of an activity list.

    The schedule is computed once on construction, the model keeps the
    resulting snapshot only. Build a new model after editing activities.

    Parameters
    ----------
    activities : iterable of Activity
        Activity list, names must be unique
    round_durations : bool, default=False
        Round expected durations to integers for the timing passes
    strict : bool, default=False
        Raise on unknown predecessor names
    sort_critical_path : bool, default=True
        Order critical path names by early start
    p : float, default=0.95
        Probability level for :attr:`days_pqe`
    debug : bool, default=False
        Add rounded-duration column to exports

    Raises
    ------
    DuplicateActivityName, InvalidActivityReference, CyclicDependency
        On structural errors in the network

    Attributes
    ----------
    activities : list
        Activities the model was built from
    options : ScheduleOptions
        Computation options
    result : ScheduleResult
        Computed schedule
    p : float
        Probability level
    """

    def __init__(self, activities, round_durations=False, strict=False,
                 sort_critical_path=True, p=0.95, debug=False):
        assert 0.0 < p < 1.0

        self.activities = list(activities)
        self.options = ScheduleOptions(round_durations=round_durations,
                                       strict=strict,
                                       sort_critical_path=sort_critical_path)
        self.p = p
        self.debug = debug

        self.result = compute(self.activities, self.options)

    @property
    def project_duration(self):
        return self.result.project_duration

    @property
    def project_variance(self):
        return self.result.project_variance

    @property
    def project_sigma(self):
        return self.result.project_sigma

    @property
    def critical_path(self):
        return self.result.critical_path

    @property
    def days_pqe(self):
        """
        Project duration quantile for the model's probability level.

        Returns
        -------
        float
            Days needed to finish with probability ``p``
        """
        return days_for_probability(self.p * 100.0, self.project_duration, self.project_sigma)

    def probability_for_days(self, target):
        """Probability (percent) to finish within ``target`` days."""
        return probability_for_days(target, self.project_duration, self.project_sigma)

    def days_for_probability(self, target_percent):
        """Days needed to finish with ``target_percent`` probability."""
        return days_for_probability(target_percent, self.project_duration, self.project_sigma)

    def z_score(self, target):
        return z_score(target, self.project_duration, self.project_sigma)

    def sigma_range_probability(self, k=1.0):
        return sigma_range_probability(self.project_duration, self.project_sigma, k)

    def probability_table(self, start_date=None, **kwargs):
        """See :func:`crazy_pert.probability.probability_table`."""
        return probability_table(self.project_duration, self.project_sigma,
                                 start_date=start_date, **kwargs)

    def timeline(self, start_date):
        """See :func:`crazy_pert.dates.timeline`."""
        return timeline(self.result, start_date)

    def __repr__(self):
        """String representation of the model."""
        _repr = 'Project:{\n'
        _repr += '        duration: ' + str(self.project_duration) + '\n'
        _repr += '        sigma: ' + str(self.project_sigma) + '\n'
        _repr += '        critical_path: ' + str(list(self.critical_path)) + '\n'
        _repr += '}\n'

        _repr += 'Activities:{\n'
        for a in self.result.activities:
            _repr += '        ' + str(a.to_dict()) + '\n'
        _repr += '}\n'

        return _repr

    def to_dict(self):
        """
        Convert model to dictionary representation.

        Returns
        -------
        dict
            :meth:`ScheduleResult.to_dict` plus ``'options'`` and ``'p'``
        """
        ret = self.result.to_dict()
        ret['options'] = self.options.to_dict()
        ret['p'] = self.p
        if not self.result.is_empty():
            ret['days_pqe'] = self.days_pqe
        return ret

    def to_dataframe(self):
        """
        Convert activity results to a pandas DataFrame.

        Returns
        -------
        pandas.DataFrame
            One row per activity indexed by name. The ``duration`` column
            is only kept in debug mode or when durations are rounded.
        """
        df = self.result.to_dataframe()
        if not (self.debug or self.options.round_durations):
            df = df.drop(columns=['duration'])
        return df

    def viz(self, output_path=None):
        """
        Create Graphviz visualization of the activity network.

        Parameters
        ----------
        output_path : str, optional
            Path (without extension) to render a PNG to

        Returns
        -------
        graphviz.Digraph
            Graphviz object for rendering or saving

        Notes
        -----
        Every activity is a record node ``name | ES EF | LS LF | slack``.
        Critical activities and links between them are red.
        """
        dot = graphviz.Digraph(node_attr={'shape': 'record', 'style': 'rounded'})
        dot.graph_attr['rankdir'] = 'LR'

        def _cl(critical):
            return '#ff0000' if critical else '#000000'

        # Names are free text, node ids are positional
        ids  = {a.name: 'n%d' % i for i, a in enumerate(self.result.activities)}
        crit = {a.name: a.is_critical for a in self.result.activities}

        for a in self.result.activities:
            lbl = '{%s\\n t=%.2f |{%.1f|%.1f}|{%.1f|%.1f}| r=%.2f}' % (
                _record_escape(a.name), a.te, a.es, a.ef, a.ls, a.lf, a.slack)
            dot.node(ids[a.name], lbl, color=_cl(a.is_critical))

        for a in self.result.activities:
            for p in a.predecessors:
                if p not in ids:
                    continue
                dot.edge(ids[p], ids[a.name], color=_cl(crit[p] and a.is_critical))

        if output_path is not None:
            dot.render(output_path, format='png', cleanup=True)
            logger.info("Network diagram saved as '%s.png'", output_path)

        return dot

#==============================================================================
if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)

    acts = [
        Activity(1, 'A', '',      5, 5, 5),
        Activity(2, 'B', '',      4, 4, 4),
        Activity(3, 'C', 'A,B',   6, 6, 6),
        Activity(4, 'D', 'A,B',   5, 5, 5),
        Activity(5, 'E', 'B',     4, 4, 4),
        Activity(6, 'F', 'C',     2, 2, 2),
        Activity(7, 'G', 'D',     8, 8, 8),
        Activity(8, 'H', 'D,E',   4, 4, 4),
        Activity(9, 'I', 'F,G,H', 4, 4, 4),
    ]

    print("=== Deterministic example ===")
    model = PertModel(acts)
    print(model)

    print("=== Three-point estimates ===")
    acts[6] = Activity(7, 'G', 'D', 6, 8, 14)
    acts[8] = Activity(9, 'I', 'F,G,H', 3, 4, 7)
    model = PertModel(acts, round_durations=True)
    print(model.to_dataframe())
    print(f"P(T <= 23) = {model.probability_for_days(23):.2f} %")
    print(f"T(95 %) = {model.days_pqe:.2f}")
    print(model.probability_table(start_date='2025-01-06'))
    print(model.timeline('2025-01-06'))

    module_dir = os.path.dirname(os.path.abspath(__file__))
    target_dir = os.path.normpath(os.path.join(module_dir, '../../tests/data'))
    os.makedirs(target_dir, exist_ok=True)
    model.viz(output_path=os.path.join(target_dir, 'pert_network'))
