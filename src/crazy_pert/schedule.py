#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PERT/CPM schedule computation.

:func:`compute` is a pure function of its input: it builds the graph, runs
the timing passes, selects critical activities and assembles a fresh
:class:`ScheduleResult`. Nothing is kept between calls.

Usage Example
-------------
>>> acts = [Activity(1, 'A', '', 2, 3, 4), Activity(2, 'B', 'A', 1, 1, 1)]
>>> res = compute(acts)
>>> res.project_duration, res.critical_path
(4.0, ('A', 'B'))
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

import numpy as np

from .graph import build_graph
from .results import ActivityResult, ScheduleResult
from .timing import compute_timing, critical_path

logger = logging.getLogger(__name__)

#==============================================================================
class ScheduleOptions:
    """
    Schedule computation options.

    Parameters
    ----------
    round_durations : bool, default=False
        Round expected durations to integers (halves up) before the timing
        passes. Statistical results always use unrounded values.
    strict : bool, default=False
        Raise :class:`InvalidActivityReference` for unknown predecessor
        names instead of treating them as finished at 0
    sort_critical_path : bool, default=True
        Order critical activity names by early start
    """

    def __init__(self, round_durations=False, strict=False, sort_critical_path=True):
        self.round_durations = bool(round_durations)
        self.strict = bool(strict)
        self.sort_critical_path = bool(sort_critical_path)

    def replace(self, **kwargs):
        """Copy of the options with some values overridden."""
        opts = self.to_dict()
        for k, v in kwargs.items():
            if k not in opts:
                raise TypeError(f"Unknown schedule option: '{k}'")
            opts[k] = v
        return ScheduleOptions(**opts)

    def to_dict(self):
        return {
            'round_durations': self.round_durations,
            'strict': self.strict,
            'sort_critical_path': self.sort_critical_path,
        }

    def __repr__(self):
        return 'ScheduleOptions(' + ', '.join(f'{k}={v}' for k, v in self.to_dict().items()) + ')'

#==============================================================================
def _build_results(graph, timing, crit):
    crit_set = set(crit)

    activities = []
    for name, node in graph.nodes.items():
        act = node.activity
        activities.append(ActivityResult(
            id=act.id,
            name=name,
            predecessors=tuple(node.preds),
            a=act.a,
            m=act.m,
            b=act.b,
            # Statistics never use the rounded duration
            te=act.te,
            variance=act.variance,
            sigma=act.sigma,
            duration=node.duration,
            es=timing.es[name],
            ef=timing.ef[name],
            ls=timing.ls[name],
            lf=timing.lf[name],
            slack=timing.slack[name],
            is_critical=name in crit_set))

    project_variance = sum(graph[n].activity.variance for n in crit)
    project_sigma = float(np.sqrt(project_variance)) if project_variance >= 0.0 else 0.0

    return ScheduleResult(tuple(activities),
                          timing.project_duration,
                          project_variance,
                          project_sigma,
                          tuple(crit))

#==============================================================================
def compute(activities, options=None, **kwargs):
    """
    Compute PERT/CPM schedule.

    Parameters
    ----------
    activities : iterable of Activity
        Current activity list, names must be unique
    options : ScheduleOptions, optional
        Computation options, defaults are used if omitted
    **kwargs
        Option overrides, see :class:`ScheduleOptions`

    Returns
    -------
    ScheduleResult

    Raises
    ------
    DuplicateActivityName
        If two activities share a name
    InvalidActivityReference
        If ``strict`` and a predecessor name is unknown
    CyclicDependency
        If dependencies form a cycle
    """
    if options is None:
        options = ScheduleOptions()
    if kwargs:
        options = options.replace(**kwargs)

    activities = list(activities)
    if not activities:
        return ScheduleResult.empty()

    graph = build_graph(activities,
                        round_durations=options.round_durations,
                        strict=options.strict)
    timing = compute_timing(graph)
    crit = critical_path(graph, timing, sort_by_start=options.sort_critical_path)

    result = _build_results(graph, timing, crit)
    logger.debug("Critical path: %s, sigma %.4f", crit, result.project_sigma)
    return result
