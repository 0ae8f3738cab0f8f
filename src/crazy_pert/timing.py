#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CPM timing engine.

Forward pass (early times), backward pass (late times and slack) and
critical activity selection over a :class:`ScheduleGraph`.
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
import logging

from .errors import CyclicDependency

logger = logging.getLogger(__name__)

# Activities with |slack| below this value are critical
CRITICAL_EPS = 0.001

_VISITING = 1
_DONE     = 2

Timing = namedtuple('Timing', ['es', 'ef', 'ls', 'lf', 'slack', 'order', 'project_duration'])

#==============================================================================
def forward_pass(graph):
    """
    Compute early start and early finish times.

    Nodes are resolved depth first with an explicit stack, so every
    predecessor's EF is final before it is read. Unknown predecessors count
    as finished at 0.

    Parameters
    ----------
    graph : ScheduleGraph

    Returns
    -------
    tuple
        (es, ef, order) where ``es`` and ``ef`` are ``name -> time`` dicts and
        ``order`` lists names in topological order

    Raises
    ------
    CyclicDependency
        If an activity depends on itself directly or transitively
    """
    es    = {}
    ef    = {}
    order = []
    state = {}

    for root in graph:
        if root in state:
            continue

        state[root] = _VISITING
        stack = [(root, 0)]
        while stack:
            name, i = stack[-1]
            preds = graph[name].preds

            if i < len(preds):
                stack[-1] = (name, i + 1)
                p = preds[i]
                if p not in graph:
                    continue

                st = state.get(p)
                if st == _DONE:
                    continue
                if st == _VISITING:
                    path = [n for n, _ in stack]
                    raise CyclicDependency(p, path[path.index(p):] + [p])

                state[p] = _VISITING
                stack.append((p, 0))
                continue

            # All predecessors are done
            stack.pop()
            start = max([ef[p] for p in preds if p in ef], default=0.0)
            es[name] = start
            ef[name] = start + graph[name].duration
            state[name] = _DONE
            order.append(name)

    return es, ef, order

#==============================================================================
def backward_pass(graph, ef, order):
    """
    Compute late start, late finish and slack.

    Nodes are processed in descending EF order, ties go in reverse
    topological order, so successors are always done first.

    Parameters
    ----------
    graph : ScheduleGraph
    ef : dict
        Early finish times from :func:`forward_pass`
    order : list
        Topological order from :func:`forward_pass`

    Returns
    -------
    tuple
        (project_duration, ls, lf, slack)
    """
    project_duration = max(ef.values(), default=0.0)
    pos = {name: i for i, name in enumerate(order)}

    ls    = {}
    lf    = {}
    slack = {}
    for name in sorted(graph, key=lambda n: (ef[n], pos[n]), reverse=True):
        succ = graph.successors[name]
        if succ:
            lf[name] = min(ls[s] for s in succ)
        else:
            lf[name] = project_duration

        ls[name]    = lf[name] - graph[name].duration
        slack[name] = lf[name] - ef[name]

    return project_duration, ls, lf, slack

#==============================================================================
def is_critical(slack):
    return abs(slack) < CRITICAL_EPS

#==============================================================================
def critical_path(graph, timing, sort_by_start=True):
    """
    Select critical activities.

    Parameters
    ----------
    graph : ScheduleGraph
    timing : Timing
    sort_by_start : bool, default=True
        Order names by ES (stable), otherwise keep graph order

    Returns
    -------
    list
        Names of activities with zero slack
    """
    names = [n for n in graph if is_critical(timing.slack[n])]
    if sort_by_start:
        names.sort(key=lambda n: timing.es[n])
    return names

#==============================================================================
def compute_timing(graph):
    """Run forward and backward passes over the graph."""
    es, ef, order = forward_pass(graph)
    project_duration, ls, lf, slack = backward_pass(graph, ef, order)

    logger.debug("Timing computed: %d activities, project duration %s",
                 len(order), project_duration)
    return Timing(es, ef, ls, lf, slack, order, project_duration)
