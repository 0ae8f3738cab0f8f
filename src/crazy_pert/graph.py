#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schedule graph builder.

Turns a flat list of activities into a name-keyed activity-on-node graph.
The graph is rebuilt from scratch for every schedule computation.
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

from .activity import Activity
from .errors import DuplicateActivityName, InvalidActivityReference

logger = logging.getLogger(__name__)

#==============================================================================
def round_half_up(value):
    """Round to the nearest integer, halves go up (2.5 -> 3.0)."""
    return float(np.floor(value + 0.5))

#==============================================================================
class _Node:
    """
    Graph node.

    Parameters
    ----------
    activity : Activity
        Source activity
    preds : list
        Parsed predecessor names
    duration : float
        Duration used for ES/EF/LS/LF arithmetic
    """

    def __init__(self, activity, preds, duration):
        assert isinstance(activity, Activity)
        assert isinstance(preds, list)

        self.activity = activity
        self.preds = preds
        self.duration = duration

    @property
    def name(self):
        return self.activity.name

    def __repr__(self):
        return str({'name': self.name, 'preds': self.preds, 'duration': self.duration})

#==============================================================================
class ScheduleGraph:
    """
    Name-keyed dependency graph.

    Attributes
    ----------
    nodes : dict
        ``name -> _Node`` in the order of the activity list
    successors : dict
        ``name -> [successor names]`` built once from the predecessor lists
    missing : list
        ``(activity name, unknown predecessor name)`` pairs
    """

    def __init__(self):
        self.nodes = {}
        self.successors = {}
        self.missing = []

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __contains__(self, name):
        return name in self.nodes

    def __getitem__(self, name):
        return self.nodes[name]

    def _add_node(self, activity, round_durations):
        if activity.name in self.nodes:
            raise DuplicateActivityName(activity.name)

        duration = activity.te
        if round_durations:
            duration = round_half_up(duration)

        self.nodes[activity.name] = _Node(activity, activity.predecessor_names(), duration)
        self.successors[activity.name] = []

    def _link(self, strict):
        for name, node in self.nodes.items():
            for p in node.preds:
                if p not in self.nodes:
                    if strict:
                        raise InvalidActivityReference(name, p)
                    logger.warning("Activity '%s' depends on unknown activity '%s', treated as finished at 0",
                                   name, p)
                    self.missing.append((name, p))
                    continue

                if name not in self.successors[p]:
                    self.successors[p].append(name)

#==============================================================================
def build_graph(activities, round_durations=False, strict=False):
    """
    Build the schedule graph.

    Parameters
    ----------
    activities : iterable of Activity
        Current activity list
    round_durations : bool, default=False
        Use expected durations rounded to integers for timing arithmetic
    strict : bool, default=False
        Raise on predecessor names which match no activity

    Returns
    -------
    ScheduleGraph

    Raises
    ------
    DuplicateActivityName
        If two activities share a name
    InvalidActivityReference
        If ``strict`` and a predecessor name is unknown
    """
    graph = ScheduleGraph()
    for act in activities:
        graph._add_node(act, round_durations)

    graph._link(strict)

    logger.debug("Built schedule graph: %d nodes, %d dangling references",
                 len(graph), len(graph.missing))
    return graph
