#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
import pytest

from crazy_pert import Activity, CyclicDependency, build_graph
from crazy_pert.timing import (CRITICAL_EPS, Timing, backward_pass, compute_timing,
                               critical_path, forward_pass, is_critical)


def test_forward_pass(example_activities):
    graph = build_graph(example_activities)
    es, ef, order = forward_pass(graph)

    assert es == {'A': 0, 'B': 0, 'C': 5, 'D': 5, 'E': 4, 'F': 11, 'G': 10, 'H': 10, 'I': 18}
    assert ef == {'A': 5, 'B': 4, 'C': 11, 'D': 10, 'E': 8, 'F': 13, 'G': 18, 'H': 14, 'I': 22}

    # Every predecessor comes first
    pos = {n: i for i, n in enumerate(order)}
    for name in graph:
        for p in graph[name].preds:
            assert pos[p] < pos[name]


def test_backward_pass(example_activities):
    graph = build_graph(example_activities)
    es, ef, order = forward_pass(graph)
    duration, ls, lf, slack = backward_pass(graph, ef, order)

    assert duration == 22
    assert lf == {'A': 5, 'B': 5, 'C': 16, 'D': 10, 'E': 14, 'F': 18, 'G': 18, 'H': 18, 'I': 22}
    assert ls == {'A': 0, 'B': 1, 'C': 10, 'D': 5, 'E': 10, 'F': 16, 'G': 10, 'H': 14, 'I': 18}
    assert slack == {'A': 0, 'B': 1, 'C': 5, 'D': 0, 'E': 6, 'F': 5, 'G': 0, 'H': 4, 'I': 0}


def test_diamond_is_resolved_once():
    acts = [
        Activity(1, 'S', '',    1, 1, 1),
        Activity(2, 'L', 'S',   2, 2, 2),
        Activity(3, 'R', 'S',   3, 3, 3),
        Activity(4, 'T', 'L,R', 1, 1, 1),
    ]
    es, ef, order = forward_pass(build_graph(acts))

    assert order.count('S') == 1
    assert es['T'] == 4
    assert ef['T'] == 5


def test_unknown_predecessor_counts_as_zero():
    acts = [Activity(1, 'A', 'Ghost', 3, 3, 3), Activity(2, 'B', 'A', 1, 1, 1)]
    es, ef, _ = forward_pass(build_graph(acts))

    assert es['A'] == 0
    assert ef['B'] == 4


def test_cycle_is_detected():
    acts = [
        Activity(1, 'A', 'C', 1, 1, 1),
        Activity(2, 'B', 'A', 1, 1, 1),
        Activity(3, 'C', 'B', 1, 1, 1),
    ]

    with pytest.raises(CyclicDependency) as err:
        forward_pass(build_graph(acts))

    assert err.value.activity in ('A', 'B', 'C')
    assert err.value.cycle[0] == err.value.cycle[-1]
    assert set(err.value.cycle) == {'A', 'B', 'C'}


def test_self_dependency_is_a_cycle():
    acts = [Activity(1, 'A', 'A', 1, 1, 1)]

    with pytest.raises(CyclicDependency) as err:
        compute_timing(build_graph(acts))
    assert err.value.activity == 'A'
    assert err.value.cycle == ['A', 'A']


def test_cycle_behind_acyclic_part():
    acts = [
        Activity(1, 'A', '',    1, 1, 1),
        Activity(2, 'B', 'A,D', 1, 1, 1),
        Activity(3, 'C', 'B',   1, 1, 1),
        Activity(4, 'D', 'C',   1, 1, 1),
    ]

    with pytest.raises(CyclicDependency) as err:
        forward_pass(build_graph(acts))
    assert 'A' not in err.value.cycle


def test_zero_duration_successor_listed_first():
    acts = [
        Activity(1, 'M', 'A', 0, 0, 0),
        Activity(2, 'A', '',  0, 0, 0),
        Activity(3, 'Z', 'M', 3, 3, 3),
    ]
    timing = compute_timing(build_graph(acts))

    assert timing.project_duration == 3
    assert timing.slack == {'M': 0, 'A': 0, 'Z': 0}
    assert timing.ls['M'] == 0


def test_long_chain_does_not_hit_recursion_limit():
    n = 5000
    acts = [Activity(1, 'N0', '', 1, 1, 1)]
    acts += [Activity(i + 1, f'N{i}', f'N{i - 1}', 1, 1, 1) for i in range(1, n)]
    timing = compute_timing(build_graph(acts))

    assert timing.project_duration == n
    assert timing.es[f'N{n - 1}'] == n - 1


def test_critical_selection_tolerance():
    assert is_critical(0.0)
    assert is_critical(CRITICAL_EPS / 2)
    assert is_critical(-CRITICAL_EPS / 2)
    assert not is_critical(CRITICAL_EPS)
    assert not is_critical(0.5)


def test_critical_path_order():
    timing = Timing(es={'X': 5.0, 'Y': 0.0, 'Z': 2.0},
                    ef={}, ls={}, lf={},
                    slack={'X': 0.0, 'Y': 0.0, 'Z': 0.0004},
                    order=[], project_duration=0.0)
    graph = ['X', 'Y', 'Z']

    assert critical_path(graph, timing) == ['Y', 'Z', 'X']
    assert critical_path(graph, timing, sort_by_start=False) == ['X', 'Y', 'Z']
