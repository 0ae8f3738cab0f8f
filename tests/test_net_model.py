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
import datetime

import graphviz
import numpy as np
import pytest

from crazy_pert import Activity, CyclicDependency, InvalidActivityReference, PertModel


def test_deterministic_model(example_activities):
    model = PertModel(example_activities)

    assert model.project_duration == 22
    assert model.critical_path == ('A', 'D', 'G', 'I')
    assert model.project_sigma == 0.0
    assert model.days_pqe == 22
    assert model.probability_for_days(22) == 100
    assert model.probability_for_days(21) == 0


def test_pert_model(pert_activities):
    model = PertModel(pert_activities)
    sigma = np.sqrt((4 / 6) ** 2 + (8 / 6) ** 2 + (3 / 6) ** 2)

    assert model.project_duration == pytest.approx(10.5)
    assert model.project_sigma == pytest.approx(sigma)
    assert model.days_pqe == pytest.approx(10.5 + 1.645 * sigma, abs=2e-3)
    assert model.probability_for_days(10.5) == pytest.approx(50.0, abs=1e-4)
    assert model.z_score(10.5 + sigma) == pytest.approx(1.0)
    assert model.sigma_range_probability(1) == pytest.approx(68.27, abs=0.01)


def test_probability_level(pert_activities):
    low = PertModel(pert_activities, p=0.5)
    high = PertModel(pert_activities, p=0.99)

    assert low.days_pqe == pytest.approx(10.5, abs=1e-3)
    assert high.days_pqe > low.days_pqe

    with pytest.raises(AssertionError):
        PertModel(pert_activities, p=1.0)


def test_days_for_probability(pert_activities):
    model = PertModel(pert_activities)

    assert model.days_for_probability(95) == pytest.approx(model.days_pqe)


def test_to_dataframe(pert_activities):
    df = PertModel(pert_activities).to_dataframe()
    assert 'duration' not in df.columns
    assert list(df.index) == ['A', 'B', 'C', 'D']

    df = PertModel(pert_activities, debug=True).to_dataframe()
    assert 'duration' in df.columns

    df = PertModel(pert_activities, round_durations=True).to_dataframe()
    assert df.loc['D', 'duration'] == 4


def test_to_dict(pert_activities):
    d = PertModel(pert_activities, round_durations=True).to_dict()

    assert d['options']['round_durations'] is True
    assert d['p'] == 0.95
    assert d['project_duration'] == 11
    assert 'days_pqe' in d


def test_empty_model():
    model = PertModel([])

    assert model.project_duration == 0
    assert model.critical_path == ()
    assert 'days_pqe' not in model.to_dict()


def test_repr(example_activities):
    text = repr(PertModel(example_activities))

    assert text.startswith('Project:{')
    assert "critical_path: ['A', 'D', 'G', 'I']" in text
    assert 'Activities:{' in text


def test_probability_table_and_timeline(example_activities):
    model = PertModel(example_activities)

    table = model.probability_table(start_date='2025-01-06')
    assert list(table['days']) == [22] * 7
    assert table.loc[0, 'date'] == datetime.date(2025, 1, 28)

    tl = model.timeline('2025-01-06')
    assert tl.iloc[-1]['name'] == 'I'


def test_viz(example_activities):
    dot = PertModel(example_activities).viz()

    assert isinstance(dot, graphviz.Digraph)
    src = dot.source
    assert 'rankdir=LR' in src
    assert '#ff0000' in src
    for name in 'ABCDEFGHI':
        assert f'{name}\\n' in src
    # A -> D is critical, B -> D is not
    assert 'n0 -> n3 [color="#ff0000"]' in src
    assert 'n1 -> n3 [color="#000000"]' in src


def test_viz_free_text_names():
    acts = [
        Activity(1, 'Phase:1',       '',              1, 1, 1),
        Activity(2, 'Design|Review', 'Phase:1',       1, 1, 1),
        Activity(3, 'Build <v2>',    'Design|Review', 1, 1, 1),
    ]
    src = PertModel(acts).viz().source

    assert 'n0 -> n1 [color="#ff0000"]' in src
    assert 'n1 -> n2 [color="#ff0000"]' in src
    assert 'Phase:1 ->' not in src
    assert 'Design\\|Review\\n' in src
    assert 'Design|Review' not in src
    assert 'Build \\<v2\\>\\n' in src


def test_viz_skips_unknown_predecessors():
    acts = [Activity(1, 'A', 'Ghost', 1, 1, 1)]
    src = PertModel(acts).viz().source

    assert 'Ghost' not in src


def test_structural_errors_propagate():
    with pytest.raises(CyclicDependency):
        PertModel([Activity(1, 'A', 'B'), Activity(2, 'B', 'A')])

    with pytest.raises(InvalidActivityReference):
        PertModel([Activity(1, 'A', 'Ghost')], strict=True)
