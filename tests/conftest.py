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
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'src'))

from crazy_pert import Activity


@pytest.fixture
def example_activities():
    """Deterministic nine activity network."""
    return [
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


@pytest.fixture
def pert_activities():
    """Small network with uncertain estimates."""
    return [
        Activity(1, 'A', '',    2, 4, 6),
        Activity(2, 'B', 'A',   1, 2, 9),
        Activity(3, 'C', 'A',   1, 1, 1),
        Activity(4, 'D', 'B,C', 3, 3, 6),
    ]
