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
from .activity import Activity, parse_predecessors
from .errors import (CyclicDependency, DuplicateActivityName, EmptyProjectError,
                     InvalidActivityReference, InvalidProjectFile, ProjectFileError,
                     ScheduleError, UnknownPredecessor)
from .graph import ScheduleGraph, build_graph
from .net_model import PertModel
from .probability import (days_for_probability, normal_cdf, normal_inverse_cdf,
                          probability_for_days, probability_table,
                          sigma_range_probability, z_score)
from .results import ActivityResult, ScheduleResult
from .schedule import ScheduleOptions, compute
from .storage import load_activities, save_activities
from .timing import CRITICAL_EPS

__version__ = '0.1.0'
