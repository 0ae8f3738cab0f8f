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

import numpy as np
import pandas as pd

TIMELINE_COLUMNS = ['name', 'es', 'ef', 'ls', 'lf', 'slack', 'is_critical',
                    'start', 'finish', 'late_start', 'late_finish']

#==============================================================================
def add_days(start, days):
    """
    Shift a date by a number of calendar days.

    Fractional days are rounded half up, so 2.5 days after Monday is
    Thursday. Weekends and holidays are ordinary days.
    """
    if isinstance(start, str):
        start = datetime.date.fromisoformat(start)
    return start + datetime.timedelta(days=int(np.floor(days + 0.5)))

#==============================================================================
def timeline(result, start_date):
    """
    Timeline (Gantt) table of a schedule.

    Parameters
    ----------
    result : ScheduleResult
        Computed schedule
    start_date : datetime.date or str
        Project start date, ISO strings are accepted

    Returns
    -------
    pandas.DataFrame
        One row per activity sorted by early start and name, with time
        offsets and the matching calendar dates
    """
    rows = []
    for a in sorted(result.activities, key=lambda a: (a.es, a.name)):
        rows.append({
            'name': a.name,
            'es': a.es,
            'ef': a.ef,
            'ls': a.ls,
            'lf': a.lf,
            'slack': a.slack,
            'is_critical': a.is_critical,
            'start': add_days(start_date, a.es),
            'finish': add_days(start_date, a.ef),
            'late_start': add_days(start_date, a.ls),
            'late_finish': add_days(start_date, a.lf),
        })
    return pd.DataFrame(rows, columns=TIMELINE_COLUMNS)
