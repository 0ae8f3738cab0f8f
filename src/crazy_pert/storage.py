#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Activity list persistence.

A project file is a JSON array of ``{id, name, predecessors, a, m, b}``
records in the order of the activity list.
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
import datetime
import json
import logging
import os

from .activity import Activity
from .errors import EmptyProjectError, InvalidProjectFile

logger = logging.getLogger(__name__)

#==============================================================================
def default_file_name(day=None):
    """Project file name stamped with a date, e.g. ``proyecto-pert-2025-01-31.json``."""
    day = day or datetime.date.today()
    return f'proyecto-pert-{day.isoformat()}.json'

#==============================================================================
def dumps_activities(activities):
    """
    Serialize activity list to JSON text.

    Raises
    ------
    EmptyProjectError
        If there is nothing to save
    """
    activities = list(activities)
    if not activities:
        raise EmptyProjectError("There are no activities to save")

    return json.dumps([a.to_dict() for a in activities], indent=2)

#==============================================================================
def loads_activities(text):
    """
    Deserialize activity list from JSON text.

    Parameters
    ----------
    text : str or bytes
        JSON text, bytes are decoded as UTF-8

    Raises
    ------
    InvalidProjectFile
        If the text is not a JSON array of activity records
    """
    if isinstance(text, bytes):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidProjectFile(f"Project file is not valid UTF-8: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidProjectFile(f"Project file is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise InvalidProjectFile("Project file does not contain a valid array")

    activities = []
    for i, rec in enumerate(data):
        if not isinstance(rec, dict):
            raise InvalidProjectFile(f"Record #{i} is not an object")
        try:
            activities.append(Activity.from_dict(rec))
        except (TypeError, ValueError) as e:
            raise InvalidProjectFile(f"Record #{i}: {e}") from e

    return activities

#==============================================================================
def save_activities(activities, path):
    """
    Write activity list to a project file.

    Parameters
    ----------
    activities : iterable of Activity
    path : str or os.PathLike
        Target file, or a directory to place a dated file into

    Returns
    -------
    str
        Path of the written file
    """
    text = dumps_activities(activities)

    path = os.fspath(path)
    if os.path.isdir(path):
        path = os.path.join(path, default_file_name())

    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)

    logger.info("Saved project to %s", path)
    return path

#==============================================================================
def load_activities(path):
    """Read activity list from a project file."""
    with open(path, 'rb') as f:
        activities = loads_activities(f.read())

    logger.info("Loaded %d activities from %s", len(activities), path)
    return activities
