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

#==============================================================================
class ScheduleError(ValueError):
    """Structural problem in the activity network."""


#==============================================================================
class InvalidActivityReference(ScheduleError):
    """
    A predecessor name does not match any activity.

    Attributes
    ----------
    activity : str
        Name of the activity holding the reference
    reference : str
        Predecessor name that could not be resolved
    """

    def __init__(self, activity, reference):
        self.activity = activity
        self.reference = reference
        super().__init__(f"Activity '{activity}' depends on unknown activity '{reference}'")


UnknownPredecessor = InvalidActivityReference


#==============================================================================
class CyclicDependency(ScheduleError):
    """
    The predecessor graph contains a cycle.

    Attributes
    ----------
    activity : str
        One activity of the cycle
    cycle : list
        Activity names along the cycle, first name repeated at the end
    """

    def __init__(self, activity, cycle=None):
        self.activity = activity
        self.cycle = list(cycle) if cycle else [activity, activity]
        super().__init__(f"Circular dependency detected at '{activity}': "
                         + ' -> '.join(self.cycle))


#==============================================================================
class DuplicateActivityName(ScheduleError):
    """Two or more activities share the same name."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Activity name '{name}' is used more than once")


#==============================================================================
class ProjectFileError(ValueError):
    """Activity list can not be saved or loaded."""


class EmptyProjectError(ProjectFileError):
    """There are no activities to save."""


class InvalidProjectFile(ProjectFileError):
    """Project file does not hold an array of activity records."""
