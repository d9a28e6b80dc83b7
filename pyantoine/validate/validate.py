#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyAntoine - Piecewise Antoine vapor pressure and ideal binary VLE
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

from pyantoine.classes import class_dic

def validate_methods(names, variables):
    """ Resolves method arguments given as strings into their Enum members.
        names: list of class_dic keys, variables: list of Enum members or strings
        Returns a single value if only one was passed, otherwise the list
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if isinstance(variables[m], str):
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                choices = [e.name for e in class_dic[method]]
                raise ValueError(f"Incorrect {method} specified: '{variables[m]}'. Choose from {choices}")
        elif not isinstance(variables[m], class_dic[method]):
            raise ValueError(f"Incorrect {method} specified: {variables[m]!r}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
