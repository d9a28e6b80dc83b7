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


class AntoineError(Exception):  # Base class for all pyAntoine errors
    pass

class ValidationError(AntoineError, ValueError):  # Invalid temperature intervals at construction
    pass

class ArgumentCountError(AntoineError, TypeError):  # Unsupported constructor argument combination
    pass

class NoConvergenceError(AntoineError, RuntimeError):  # Root finder failed to locate a solution
    pass

class WebbookError(AntoineError):  # NIST Webbook could not be reached or returned an error
    pass

class AmbiguousSearchError(WebbookError):  # Webbook search matched more than one species
    pass

class WebbookParseError(WebbookError):  # Webbook page not recognised, or no Antoine table
    pass
