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

from enum import Enum

class root_method(Enum):  # Scalar root finder used for VLE temperature solves
    BRENT = 0
    NEWTON = 1

class vle_phase(Enum):  # Phase whose composition is specified in a binary VLE calculation
    VAPOR = 0
    LIQUID = 1

class_dic = {
    "rootmethod": root_method,
    "phase": vle_phase,
}
