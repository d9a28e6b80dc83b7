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

import numpy as np
import numpy.typing as npt

def convert_to_numpy(input_data):
    """ Returns (array, is_list) where array is at least 1-D float and is_list
        flags whether the caller passed something other than a scalar
    """
    is_list = np.ndim(input_data) > 0
    # Ensuring even scalars become arrays with one element
    return np.atleast_1d(np.asarray(input_data, dtype=float)), is_list

def process_output(output_data: npt.ArrayLike, is_list: bool):
    # Scalars in, scalars out. Anything sizeable comes back as a numpy array
    if is_list:
        return np.asarray(output_data, dtype=float)
    return float(np.asarray(output_data).ravel()[0])

def mole_fractions(z1: float) -> np.ndarray:
    """ Binary mole fraction pair [z1, 1 - z1] """
    z1 = float(z1)
    if not 0 <= z1 <= 1:
        raise ValueError(f"Mole fraction must be between 0 and 1, got {z1}")
    return np.array([z1, 1 - z1])
