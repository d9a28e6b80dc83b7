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

import math

# Units: temperature in deg C, pressure in mmHg unless stated otherwise
DEGC2K = 273.15  # Offset to convert degrees C to Kelvin
MMHG_PER_ATM = 760.0  # mmHg per standard atmosphere
BAR_PER_ATM = 1.01325  # bar per standard atmosphere
MMHG_PER_BAR = MMHG_PER_ATM / BAR_PER_ATM  # mmHg per bar
LOG10_MMHG_PER_BAR = math.log10(MMHG_PER_BAR)  # Shift applied to Antoine A when converting bar -> mmHg

N_CURVE_POINTS = 201  # Number of points sampled by Antoine.curve() when no temperatures are given

# Root finding defaults for the binary VLE temperature solvers
SOLVER_TOL = 1e-10  # Absolute tolerance on temperature (deg C)
SOLVER_MAXITER = 100
RESIDUAL_TOL = 1e-8  # Largest dimensionless equilibrium residual accepted from the Newton solver

# NIST Chemistry Webbook, phase change data in SI units
WEBBOOK_URL = 'https://webbook.nist.gov/cgi/cbook.cgi'
WEBBOOK_TIMEOUT = 30  # seconds
