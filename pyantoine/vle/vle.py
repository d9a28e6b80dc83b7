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

Ideal (Raoult's law) vapor-liquid equilibrium for binary mixtures

    y_i * P = x_i * Psat_i(T)

The composition of one phase is specified (z1 for component 1, 1 - z1 for
component 2) and the other phase is returned alongside the unknown pressure
or temperature. With the vapor specified (the default) the pressure solve
returns the dew pressure and the temperature solve the dew temperature; with
the liquid specified they return bubble pressure and bubble temperature.

Temperatures in deg C, pressures in mmHg. Components are Antoine objects or
keys of the bundled compound library.
"""

import logging
from typing import NamedTuple, Union

import numpy as np
from scipy.optimize import brentq, newton

from pyantoine.antoine import Antoine
from pyantoine.classes import root_method, vle_phase
from pyantoine.constants import SOLVER_TOL, SOLVER_MAXITER, RESIDUAL_TOL
from pyantoine.errors import NoConvergenceError
from pyantoine.library import compound
from pyantoine.shared_fns import mole_fractions
from pyantoine.validate import validate_methods

logger = logging.getLogger(__name__)


class VLE_Result(NamedTuple):
    p: float          # Total pressure (mmHg)
    degc: float       # Temperature (deg C)
    x: np.ndarray     # Liquid mole fractions [x1, x2]
    y: np.ndarray     # Vapor mole fractions [y1, y2]
    iterations: int   # Root finder iterations, 0 for closed form results


def _models(comp1, comp2):
    return [c if isinstance(c, Antoine) else compound(c) for c in (comp1, comp2)]

def _psats(models, degc):
    return np.array([m.Psat(degc) for m in models])

def _split(z, psat, p, phase):
    # Other phase composition from Raoult's law, K_i = Psat_i / P
    with np.errstate(divide='ignore', invalid='ignore'):
        if phase == vle_phase.VAPOR:
            return p * z / psat, z
        return z, z * psat / p

def _segments(model):
    # Contiguous intervals join into one continuous segment
    segs = []
    for iv in model.intervals:
        if segs and segs[-1][1] == iv.Tmin:
            segs[-1][1] = iv.Tmax
        else:
            segs.append([iv.Tmin, iv.Tmax])
    return segs

def common_range(comp1, comp2):
    """ Temperature segments (deg C) over which both Antoine models are valid, as a
        sorted list of (lo, hi). Gaps between a model's intervals are excluded
    """
    segs1, segs2 = (_segments(m) for m in _models(comp1, comp2))
    common = []
    for lo1, hi1 in segs1:
        for lo2, hi2 in segs2:
            lo, hi = max(lo1, lo2), min(hi1, hi2)
            if lo < hi:
                common.append((lo, hi))
    return sorted(common)

def vle_pressure(comp1: Union[Antoine, str], comp2: Union[Antoine, str], z1: float, degc: float,
                 phase: vle_phase = vle_phase.VAPOR) -> VLE_Result:
    """ Dew (phase='VAPOR') or bubble (phase='LIQUID') pressure of a binary mixture at fixed temperature.

        comp1, comp2: Antoine objects or library keys
        z1: Mole fraction of component 1 in the specified phase
        degc: Temperature (deg C)
        phase: Phase whose composition is specified. Defaults to VAPOR

        Closed form. Saturation pressures outside the Antoine ranges are NaN,
        and propagate into the result rather than raising.
    """
    phase = validate_methods(['phase'], [phase])
    models = _models(comp1, comp2)
    z = mole_fractions(z1)
    psat = _psats(models, degc)

    with np.errstate(divide='ignore', invalid='ignore'):
        if phase == vle_phase.VAPOR:
            p = 1 / np.sum(z / psat)
        else:
            p = np.sum(z * psat)
    x, y = _split(z, psat, p, phase)
    return VLE_Result(float(p), float(degc), x, y, 0)

def vle_temperature(comp1: Union[Antoine, str], comp2: Union[Antoine, str], z1: float, p: float,
                    phase: vle_phase = vle_phase.VAPOR, rootmethod: root_method = root_method.BRENT,
                    t_guess: float = None, tol: float = SOLVER_TOL, maxiter: int = SOLVER_MAXITER) -> VLE_Result:
    """ Dew (phase='VAPOR') or bubble (phase='LIQUID') temperature of a binary mixture at fixed pressure.

        comp1, comp2: Antoine objects or library keys
        z1: Mole fraction of component 1 in the specified phase
        p: Total pressure (mmHg)
        phase: Phase whose composition is specified. Defaults to VAPOR
        rootmethod: 'BRENT' (default) brackets the root on each temperature segment where
                    both components are valid. 'NEWTON' uses a secant iteration started from t_guess
        t_guess: Starting temperature for NEWTON (deg C). Defaults to the middle of the widest segment
        tol: Absolute temperature tolerance (deg C)
        maxiter: Maximum root finder iterations

        Raises NoConvergenceError if no temperature in the common range satisfies the equilibrium
    """
    phase, rootmethod = validate_methods(['phase', 'rootmethod'], [phase, rootmethod])
    models = _models(comp1, comp2)
    z = mole_fractions(z1)
    p = float(p)
    if p <= 0:
        raise ValueError(f"Pressure must be positive, got {p}")

    segments = common_range(*models)
    if not segments:
        raise NoConvergenceError("No common temperature range: the components have no overlapping Antoine intervals")

    # Raoult consistency, scaled to be dimensionless: P * (1/P - sum(y_i/Psat_i)) or sum(x_i*Psat_i)/P - 1
    def residual(degc):
        psat = _psats(models, degc)
        with np.errstate(divide='ignore', invalid='ignore'):
            if phase == vle_phase.VAPOR:
                return 1 - p * np.sum(z / psat)
            return np.sum(z * psat) / p - 1

    if rootmethod == root_method.BRENT:
        # First segment whose end points bracket a sign change
        degc = None
        for t_lo, t_hi in segments:
            f_lo, f_hi = residual(t_lo), residual(t_hi)
            if not (np.isfinite(f_lo) and np.isfinite(f_hi)) or f_lo * f_hi > 0:
                continue
            try:
                degc, r = brentq(residual, t_lo, t_hi, xtol=tol, maxiter=maxiter, full_output=True)
            except (ValueError, RuntimeError) as e:
                raise NoConvergenceError(f"Brent solve failed between {t_lo:g} and {t_hi:g} deg C at P = {p:g} mmHg: {e}") from e
            break
        if degc is None:
            ranges = ', '.join(f'{lo:g} to {hi:g}' for lo, hi in segments)
            raise NoConvergenceError(f"No solution in {ranges} deg C at P = {p:g} mmHg")
    else:
        if t_guess is None:
            t_lo, t_hi = max(segments, key=lambda s: s[1] - s[0])
            t_guess = 0.5 * (t_lo + t_hi)
        try:
            degc, r = newton(residual, float(t_guess), tol=tol, maxiter=maxiter, full_output=True)
        except RuntimeError as e:
            raise NoConvergenceError(f"Newton solve failed from {t_guess:g} deg C at P = {p:g} mmHg: {e}") from e
        inside = any(lo <= degc <= hi for lo, hi in segments)
        if not r.converged or not inside or not abs(residual(degc)) < RESIDUAL_TOL:
            raise NoConvergenceError(f"Newton solve from {t_guess:g} deg C did not converge inside the valid temperature range")

    degc = float(degc)
    logger.debug('%s temperature %g deg C at P = %g mmHg after %d iterations', phase.name, degc, p, r.iterations)
    x, y = _split(z, _psats(models, degc), p, phase)
    return VLE_Result(p, degc, x, y, r.iterations)
