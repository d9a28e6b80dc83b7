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

Piecewise Antoine equation for pure component saturation conditions

    log10(Psat) = A - B / (T + C)

Units are deg C and mmHg throughout. A piecewise model is formed by giving
coefficient sets over disjoint temperature intervals; evaluations outside
every interval return NaN rather than raising.

    bnz = Antoine(8, 113, 6.90656, 1211.033, 220.790)
    bnz.Psat(60)                   # -> ~392.5 mmHg
    h2o = Antoine([[0, 60, 8.10785, 1750.286, 235.0],
                   [60, 150, 7.96681, 1668.210, 228.0]])
    h2o.Tsat([100, 760, 1500])     # -> array of deg C
    ch4 = Antoine.SI(90.99, 189.99, 3.9895, 443.028, -0.49)  # K and bar in
"""

import logging
from typing import NamedTuple, Tuple

import numpy as np
import numpy.typing as npt
import pandas as pd

from pyantoine.constants import DEGC2K, MMHG_PER_BAR, LOG10_MMHG_PER_BAR, N_CURVE_POINTS
from pyantoine.errors import ValidationError, ArgumentCountError
from pyantoine.shared_fns import convert_to_numpy, process_output

logger = logging.getLogger(__name__)

COLUMNS = ['Tmin', 'Tmax', 'A', 'B', 'C', 'Pmin', 'Pmax']


class AntoineInterval(NamedTuple):  # One validity segment of a piecewise Antoine curve
    Tmin: float
    Tmax: float
    A: float
    B: float
    C: float
    Pmin: float
    Pmax: float


def antoine_psat(T, A, B, C):
    return 10 ** (A - B / (T + C))

def antoine_tsat(P, A, B, C):
    return B / (A - np.log10(P)) - C

def _parse_args(args) -> np.ndarray:
    """ Normalises the two constructor syntaxes to an (n, 5) float array
        Antoine(Tmin, Tmax, A, B, C)     - scalars or equal length sequences
        Antoine([[Tmin, Tmax, A, B, C]]) - one row per interval
    """
    if len(args) == 1:
        try:
            rows = np.asarray(args[0], dtype=float)
        except (TypeError, ValueError):
            raise ArgumentCountError('Incorrect arguments to Antoine. Rows must be (Tmin, Tmax, A, B, C)')
        if rows.ndim == 1 and rows.size in (0, 5):
            rows = rows.reshape(-1, 5)
        if rows.ndim != 2 or rows.shape[1] != 5:
            raise ArgumentCountError('Incorrect arguments to Antoine. Rows must be (Tmin, Tmax, A, B, C)')
        return rows
    if len(args) == 5:
        try:
            cols = [np.atleast_1d(np.asarray(arg, dtype=float)) for arg in args]
        except (TypeError, ValueError):
            raise ArgumentCountError('Incorrect arguments to Antoine. Expected numeric Tmin, Tmax, A, B, C')
        if any(col.ndim != 1 for col in cols) or len(set(len(col) for col in cols)) != 1:
            raise ArgumentCountError('Tmin, Tmax, A, B, C must be scalars or sequences of equal length')
        return np.column_stack(cols)
    raise ArgumentCountError(f'Antoine takes 1 or 5 arguments ({len(args)} given)')

def _build_intervals(rows: np.ndarray):
    if len(rows) == 0:
        raise ValidationError('no intervals')
    if not np.all(np.isfinite(rows)):
        raise ValidationError('non-finite interval data')
    if np.any(rows[:, 0] >= rows[:, 1]):
        raise ValidationError('non-monotonic interval')

    # Require disjoint temperature intervals. A tied Tmin always fails here too
    rows = rows[np.argsort(rows[:, 0], kind='stable')]
    Tmin, Tmax, A, B, C = rows.T
    for i in range(1, len(rows)):
        if Tmax[i-1] > Tmin[i]:
            raise ValidationError('overlapping intervals')

    Pmin = antoine_psat(Tmin, A, B, C)
    Pmax = antoine_psat(Tmax, A, B, C)

    # Contiguous temperature intervals get contiguous pressure intervals too
    for i in range(1, len(rows)):
        if Tmax[i-1] == Tmin[i]:
            Pmax[i-1] = 0.5 * (Pmax[i-1] + Pmin[i])
            Pmin[i] = Pmax[i-1]
            logger.debug('Smoothed pressure junction at T=%g: P=%g', Tmin[i], Pmin[i])

    return [AntoineInterval(*map(float, vals)) for vals in zip(Tmin, Tmax, A, B, C, Pmin, Pmax)]


class Antoine:
    """ Piecewise Antoine model, immutable once built.

        Antoine(Tmin, Tmax, A, B, C)     Arguments are scalars or equal length sequences
        Antoine([[Tmin, Tmax, A, B, C],  One row per disjoint temperature interval
                 ...])
        Antoine.SI(...)                  Either syntax, with T in Kelvin and P in bar

        Raises ArgumentCountError for unsupported argument combinations, and
        ValidationError if any Tmin >= Tmax or the intervals overlap.
    """
    __slots__ = ('_intervals', '_cols')

    def __init__(self, *args):
        self._set(_build_intervals(_parse_args(args)))

    @classmethod
    def _from_intervals(cls, intervals):
        # Bypasses validation - only for intervals already checked by _build_intervals
        obj = cls.__new__(cls)
        obj._set(intervals)
        return obj

    def _set(self, intervals):
        intervals = tuple(intervals)
        cols = {}
        for n, name in enumerate(COLUMNS):
            col = np.array([iv[n] for iv in intervals], dtype=float)
            col.setflags(write=False)
            cols[name] = col
        object.__setattr__(self, '_intervals', intervals)
        object.__setattr__(self, '_cols', cols)
        logger.debug('Built Antoine model with %d interval(s) over %g to %g deg C',
                     len(intervals), *self.T_range)

    def __setattr__(self, name, value):
        raise AttributeError('Antoine objects are immutable')

    def __delattr__(self, name):
        raise AttributeError('Antoine objects are immutable')

    def __reduce__(self):
        # Rebuilt from the validated intervals, so pickle and deepcopy never set attributes
        return (self.__class__._from_intervals, (self._intervals,))

    @classmethod
    def SI(cls, *args):
        """ Creates an Antoine object from parameters in SI units (K, bar), as
            reported by the NIST Webbook. Same syntaxes as Antoine(). The
            resulting object works in deg C and mmHg.
        """
        raw = _build_intervals(_parse_args(args))
        intervals = [AntoineInterval(Tmin=iv.Tmin - DEGC2K,
                                     Tmax=iv.Tmax - DEGC2K,
                                     A=iv.A + LOG10_MMHG_PER_BAR,
                                     B=iv.B,
                                     C=iv.C + DEGC2K,
                                     Pmin=iv.Pmin * MMHG_PER_BAR,
                                     Pmax=iv.Pmax * MMHG_PER_BAR) for iv in raw]
        return cls._from_intervals(intervals)

    # Read only views of the interval data
    @property
    def intervals(self) -> Tuple[AntoineInterval, ...]:
        return self._intervals

    @property
    def Tmin(self) -> np.ndarray:  # Lower temperature limits
        return self._cols['Tmin']

    @property
    def Tmax(self) -> np.ndarray:  # Upper temperature limits
        return self._cols['Tmax']

    @property
    def A(self) -> np.ndarray:
        return self._cols['A']

    @property
    def B(self) -> np.ndarray:
        return self._cols['B']

    @property
    def C(self) -> np.ndarray:
        return self._cols['C']

    @property
    def Pmin(self) -> np.ndarray:  # Lower pressure limits
        return self._cols['Pmin']

    @property
    def Pmax(self) -> np.ndarray:  # Upper pressure limits
        return self._cols['Pmax']

    @property
    def n_intervals(self) -> int:
        return len(self._intervals)

    @property
    def T_range(self) -> Tuple[float, float]:
        return float(self.Tmin.min()), float(self.Tmax.max())

    @property
    def P_range(self) -> Tuple[float, float]:
        return float(self.Pmin.min()), float(self.Pmax.max())

    def __len__(self):
        return len(self._intervals)

    def __eq__(self, other):
        if not isinstance(other, Antoine):
            return NotImplemented
        return self._intervals == other._intervals

    def __hash__(self):
        return hash(self._intervals)

    def __repr__(self):
        rows = ', '.join(f'({iv.Tmin:.10g}, {iv.Tmax:.10g}, {iv.A:.10g}, {iv.B:.10g}, {iv.C:.10g})' for iv in self._intervals)
        return f'Antoine([{rows}])'

    def Psat(self, T: npt.ArrayLike):
        """ Saturation pressure (mmHg) at temperature T (deg C).
            T can be a scalar or array-like. Returns NaN for temperatures outside every interval
        """
        T, is_list = convert_to_numpy(T)
        P = np.full(T.shape, np.nan)
        with np.errstate(divide='ignore', invalid='ignore'):
            for iv in self._intervals:
                idx = (T >= iv.Tmin) & (T <= iv.Tmax)
                P[idx] = antoine_psat(T[idx], iv.A, iv.B, iv.C)
        return process_output(P, is_list)

    def Tsat(self, P: npt.ArrayLike):
        """ Saturation temperature (deg C) at pressure P (mmHg).
            Intervals are selected on the stored pressure limits. Returns NaN outside them
        """
        P, is_list = convert_to_numpy(P)
        T = np.full(P.shape, np.nan)
        with np.errstate(divide='ignore', invalid='ignore'):
            for iv in self._intervals:
                idx = (P >= iv.Pmin) & (P <= iv.Pmax)
                T[idx] = antoine_tsat(P[idx], iv.A, iv.B, iv.C)
        return process_output(T, is_list)

    def curve(self, T: npt.ArrayLike = None):
        """ Returns (T, Psat) arrays for plotting. If T is omitted, saturation
            pressures are computed at evenly spaced points from min(Tmin) to max(Tmax)
        """
        if T is None:
            T = np.linspace(*self.T_range, N_CURVE_POINTS)
        T = np.atleast_1d(np.asarray(T, dtype=float))
        return T, self.Psat(T)

    def to_frame(self) -> pd.DataFrame:
        """ One row per interval: Tmin, Tmax, A, B, C, Pmin, Pmax """
        return pd.DataFrame(list(self._intervals), columns=COLUMNS)


build = Antoine
build_from_si = Antoine.SI
