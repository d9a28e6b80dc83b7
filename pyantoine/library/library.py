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

import logging
from types import MappingProxyType

import pandas as pd
from tabulate import tabulate

from pyantoine.antoine import Antoine

logger = logging.getLogger(__name__)

MURPHY = 'Murphy, Table B.4'
NIST = 'NIST Webbook'

# (key, name, source, SI units, [(Tmin, Tmax, A, B, C), ...])
# deg C and mmHg unless the SI flag is set, in which case K and bar
ANTOINE_DATA = [
    ('h2o',  'Water',     MURPHY, False, [(  0,     60,    8.10785, 1750.286, 235.0),
                                          ( 60,    150,    7.96681, 1668.210, 228.0)]),
    # Gases
    ('n2',   'Nitrogen',  NIST,   False, [(-210.01, -147.15, 6.6113,  264.651, 266.362)]),
    ('o2',   'Oxygen',    NIST,   False, [(-218.8,  -118.82, 6.8274,  340.024, 269.006)]),
    ('nh3',  'Ammonia',   MURPHY, False, [( -83,     60,    7.36050,  926.132, 240.17)]),
    # Alcohols
    ('meoh', 'Methanol',  MURPHY, False, [(-14,      65,    7.89750, 1474.08,  229.13),
                                          ( 65,     110,    7.97328, 1515.14,  232.85)]),
    ('etoh', 'Ethanol',   MURPHY, False, [( -2,     100,    8.04494, 1554.3,   222.65)]),
    # Aromatics
    ('bnz',  'Benzene',   MURPHY, False, [(  8,     113,    6.90656, 1211.033, 220.790)]),
    ('tol',  'Toluene',   MURPHY, False, [(  6,     137,    6.95464, 1344.8,   219.48)]),
    # Normal alkanes
    ('CH4',  'Methane',   NIST,   True,  [( 90.99,  189.99, 3.9895,   443.028,  -0.49)]),
    ('C2H6', 'Ethane',    NIST,   True,  [( 91.22,  144.13, 4.50706,  791.300,  -6.422),
                                          (144.13,  199.91, 3.93835,  659.739, -16.719)]),
    ('C3H8', 'Propane',   NIST,   True,  [(166.02,  230.5,  4.01158,  834.260, -22.763),
                                          (230.5,   277.5,  3.98292,  819.296, -24.417),
                                          (277.5,   360.8,  4.53678, 1149.360,  24.906)]),
    ('nC4',  'n-Butane',  NIST,   True,  [(135.42,  212.89, 4.70812, 1200.475, -13.013),
                                          (212.89,  272.66, 3.85002,  909.650, -36.146),
                                          (272.66,  425,    4.35576, 1175.581,  -2.071)]),
    ('nC5',  'n-Pentane', MURPHY, False, [(-50,      58,    6.85221, 1064.63,  233.01)]),
    ('nC6',  'n-Hexane',  MURPHY, False, [(-25,      92,    6.87601, 1171.17,  224.41)]),
    ('nC7',  'n-Heptane', MURPHY, False, [( -2,     124,    6.89677, 1264.90,  216.54)]),
    ('nC8',  'n-Octane',  MURPHY, False, [( 19,     152,    6.91868, 1351.99,  209.15)]),
]


class compound_library:
    """ Antoine models for a selected set of compounds, built once.
        Temperatures in deg C, pressures in mmHg
    """
    def __init__(self, entries=ANTOINE_DATA):
        models, self.names, self.sources = {}, {}, {}
        for key, name, source, si, rows in entries:
            models[key] = Antoine.SI(rows) if si else Antoine(rows)
            self.names[key] = name
            self.sources[key] = source
        self.data = MappingProxyType(models)
        self._upper = {key.upper(): key for key in models}
        logger.debug('Built compound library with %d compounds', len(models))

    def components(self):
        return list(self.data.keys())

    def compound(self, comp: str) -> Antoine:
        """ Case insensitive lookup, e.g. 'bnz', 'BNZ' or 'ch4' """
        key = self._upper.get(str(comp).upper())
        if key is None:
            raise ValueError(f"Component '{comp}' not in library. Choose from {self.components()}")
        return self.data[key]

    def table(self) -> pd.DataFrame:
        """ One row per interval, in deg C and mmHg """
        frames = []
        for key, model in self.data.items():
            df = model.to_frame()
            df.insert(0, 'Interval', range(1, len(df) + 1))
            df.insert(0, 'Source', self.sources[key])
            df.insert(0, 'Name', self.names[key])
            df.insert(0, 'Key', key)
            frames.append(df)
        return pd.concat(frames, ignore_index=True)

    def summary(self) -> str:
        df = self.table()
        headers = ['Key', 'Name', 'Source', '#', 'Tmin (C)', 'Tmax (C)', 'A', 'B', 'C', 'Pmin (mmHg)', 'Pmax (mmHg)']
        return tabulate(df.values.tolist(), headers=headers, floatfmt='.6g')


comp_library = compound_library()

def data():
    """ Read only mapping of compound key -> Antoine model """
    return comp_library.data

def compound(comp: str) -> Antoine:
    return comp_library.compound(comp)
