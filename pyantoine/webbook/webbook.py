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

Antoine parameters from the NIST Chemistry Webbook

NIST reports Antoine parameters in SI units, log10(P[bar]) = A - B / (T[K] + C),
so rows returned by search() are in K and bar and fetch() builds the model
with Antoine.SI().

    rows = webbook.search('n-butane')   # [(Tmin, Tmax, A, B, C, reference), ...]
    nc4 = webbook.fetch('n-butane')     # Antoine object in deg C and mmHg
"""

import html
import logging
import re
from typing import List, Tuple

import requests

from pyantoine.antoine import Antoine
from pyantoine.constants import WEBBOOK_URL, WEBBOOK_TIMEOUT
from pyantoine.errors import WebbookError, AmbiguousSearchError, WebbookParseError

logger = logging.getLogger(__name__)

_H1 = re.compile(r'<h1[^>]*>(.*?)</h1>', re.S | re.I)
_ANTOINE = re.compile(r'Antoine Equation Parameters.*?(<table.*?</table>)', re.S | re.I)
_ROW = re.compile(r'<tr[^>]*>(.*?)</tr>', re.S | re.I)
_CELL = re.compile(r'<td[^>]*>(.*?)</td>', re.S | re.I)
_TAG = re.compile(r'<[^>]+>')
_NUMBER = re.compile(r'[-+]?\d+(?:\.\d*)?(?:[eE][-+]?\d+)?')


def _text(fragment: str) -> str:
    text = html.unescape(_TAG.sub('', fragment))
    return ' '.join(text.replace('−', '-').split())

def get_page(name: str, timeout: float = WEBBOOK_TIMEOUT) -> str:
    params = {'Name': name.strip(), 'Units': 'SI', 'Mask': 4}
    try:
        response = requests.get(WEBBOOK_URL, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise WebbookError(f"Failed to read NIST Webbook for '{name}': {e}") from e
    return response.text

def parse_page(page: str, name: str = '') -> Tuple[str, List[tuple]]:
    """ Returns (species, rows) from a Webbook phase change page, rows as
        (Tmin_K, Tmax_K, A, B, C, reference)
    """
    h1 = _H1.search(page)
    if h1 is None:
        raise WebbookParseError(f"The page returned for '{name}' was not recognized")
    species = _text(h1.group(1))
    if species == 'Search Results':
        raise AmbiguousSearchError(f"Search for '{name}' returned an ambiguous result")

    table = _ANTOINE.search(page)
    if table is None:
        raise WebbookParseError(f"No Antoine parameters were found for '{name}' ({species})")

    rows = []
    for row in _ROW.findall(table.group(1)):
        cells = [_text(c) for c in _CELL.findall(row)]
        if len(cells) < 4:
            continue  # Header
        temps = _NUMBER.findall(cells[0])
        try:
            if len(temps) != 2:
                raise ValueError(cells[0])
            rows.append((float(temps[0]), float(temps[1]), float(cells[1]), float(cells[2]), float(cells[3]),
                         cells[4] if len(cells) > 4 else ''))
        except ValueError as e:
            raise WebbookParseError(f"Unparseable Antoine row for {species}: {cells}") from e
    if not rows:
        raise WebbookParseError(f"Antoine table for {species} has no data rows")
    logger.debug('Found %d Antoine row(s) for %s', len(rows), species)
    return species, rows

def search(name: str, timeout: float = WEBBOOK_TIMEOUT) -> List[tuple]:
    """ Antoine rows (Tmin_K, Tmax_K, A, B, C, reference) for a species name or formula """
    _, rows = parse_page(get_page(name, timeout), name)
    return rows

def disjoint_rows(rows: List[tuple]) -> List[tuple]:
    # NIST sources often overlap. Keep the lowest range and anything starting at or above the last kept Tmax
    kept = []
    for row in sorted(rows, key=lambda r: r[0]):
        if kept and row[0] < kept[-1][1]:
            logger.warning('Dropping Antoine row %g to %g K (%s), overlaps %g to %g K',
                           row[0], row[1], row[5], kept[-1][0], kept[-1][1])
            continue
        kept.append(row)
    return kept

def fetch(name: str, timeout: float = WEBBOOK_TIMEOUT) -> Antoine:
    """ Antoine object (deg C, mmHg) built from the Webbook's SI parameters """
    rows = disjoint_rows(search(name, timeout))
    return Antoine.SI([r[:5] for r in rows])
