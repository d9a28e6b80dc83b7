#!/usr/bin/env python3
"""
Validation tests for antoine module.
Run with: python3 -m pytest pyantoine/tests/ -v
Or standalone: python3 pyantoine/tests/test_antoine.py
"""

import sys
import os
import copy
import logging
import pickle
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyantoine.antoine import Antoine, antoine_psat
from pyantoine.errors import ValidationError, ArgumentCountError

BNZ = (8, 113, 6.90656, 1211.033, 220.790)
H2O = [(0, 60, 8.10785, 1750.286, 235.0),
       (60, 150, 7.96681, 1668.210, 228.0)]

# =============================================================================
# Evaluation
# =============================================================================

def test_benzene_psat_60():
    """Benzene vapor pressure at 60 deg C"""
    bnz = Antoine(*BNZ)
    p = bnz.Psat(60)
    assert isinstance(p, float), f"Expected float, got {type(p)}"
    assert abs(p - 392.7) < 1.0, f"Psat(60) = {p}, expected ~392.7 mmHg"

def test_benzene_normal_boiling_point():
    """Tsat at 1 atm should be ~80.1 deg C"""
    bnz = Antoine(*BNZ)
    tb = bnz.Tsat(760)
    assert 79.5 < tb < 80.5, f"Normal boiling point = {tb}"

def test_psat_array_keeps_shape():
    """Array input returns array of same shape"""
    bnz = Antoine(*BNZ)
    T = np.array([[20, 40], [60, 80]])
    P = bnz.Psat(T)
    assert isinstance(P, np.ndarray)
    assert P.shape == T.shape
    assert np.all(np.diff(P.ravel()) > 0), "Psat should increase with temperature"
    P_list = bnz.Psat([20, 40, 60, 80])
    assert np.allclose(P_list, P.ravel(), rtol=0, atol=0)

def test_tsat_array_keeps_shape():
    """Tsat on a 2-D array returns the same shape, NaN where out of range"""
    bnz = Antoine(*BNZ)
    P = np.array([[100, 300], [760, 1e6]])
    T = bnz.Tsat(P)
    assert isinstance(T, np.ndarray)
    assert T.shape == P.shape
    assert np.isfinite(T[0]).all() and np.isfinite(T[1, 0])
    assert np.isnan(T[1, 1])
    assert np.allclose(bnz.Psat(T[0]), P[0], rtol=1e-9)

def test_out_of_range_is_nan():
    """Evaluations outside the intervals return NaN, not errors"""
    bnz = Antoine(*BNZ)
    assert np.isnan(bnz.Psat(-10))
    assert np.isnan(bnz.Psat(200))
    assert np.isnan(bnz.Tsat(1))
    assert np.isnan(bnz.Tsat(1e6))
    assert np.isnan(bnz.Tsat(-5))
    P = bnz.Psat([0, 60, 120])
    assert np.isnan(P[0]) and np.isnan(P[2])
    assert np.isfinite(P[1])

def test_gap_between_intervals_is_nan():
    """Temperatures between non-contiguous intervals return NaN"""
    model = Antoine([(0, 40, 8.10785, 1750.286, 235.0),
                     (60, 150, 7.96681, 1668.210, 228.0)])
    assert np.isnan(model.Psat(50))
    assert np.isfinite(model.Psat(39)) and np.isfinite(model.Psat(61))

def test_round_trip_each_interval():
    """Tsat(Psat(T)) == T inside every interval"""
    model = Antoine(H2O)
    for iv in model.intervals:
        T = np.linspace(iv.Tmin, iv.Tmax, 9)[1:-1]
        T2 = model.Tsat(model.Psat(T))
        assert np.allclose(T2, T, rtol=1e-9, atol=1e-9), f"Round trip failed on {iv}: {T2} vs {T}"

def test_curve_default_sampling():
    """curve() samples 201 points over the full temperature range"""
    model = Antoine(H2O)
    T, P = model.curve()
    assert len(T) == 201 and len(P) == 201
    assert T[0] == 0 and T[-1] == 150
    assert np.all(np.isfinite(P))
    T, P = model.curve([10, 20, 500])
    assert np.isnan(P[-1])

# =============================================================================
# Construction and validation
# =============================================================================

def test_parallel_and_row_syntax_equivalent():
    """Antoine(Tmin, Tmax, A, B, C) and Antoine([[...]]) build the same model"""
    cols = list(zip(*H2O))
    a = Antoine(*cols)
    b = Antoine(H2O)
    c = Antoine(np.array(H2O))
    assert a == b == c
    assert Antoine(*BNZ) == Antoine([BNZ]) == Antoine(list(BNZ))

def test_overlapping_intervals_rejected():
    with pytest.raises(ValidationError, match='overlapping intervals'):
        Antoine([(0, 60, 8.10785, 1750.286, 235.0),
                 (50, 100, 7.96681, 1668.210, 228.0)])

def test_tied_tmin_rejected():
    with pytest.raises(ValidationError, match='overlapping intervals'):
        Antoine([(0, 60, 8.10785, 1750.286, 235.0),
                 (0, 100, 7.96681, 1668.210, 228.0)])

def test_non_monotonic_rejected():
    with pytest.raises(ValidationError, match='non-monotonic interval'):
        Antoine(60, 0, 8.10785, 1750.286, 235.0)
    with pytest.raises(ValidationError, match='non-monotonic interval'):
        Antoine([(0, 60, 8.10785, 1750.286, 235.0),
                 (100, 100, 7.96681, 1668.210, 228.0)])

def test_validation_error_is_value_error():
    """ValidationError can be caught as ValueError"""
    with pytest.raises(ValueError):
        Antoine(60, 0, 8.10785, 1750.286, 235.0)

def test_argument_count_errors():
    with pytest.raises(ArgumentCountError):
        Antoine(8, 113, 6.90656)
    with pytest.raises(ArgumentCountError):
        Antoine()
    with pytest.raises(ArgumentCountError):
        Antoine([(8, 113, 6.90656, 1211.033)])
    with pytest.raises(ArgumentCountError):
        Antoine([0, 60], [60], 8.1, 1750.3, 235.0)
    with pytest.raises(ArgumentCountError):
        Antoine('a', 'b', 'c', 'd', 'e')

def test_empty_input_same_for_both_syntaxes():
    with pytest.raises(ValidationError, match='no intervals'):
        Antoine([])
    with pytest.raises(ValidationError, match='no intervals'):
        Antoine([], [], [], [], [])

def test_sort_order_does_not_matter():
    """Out of order rows give an identical model"""
    sorted_model = Antoine(H2O)
    reversed_model = Antoine(H2O[::-1])
    assert sorted_model == reversed_model
    T = np.linspace(-5, 155, 97)
    assert np.array_equal(sorted_model.Psat(T), reversed_model.Psat(T), equal_nan=True)
    P = np.linspace(1, 4000, 97)
    assert np.array_equal(sorted_model.Tsat(P), reversed_model.Tsat(P), equal_nan=True)

def test_junction_smoothing():
    """Contiguous intervals share an averaged pressure limit"""
    model = Antoine(H2O)
    p_lo = antoine_psat(60, *H2O[0][2:])
    p_hi = antoine_psat(60, *H2O[1][2:])
    assert p_lo != p_hi
    assert model.Pmax[0] == model.Pmin[1]
    assert np.isclose(model.Pmax[0], 0.5 * (p_lo + p_hi), rtol=1e-14)
    # Coefficients untouched
    assert list(model.A) == [8.10785, 7.96681]
    # Every pressure in range maps to a temperature
    assert np.all(np.isfinite(model.Tsat(np.linspace(model.Pmin[0], model.Pmax[1], 50))))

def test_si_conversion():
    """Antoine.SI matches the equivalent deg C / mmHg model"""
    row = (166.02, 230.5, 4.01158, 834.260, -22.763)
    si = Antoine.SI(*row)
    shift = np.log10(760 / 1.01325)
    ref = Antoine(row[0] - 273.15, row[1] - 273.15, row[2] + shift, row[3], row[4] + 273.15)
    T = np.linspace(row[0], row[1], 11)[1:-1] - 273.15
    assert np.allclose(si.Psat(T), ref.Psat(T), rtol=1e-10)
    assert np.allclose(si.Pmin, ref.Pmin, rtol=1e-10)
    assert np.allclose(si.Pmax, ref.Pmax, rtol=1e-10)
    assert np.isclose(si.Tmin[0], -107.13)

def test_si_junction_smoothing_preserved():
    """Pressure junctions built in bar are carried into mmHg"""
    ethane = Antoine.SI([(91.22, 144.13, 4.50706, 791.300, -6.422),
                         (144.13, 199.91, 3.93835, 659.739, -16.719)])
    assert ethane.Pmax[0] == ethane.Pmin[1]
    assert ethane.Tmax[0] == ethane.Tmin[1]

def test_immutable():
    model = Antoine(H2O)
    with pytest.raises(AttributeError):
        model.A = np.array([1, 2])
    with pytest.raises(ValueError):
        model.Tmin[0] = -50
    assert model.Tmin[0] == 0

def test_pickle_and_deepcopy():
    """Models survive pickling for use in worker processes"""
    model = Antoine.SI([(91.22, 144.13, 4.50706, 791.300, -6.422),
                        (144.13, 199.91, 3.93835, 659.739, -16.719)])
    for clone in (pickle.loads(pickle.dumps(model)), copy.deepcopy(model), copy.copy(model)):
        assert isinstance(clone, Antoine)
        assert clone == model
        assert np.array_equal(clone.Pmin, model.Pmin)
        assert clone.Psat(-100) == model.Psat(-100)
        with pytest.raises(AttributeError):
            clone.A = None

def test_si_logs_converted_range(caplog):
    """The build log reports the deg C range of an SI model, not Kelvin"""
    with caplog.at_level(logging.DEBUG, logger='pyantoine.antoine.antoine'):
        Antoine.SI(90.99, 189.99, 3.9895, 443.028, -0.49)
    built = [r.getMessage() for r in caplog.records if r.getMessage().startswith('Built Antoine model')]
    assert len(built) == 1
    assert '-182.16' in built[0] and '90.99' not in built[0]

def test_failed_build_leaves_existing_model():
    model = Antoine(*BNZ)
    with pytest.raises(ValidationError):
        Antoine([BNZ, BNZ])
    assert abs(model.Psat(60) - 392.7) < 1.0

def test_accessors():
    model = Antoine(H2O)
    assert len(model) == model.n_intervals == 2
    assert model.T_range == (0.0, 150.0)
    assert model.P_range[0] < model.P_range[1]
    df = model.to_frame()
    assert list(df.columns) == ['Tmin', 'Tmax', 'A', 'B', 'C', 'Pmin', 'Pmax']
    assert len(df) == 2
    assert repr(model).startswith('Antoine([(0, 60,')
    assert hash(model) == hash(Antoine(H2O))


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
