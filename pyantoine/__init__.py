"""
pyantoine
===================================

-------------------------------------------------------------------
Piecewise Antoine vapor pressure and ideal binary VLE calculations
-------------------------------------------------------------------

Pure component saturation pressure and temperature from the Antoine equation,
log10(P) = A - B / (T + C), with coefficient sets over disjoint temperature
intervals forming a piecewise model. Units are deg C and mmHg throughout;
Antoine.SI() accepts parameters in K and bar as reported by the NIST Webbook.

Includes;

- Antoine objects with validated piecewise intervals, Psat(T) and Tsat(P)
- A library of literature Antoine parameters for common compounds
- Dew and bubble pressure / temperature of ideal binary mixtures (Raoult's law)
- Retrieval of Antoine parameters from the NIST Chemistry Webbook

Submodules are imported on first access, e.g.

    import pyantoine
    bnz = pyantoine.library.compound('bnz')
    pyantoine.vle.vle_temperature('bnz', 'tol', z1=0.5, p=760)
"""

import importlib
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['antoine', 'classes', 'constants', 'errors', 'library',
           'shared_fns', 'validate', 'vle', 'webbook']


def __getattr__(name):
    # Sub-packages load on first access so 'import pyantoine' stays cheap
    if name not in __all__:
        raise AttributeError(f"Module 'pyantoine' has no attribute '{name}'")
    module = importlib.import_module(f'.{name}', __name__)
    globals()[name] = module
    return module


def __dir__():
    return sorted(set(globals()) | set(__all__))
