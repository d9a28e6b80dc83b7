from .constants import DEGC2K, MMHG_PER_ATM, BAR_PER_ATM, MMHG_PER_BAR, LOG10_MMHG_PER_BAR, N_CURVE_POINTS, SOLVER_TOL, SOLVER_MAXITER, RESIDUAL_TOL, WEBBOOK_URL, WEBBOOK_TIMEOUT
