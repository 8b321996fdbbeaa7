# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Specify the constants to be used with cvxpy when solving linear programs as well as testing workflows

GEOSETS_ZERO = 1e-6  # Zero threshold for numerical stability (containment slack, zonotope norm)
DEGENERACY_TOLERANCE = 1e-9  # Zero threshold for interval widths and active constraints at the Chebyshev center
RANK_TOLERANCE = 1e-10  # Singular values at or below this threshold do not count towards the rank

# Solver used by default
DEFAULT_LP_SOLVER_STR = "CLARABEL"  # CLARABEL, MOSEK, CVXOPT, SCS, ECOS, GUROBI, OSQP

# CVXPY args used by default
DEFAULT_CVXPY_ARGS_LP = {"solver": DEFAULT_LP_SOLVER_STR}

# Bounds used by the random set generators
RANDOM_INTERIOR_POINT_BOUND = 0.8
RANDOM_OFFSET_LB = 0.1
RANDOM_OFFSET_UB = 1.0

# Testing workflow constants
TESTING_SHOW_PLOTS = False

# Plotting constants
DEFAULT_PATCH_ARGS_2D = {"edgecolor": "k", "facecolor": "skyblue"}
DEFAULT_VERTEX_ARGS = {"visible": False, "s": 30, "marker": "o", "color": "k"}
