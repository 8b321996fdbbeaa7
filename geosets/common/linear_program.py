# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Wrap CVXPY to solve the linear programs used by the set representations

import logging

import cvxpy as cp
import numpy as np

from geosets.common.constants import DEFAULT_CVXPY_ARGS_LP
from geosets.common.errors import InfeasibleOptimizationError

logger = logging.getLogger(__name__)

OPTIMAL_STATUSES = [cp.OPTIMAL, cp.OPTIMAL_INACCURATE]
INFEASIBLE_STATUSES = [cp.INFEASIBLE, cp.INFEASIBLE_INACCURATE]
UNBOUNDED_STATUSES = [cp.UNBOUNDED, cp.UNBOUNDED_INACCURATE]


def _solve(problem, cvxpy_args, task_str):
    """Solve a CVXPY problem and translate solver errors into InfeasibleOptimizationError."""
    if cvxpy_args is None:
        cvxpy_args = DEFAULT_CVXPY_ARGS_LP
    logger.debug("Solving LP (%s) with %d constraints using %s", task_str, len(problem.constraints), cvxpy_args)
    try:
        problem.solve(**cvxpy_args)
    except cp.error.SolverError as err:
        raise InfeasibleOptimizationError(
            f"Unable to solve the task ({task_str:s}). CVXPY returned error: {str(err)}", source=err
        ) from err
    logger.debug("LP (%s) returned status %s", task_str, problem.status)
    return problem.status


def solve_linear_program(x, objective, constraints, cvxpy_args=None, task_str="", maximize=False):
    """Solve a linear program with CVXPY and return the optimal point and value.

    Args:
        x (cvxpy.Variable): CVXPY variable whose optimal value is returned
        objective (cvxpy.Expression): Affine CVXPY expression to optimize
        constraints (list): CVXPY constraints
        cvxpy_args (dict, optional): CVXPY arguments to be passed to the solver. Defaults to None, in which case
            DEFAULT_CVXPY_ARGS_LP from geosets.common.constants is used.
        task_str (str, optional): Task string to be used in error messages. Defaults to ''.
        maximize (bool, optional): When True, the objective is maximized. Defaults to False.

    Raises:
        InfeasibleOptimizationError: Solver failed, or the problem is infeasible or unbounded

    Returns:
        tuple: A tuple with two items:
            #. x_value (numpy.ndarray): Optimal value of x
            #. optimal_value (float): Optimal value of the linear program
    """
    if maximize:
        problem = cp.Problem(cp.Maximize(objective), constraints)
    else:
        problem = cp.Problem(cp.Minimize(objective), constraints)
    status = _solve(problem, cvxpy_args, task_str)
    if status in OPTIMAL_STATUSES:
        return np.array(x.value, dtype=float), float(problem.value)
    elif status in INFEASIBLE_STATUSES:
        raise InfeasibleOptimizationError(f"The task ({task_str:s}) is infeasible!", status=status)
    elif status in UNBOUNDED_STATUSES:
        raise InfeasibleOptimizationError(f"The task ({task_str:s}) is unbounded!", status=status)
    else:
        raise InfeasibleOptimizationError(
            f"Could not solve the task ({task_str:s}), due to an unhandled status: {status}.", status=status
        )


def is_feasible(constraints, cvxpy_args=None, task_str=""):
    """Check feasibility of a list of linear constraints by solving a linear program with zero objective.

    Args:
        constraints (list): CVXPY constraints
        cvxpy_args (dict, optional): CVXPY arguments to be passed to the solver. Defaults to None, in which case
            DEFAULT_CVXPY_ARGS_LP from geosets.common.constants is used.
        task_str (str, optional): Task string to be used in error messages. Defaults to ''.

    Raises:
        InfeasibleOptimizationError: Solver failed or returned an unexpected status

    Returns:
        bool: True when the constraints admit a solution
    """
    problem = cp.Problem(cp.Minimize(0), constraints)
    status = _solve(problem, cvxpy_args, task_str)
    if status in OPTIMAL_STATUSES:
        return True
    elif status in INFEASIBLE_STATUSES:
        return False
    else:
        raise InfeasibleOptimizationError(
            f"Could not decide feasibility for the task ({task_str:s}), due to an unhandled status: {status}.",
            status=status,
        )
