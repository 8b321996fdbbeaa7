# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  __init__ script for geosets package

from .common import (
    GeoSet,
    is_geoset,
    is_hpolytope,
    is_interval,
    is_vpolytope,
    is_zonotope,
    order_vertices_clockwise,
)
from .common.errors import (
    ConvexHullError,
    DataConversionError,
    DimensionMismatchError,
    EmptySetError,
    InfeasibleOptimizationError,
    InsufficientPointsError,
    SetNotImplementedError,
    SetOperationError,
)
from .HPolytope import HPolytope
from .Interval import Interval
from .VPolytope import VPolytope
from .Zonotope import Zonotope
