# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the 2D plotting method shared by all set representations

import warnings

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Polygon

from geosets.common.constants import DEFAULT_PATCH_ARGS_2D, DEFAULT_VERTEX_ARGS
from geosets.common.convex_hull import convex_hull_vertices
from geosets.common.errors import ConvexHullError
from geosets.common.vertex_enumeration import remove_redundant_vertices


def order_vertices_clockwise(vertices):
    """Order 2D vertices clockwise around their centroid.

    Args:
        vertices (array_like): Matrix (k times 2) with one vertex per row

    Returns:
        numpy.ndarray: Vertices sorted by decreasing angle with respect to the centroid. Fewer than three vertices are
        returned unchanged.
    """
    vertices = np.atleast_2d(vertices).astype(float)
    if vertices.shape[0] < 3:
        return vertices
    centroid = np.mean(vertices, axis=0)
    angles = np.arctan2(vertices[:, 1] - centroid[1], vertices[:, 0] - centroid[0])
    order = np.argsort(-angles, kind="stable")
    return vertices[order, :]


def sanitize_patch_args_and_vertex_args(patch_args, vertex_args):
    """Sanitize patch_args and vertex_args

    Args:
        patch_args (dict): Arguments to pass for plotting faces and edges.
        vertex_args (dict): Arguments to pass for plotting vertices.

    Raises:
        ValueError: facecolor and fill are contradictory

    Returns:
        tuple: patch_args and vertex_args with defaults filled in
    """
    # facecolor=None in 2D plotting does not produce frame plot | In that event, set fill to False
    patch_args = {} if patch_args is None else dict(patch_args)
    if "fill" in patch_args and not patch_args["fill"]:
        if patch_args.get("facecolor") is not None:
            raise ValueError("Can not have facecolor is not None and fill=False together!")
        patch_args.pop("facecolor", None)
    if "facecolor" in patch_args and patch_args["facecolor"] is None:
        patch_args.pop("facecolor")
        if patch_args.get("fill", False):
            raise ValueError("Can not have facecolor is None and fill=True together!")
        patch_args["fill"] = False
    patch_args = dict(DEFAULT_PATCH_ARGS_2D, **patch_args)
    if vertex_args is None:
        vertex_args = dict(DEFAULT_VERTEX_ARGS)
    else:
        # Vertices are drawn whenever vertex_args is given
        vertex_args = dict(dict(DEFAULT_VERTEX_ARGS, visible=True), **vertex_args)
    return patch_args, vertex_args


def plot(self, ax=None, dims=(0, 1), patch_args=None, vertex_args=None, autoscale_enable=True):
    """
    Plot the projection of a set on two coordinates using matplotlib's add_patch(Polygon()).

    Args:
        ax (Axes, optional): Axis on which the patch is to be plotted. Defaults to None, in which case a new figure is
            created.
        dims (tuple, optional): Pair of coordinates to plot. Defaults to (0, 1).
        patch_args (dict, optional): Arguments to pass for plotting faces and edges. See [Matplotlib-patch]_ for options
            for patch_args. Defaults to None, in which case we set edgecolor to black, and facecolor to skyblue.
        vertex_args (dict, optional): Arguments to pass for plotting vertices. See [Matplotlib-scatter]_ for options for
            vertex_args. Defaults to None, in which case we skip plotting the vertices.
        autoscale_enable (bool, optional): When set to True, matplotlib adjusts axes to view full set. Defaults to True.

    Raises:
        ValueError: When the set has fewer than two dimensions or dims is not a pair of distinct valid coordinates
        UserWarning: When an empty set or a set whose projection is degenerate is provided

    Returns:
        (axes, handle, handle): Tuple with axes containing the polygon, handle for plotting patch, handle for plotting
        vertices

    Notes:
        The vertices from :meth:`to_vertices` are projected on dims, reduced to the vertices of their convex hull, and
        sorted in clockwise direction with respect to their centroid. We can plot just the set frame without filling
        it by setting `patch_args['facecolor'] = None` or `patch_args['fill'] = False`.
    """
    if self.dim < 2:
        raise ValueError(f"Expected a set of dimension at least 2 for plotting. Got a {self.dim:d}D set.")
    dims = tuple(int(d) for d in dims)
    if len(dims) != 2 or dims[0] == dims[1] or min(dims) < 0 or max(dims) >= self.dim:
        raise ValueError(f"Expected dims to be a pair of distinct coordinates in [0, {self.dim - 1:d}]. Got {dims}.")
    elif self.empty():
        # Can't plot an empty set
        warnings.warn("Can not plot an empty set!", UserWarning)
        return plt.gca(), None, None

    if not ax:
        plt.figure()
        ax = plt.gca()

    patch_args, vertex_args = sanitize_patch_args_and_vertex_args(patch_args, vertex_args)

    projected_V = self.to_vertices()[:, dims]
    try:
        projected_V = convex_hull_vertices(projected_V)
    except ConvexHullError:
        # Projection is a point or a segment, which Qhull can not handle
        warnings.warn("Plotting a set whose 2D projection is degenerate!", UserWarning)
        projected_V = remove_redundant_vertices(projected_V)

    sorted_V = order_vertices_clockwise(projected_V)
    # Plot the patch
    h_patch = ax.add_patch(Polygon(sorted_V, closed=True, **patch_args))
    # Plot vertices
    h_vert = ax.scatter(sorted_V[:, 0], sorted_V[:, 1], **vertex_args)
    # Set up autoscaling
    ax.autoscale(enable=autoscale_enable)
    return ax, h_patch, h_vert  # handle(s) to the patch(es)
