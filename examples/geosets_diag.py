# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: A diagnostic python script to check if geosets is installed correctly.

from argparse import ArgumentParser

import matplotlib.pyplot as plt
import numpy as np

from geosets import HPolytope, Interval, VPolytope, Zonotope


def run_demo(use_plot_show, save_plot):
    # Also seen in README.md | Do not make the code line length longer than -----|
    # Zonotope with three generators, rotated and shifted
    rotate_angle = np.pi / 6
    R = np.array(
        [[np.cos(rotate_angle), -np.sin(rotate_angle)], [np.sin(rotate_angle), np.cos(rotate_angle)]]
    )
    Z = R @ Zonotope([[1, 0], [0, 0.5], [0.5, 0.5]], [0, 0]) + [4, 3]
    # Same set as a vertex list and its bounding interval
    P_V = VPolytope(Z.to_vertices())
    box = Z.bounding_interval()
    # Outer approximation of the Minkowski sum of a box and a triangle
    triangle = VPolytope([[0, 0], [1, 0], [0, 1]])
    P_H = HPolytope.from_interval(Interval([0, 0], [1, 1])) + triangle
    print(repr(Z), f"\n\tvolume: {Z.volume():1.3f}")
    print(repr(P_V), f"\n\tvolume: {P_V.volume():1.3f}")
    print(repr(box), f"\n\tvolume: {box.volume():1.3f}")
    print(repr(P_H), f"\n\tvolume: {P_H.volume():1.3f}")

    fig = plt.figure(figsize=(8, 4))
    ax_Z = fig.add_subplot(1, 2, 1)
    box.plot(ax=ax_Z, patch_args={"facecolor": None, "label": "Bounding interval"})
    Z.plot(ax=ax_Z, patch_args={"facecolor": "lightgreen", "label": "Zonotope"}, vertex_args={"color": "k"})
    ax_Z.set_title(f"Zonotope rotated by {np.rad2deg(rotate_angle):.0f}" + r"$^\circ$" + "\nand its bounding interval")
    ax_Z.legend(loc="best")
    ax_Z.grid()

    ax_H = fig.add_subplot(1, 2, 2)
    P_H.plot(ax=ax_H, patch_args={"facecolor": "lightpink", "label": "Outer approximation"})
    (VPolytope(Interval([0, 0], [1, 1]).to_vertices()) + triangle).plot(
        ax=ax_H, patch_args={"facecolor": "lightblue", "label": "Minkowski sum"}
    )
    ax_H.set_title("Minkowski sum of a box and a triangle")
    ax_H.legend(loc="best")
    ax_H.grid()
    if save_plot:
        plt.savefig("geosets_diag.png", dpi=300)
        print("Plot saved!")
    if use_plot_show:
        plt.show()
    else:
        plt.close()


if __name__ == "__main__":
    parser = ArgumentParser(
        prog="geosets_diag",
        description="A python script that performs simple set manipulations to make sure geosets is installed "
        "correctly",
    )
    parser.add_argument("--do_not_use_plot_show", action="store_false")
    parser.add_argument("--save_plot", action="store_true")
    args = parser.parse_args()
    run_demo(args.do_not_use_plot_show, args.save_plot)
