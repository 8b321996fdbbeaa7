# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: Check if methods in geosets are consistent across set representations

from geosets import GeoSet, HPolytope, Interval, VPolytope, Zonotope

public_methods_in_geoset = {v for v in dir(GeoSet) if callable(getattr(GeoSet, v)) and not v.startswith("_")}

for set_class in [Interval, HPolytope, VPolytope, Zonotope]:
    public_methods = {v for v in dir(set_class) if callable(getattr(set_class, v)) and not v.startswith("_")}
    name = set_class.__name__.lower()
    print(f"\n\nin_{name:s}_but_not_in_geoset\n", "\n".join(sorted(public_methods - public_methods_in_geoset)))
    # Should be empty for every concrete set
    print(f"\n\nabstract_methods_left_in_{name:s}\n", "\n".join(sorted(set_class.__abstractmethods__)))
