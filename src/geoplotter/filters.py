#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 11:20:05 2026
Filters applied on VLF profiles.

@author: GeoPlotter's core developers
"""
from geoplotter.records import KHPoint

#%%
def khFilter(records):
    """Karous-Hjelt filter computed as the first difference of the in-phase
    component between adjacent stations.

    Parameters
    ----------
    records : list of VLFRecord
        VLF records sorted by ascending station.

    Returns
    -------
    points : list of KHPoint
        One point per pair of adjacent stations, located at the middle of
        the pair. Pairs with the same station are skipped. Empty if less
        than 2 records are given.

    Notes
    -----
    This is a simplification of the Karous and Hjelt (1983) filter, which
    convolves a 6 points kernel over the profile.
    """
    points = []
    if len(records) < 2:
        return points
    for p1, p2 in zip(records[:-1], records[1:]):
        dstation = p2.station - p1.station
        if dstation != 0:
            points.append(KHPoint((p1.station + p2.station)/2,
                                  (p2.inPhase - p1.inPhase)/dstation))
    return points
