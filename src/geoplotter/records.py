#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 09:12:40 2026
Record types shared by the parsers, filters and survey containers.
All records are namedtuples so they cannot be modified once built.

@author: GeoPlotter's core developers
"""
from collections import namedtuple

ARRAY_TYPES = ('wenner', 'schlumberger', 'dipole')

DEPTH_FACTOR = 0.519 # empirical pseudo-depth constant (depth = a*0.519)

#%% survey records
VLFRecord = namedtuple('VLFRecord', ['station', 'inPhase', 'quadrature'])

ResistivityRecord = namedtuple('ResistivityRecord', [
    'arrayType',
    'positions', # (p1, p2, p3, p4) assumed as C1, P1, P2, C2
    'spacing',
    'midpoint',
    'depth',
    'kFactor',
    'resistance',
    'apparentResistivity',
    'isCalculated'])

#%% plot points and series
KHPoint = namedtuple('KHPoint', ['x', 'y'])

Point = namedtuple('Point', ['x', 'y'])

SeriesGroup = namedtuple('SeriesGroup', ['spacingKey', 'spacing', 'measured', 'calculated'])
