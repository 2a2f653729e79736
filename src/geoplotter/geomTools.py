#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 10:03:11 2026
Geometric factors for collinear surface arrays and resolution of the
apparent resistivity of a single measurement.

@author: GeoPlotter's core developers
"""
import numpy as np

#%% geometric factor
def _missing(value):
    return value is None or np.isnan(value)


def computeK(arrayType, positions):
    """Compute the geometric factor of a 4 electrodes measurement.

    Parameters
    ----------
    arrayType : str
        One of 'wenner', 'schlumberger' or 'dipole'.
    positions : list of float
        Electrode positions (p1, p2, p3, p4). For Wenner and Schlumberger
        they are assumed to be in the C1, P1, P2, C2 order, this is not
        checked.

    Returns
    -------
    K : float or None
        Geometric factor, None if it cannot be computed for this geometry
        or if the array type is unknown.

    Notes
    -----
    For a dipole-dipole with no separation between the dipoles (n = 0) the
    Wenner-like value 2*pi*a is returned instead. This is a weak
    approximation kept for compatibility with existing datasets.
    """
    if len(positions) < 4:
        return None
    p1, p2, p3, p4 = positions[:4]
    if any(_missing(p) for p in (p1, p2, p3, p4)):
        return None

    K = None
    if arrayType == 'wenner':
        a = np.abs(p2 - p1)
        if a > 0:
            K = 2*np.pi*a
    elif arrayType == 'schlumberger':
        L = np.abs(p4 - p1)/2 # half current electrode spacing
        a = np.abs(p3 - p2)/2 # half potential electrode spacing
        if a > 0 and L > a:
            K = np.pi*(L*L - a*a)/a
    elif arrayType == 'dipole':
        a = np.abs(p2 - p1) # dipole length
        sep = np.abs(p3 - p2) # dipole separation (n*a)
        n = sep/a if a > 0 else None
        if n is not None and n > 0:
            K = np.pi*n*(n + 1)*(n + 2)*a
        elif a > 0: # no separation, Wenner-like approximation
            K = 2*np.pi*a

    if K is None:
        return None
    return float(K)


#%% apparent resistivity
def resolveRho(K, R, suppliedRho=np.nan):
    """Resolve the apparent resistivity of a measurement.

    Parameters
    ----------
    K : float
        Geometric factor.
    R : float
        Transfer resistance.
    suppliedRho : float, optional
        Apparent resistivity given in the file (NaN if missing).

    Returns
    -------
    (rho, isCalculated) : tuple
        The supplied value with `isCalculated=False` if it is finite, else
        K*R with `isCalculated=True`. None if neither can be obtained.
    """
    if suppliedRho is not None and np.isfinite(suppliedRho):
        return float(suppliedRho), False
    if K is None or R is None:
        return None
    if np.isfinite(K) and np.isfinite(R):
        return float(K*R), True
    return None
