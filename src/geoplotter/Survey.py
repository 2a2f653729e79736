#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 13:41:27 2026
Survey classes holding the records of a VLF or resistivity profile, with
grouping and summary statistics used for plotting.

@author: GeoPlotter's core developers
"""
from decimal import Context, Decimal, ROUND_HALF_UP

import numpy as np
import pandas as pd

from geoplotter.records import ARRAY_TYPES, Point, SeriesGroup
from geoplotter.parsers import _buildVLF, _buildResistivity
from geoplotter.filters import khFilter

#%% grouping
def spacingKey(spacing):
    """Spacing rounded to 2 decimals, as a string. Exact ties are rounded up
    (0.125 gives '0.13'), unlike str.format which rounds them to even.
    """
    if not np.isfinite(spacing):
        return '{:.2f}'.format(spacing)
    return str(Decimal(spacing).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP,
                                         context=Context(prec=400)))


def groupBySpacing(records):
    """Group resistivity records by spacing for profile plotting.

    Parameters
    ----------
    records : list of ResistivityRecord
        Records to group.

    Returns
    -------
    groups : list of SeriesGroup
        One group per spacing rounded to 2 decimals (10.001 and 10.004 end
        up in the same group), ordered by ascending spacing. Points of each
        group are sorted by midpoint and split between measured and
        calculated apparent resistivities.
    """
    grouped = {}
    for r in records:
        grouped.setdefault(spacingKey(r.spacing), []).append(r)

    groups = []
    for key in sorted(grouped, key=float):
        points = sorted(grouped[key], key=lambda r: r.midpoint)
        measured = tuple(Point(p.midpoint, p.apparentResistivity)
                         for p in points if not p.isCalculated)
        calculated = tuple(Point(p.midpoint, p.apparentResistivity)
                           for p in points if p.isCalculated)
        groups.append(SeriesGroup(key, float(key), measured, calculated))
    return groups


#%% statistics
def vlfStats(records, khPoints=None):
    """Summary statistics of a VLF profile.

    Parameters
    ----------
    records : list of VLFRecord
        Non empty list of records.
    khPoints : list of KHPoint, optional
        If given and containing finite values, their range is added as
        'khMin' and 'khMax'.

    Returns
    -------
    stats : dict
    """
    if len(records) == 0:
        raise ValueError('No VLF records to compute statistics from')
    station = np.array([r.station for r in records])
    inPhase = np.array([r.inPhase for r in records])
    quad = np.array([r.quadrature for r in records])
    stats = {
        'points': len(records),
        'inPhaseMin': float(np.min(inPhase)),
        'inPhaseMax': float(np.max(inPhase)),
        'inPhaseAvg': float(np.mean(inPhase)),
        'quadMin': float(np.min(quad)),
        'quadMax': float(np.max(quad)),
        'quadAvg': float(np.mean(quad)),
        'stationMin': float(np.min(station)),
        'stationMax': float(np.max(station)),
        }
    if khPoints:
        kh = np.array([p.y for p in khPoints], dtype=float)
        kh = kh[np.isfinite(kh)]
        if len(kh) > 0:
            stats['khMin'] = float(np.min(kh))
            stats['khMax'] = float(np.max(kh))
    return stats


def resStats(records):
    """Summary statistics of a resistivity profile.

    Parameters
    ----------
    records : list of ResistivityRecord
        Non empty list of records.

    Returns
    -------
    stats : dict
        rhoMin, rhoMax and rhoAvg are None if no apparent resistivity is
        finite.
    """
    if len(records) == 0:
        raise ValueError('No resistivity records to compute statistics from')
    rho = np.array([r.apparentResistivity for r in records], dtype=float)
    rho = rho[np.isfinite(rho)]
    midpoint = np.array([r.midpoint for r in records])
    stats = {
        'points': len(records),
        'calculatedPoints': sum(1 for r in records if r.isCalculated),
        'rhoMin': None,
        'rhoMax': None,
        'rhoAvg': None,
        'midpointMin': float(np.min(midpoint)),
        'midpointMax': float(np.max(midpoint)),
        'spacingCount': len(set(spacingKey(r.spacing) for r in records)),
        'arrayType': records[0].arrayType,
        }
    if len(rho) > 0:
        stats['rhoMin'] = float(np.min(rho))
        stats['rhoMax'] = float(np.max(rho))
        stats['rhoAvg'] = float(np.mean(rho))
    return stats


#%% survey classes
class VLFSurvey(object):
    """VLF profile made of (station, in-phase, quadrature) records.

    Parameters
    ----------
    text : str, optional
        Raw table to parse.
    records : list of VLFRecord, optional
        Records to use instead of `text`.
    name : str, optional
        A personal name for the survey.
    debug : bool, optional
        Print parsing information. Default is True.
    """
    def __init__(self, text=None, records=None, name='', debug=True):
        self.name = name if name != '' else 'VLF'
        self.debug = debug
        self.nskipped = 0
        if text is not None:
            records, self.nskipped = _buildVLF(text)
        elif records is None:
            raise ValueError('No text supplied and no records supplied.')
        # sorted() is stable so records on the same station keep their order
        self.records = sorted(records, key=lambda r: r.station)
        self.df = pd.DataFrame(self.records, columns=['station', 'inPhase', 'quadrature'])
        if self.debug:
            print('{:d} records accepted, {:d} rows skipped'.format(
                len(self.records), self.nskipped))


    def __len__(self):
        return len(self.records)


    def __str__(self):
        return 'VLFSurvey class with {:d} stations'.format(len(self.records))


    def khFilter(self):
        """Karous-Hjelt filter over the (sorted) stations."""
        return khFilter(self.records)


    def computeStats(self, kh=False):
        """Summary statistics, including the K-H range if `kh` is True."""
        return vlfStats(self.records, self.khFilter() if kh else None)


    def showProfile(self, ax=None, kh=False, theme='ocean', darkMode=False):
        """Plot in-phase and quadrature against station.

        Parameters
        ----------
        ax : matplotlib.Axes, optional
            If specified, the plot will be plotted against this axis.
        kh : bool, optional
            If True, the Karous-Hjelt filter is added on a secondary axis.
        theme : str, optional
            Key of `geoplotter.themes.VLF_THEMES`.
        darkMode : bool, optional
            Alters coloring of the plot for a darker appearance.
        """
        from geoplotter.plotting import showVLF
        return showVLF(self.records, self.khFilter() if kh else None,
                       ax=ax, theme=theme, darkMode=darkMode)



class ResSurvey(object):
    """Resistivity profile made of 4 electrodes measurements.

    Parameters
    ----------
    text : str, optional
        Raw table to parse (P1, P2, P3, P4, K, R and optionally rho_a).
    arrayType : str, optional
        'wenner', 'schlumberger' or 'dipole'. Used to compute K when it is
        missing from the table.
    records : list of ResistivityRecord, optional
        Records to use instead of `text`.
    name : str, optional
        A personal name for the survey.
    debug : bool, optional
        Print parsing information. Default is True.
    """
    def __init__(self, text=None, arrayType='wenner', records=None, name='',
                 debug=True):
        if arrayType not in ARRAY_TYPES:
            raise ValueError('Unknown array type {:s}, available types are: {:s}'.format(
                str(arrayType), ', '.join(ARRAY_TYPES)))
        self.arrayType = arrayType
        self.name = name if name != '' else 'Resistivity'
        self.debug = debug
        self.nskipped = 0
        if text is not None:
            records, self.nskipped = _buildResistivity(text, arrayType)
        elif records is None:
            raise ValueError('No text supplied and no records supplied.')
        self.records = list(records)
        self.df = pd.DataFrame({
            'p1': [r.positions[0] for r in self.records],
            'p2': [r.positions[1] for r in self.records],
            'p3': [r.positions[2] for r in self.records],
            'p4': [r.positions[3] for r in self.records],
            'spacing': [r.spacing for r in self.records],
            'midpoint': [r.midpoint for r in self.records],
            'depth': [r.depth for r in self.records],
            'K': [r.kFactor for r in self.records],
            'resist': [r.resistance for r in self.records],
            'app': [r.apparentResistivity for r in self.records],
            'isCalculated': [r.isCalculated for r in self.records],
            })
        if self.debug:
            print('{:d} records accepted, {:d} rows skipped'.format(
                len(self.records), self.nskipped))
            nfallback = self.countDipoleFallback()
            if nfallback > 0:
                print('{:d} dipole-dipole measurements without dipole separation, '
                      'K = 2*pi*a used as approximation where K was missing'.format(nfallback))


    def __len__(self):
        return len(self.records)


    def countDipoleFallback(self):
        """Number of dipole-dipole records with no separation between the
        dipoles (n = 0), for which `computeK` falls back on 2*pi*a.
        """
        if self.arrayType != 'dipole' or len(self.records) == 0:
            return 0
        ie = (self.df['p3'] == self.df['p2']) & (self.df['p2'] != self.df['p1'])
        return int(ie.sum())


    def __str__(self):
        return 'ResSurvey class ({:s}) with {:d} measurements'.format(
            self.arrayType, len(self.records))


    def groupBySpacing(self):
        """Series to plot, one per spacing."""
        return groupBySpacing(self.records)


    def computeStats(self):
        """Summary statistics of the profile."""
        return resStats(self.records)


    def showProfile(self, ax=None, palette='primary', darkMode=False):
        """Plot apparent resistivity against midpoint, one line per spacing.

        Parameters
        ----------
        ax : matplotlib.Axes, optional
            If specified, the plot will be plotted against this axis.
        palette : str, optional
            Key of `geoplotter.themes.RESISTIVITY_PALETTES`.
        darkMode : bool, optional
            Alters coloring of the plot for a darker appearance.
        """
        from geoplotter.plotting import showResistivity
        return showResistivity(self.groupBySpacing(), self.arrayType, ax=ax,
                               palette=palette, darkMode=darkMode)
