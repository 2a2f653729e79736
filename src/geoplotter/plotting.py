#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 08:55:19 2026
Rendering of VLF and resistivity profiles with matplotlib. Only consumes
the records and series produced by the parsers and survey classes.

@author: GeoPlotter's core developers
"""
import numpy as np
import matplotlib.pyplot as plt

from geoplotter.themes import VLF_THEMES, RESISTIVITY_PALETTES, KH_COLOR

#%% helpers
def darkenColor(hexColor, percent):
    """Darken a '#rrggbb' color by `percent` %."""
    channels = [int(hexColor[i:i+2], 16) for i in (1, 3, 5)]
    channels = [min(255, max(0, int(np.floor(c*(100 - percent)/100)))) for c in channels]
    return '#' + ''.join('{:02x}'.format(c) for c in channels)


def axisLimits(values, pad=0.12):
    """Axis limits around `values` padded by `pad` times their range.

    Parameters
    ----------
    values : array like
        Values to display.
    pad : float, optional
        Fraction of the range added on each side. Default is 0.12.

    Returns
    -------
    (vmin, vmax) : tuple of float
    """
    values = np.asarray(values, dtype=float)
    vmin = np.min(values) if values.size > 0 else np.nan
    vmax = np.max(values) if values.size > 0 else np.nan
    if not np.isfinite(vmin) or not np.isfinite(vmax):
        vmin, vmax = -1, 1
    vrange = vmax - vmin
    if vrange == 0:
        vrange = np.abs(vmax) or 1
    return float(vmin - vrange*pad), float(vmax + vrange*pad)


def _colors(darkMode):
    if darkMode:
        return {'bg': '#1e1e1e', 'text': '#e0e0e0', 'muted': '#a0a0a0',
                'grid': (1, 1, 1, 0.06), 'marker': '#1e1e1e'}
    return {'bg': '#ffffff', 'text': '#212529', 'muted': '#6c757d',
            'grid': (0, 0, 0, 0.06), 'marker': 'white'}


def _styleAxis(ax, colors, title, xlabel, ylabel):
    ax.set_facecolor(colors['bg'])
    ax.set_title(title, color=colors['text'], fontsize=14)
    ax.set_xlabel(xlabel, color=colors['muted'])
    ax.set_ylabel(ylabel, color=colors['muted'])
    ax.tick_params(colors=colors['muted'])
    ax.grid(True, color=colors['grid'])


#%% VLF
def showVLF(records, khPoints=None, ax=None, theme='ocean', darkMode=False):
    """Plot a VLF profile.

    Parameters
    ----------
    records : list of VLFRecord
        Records sorted by station.
    khPoints : list of KHPoint, optional
        If given and not empty, plotted on a secondary axis.
    ax : matplotlib.Axes, optional
        If specified, the plot will be plotted against this axis.
    theme : str, optional
        Key of `VLF_THEMES`.
    darkMode : bool, optional
        Alters coloring of the plot for a darker appearance.

    Returns
    -------
    fig : matplotlib.Figure
    """
    if theme not in VLF_THEMES:
        raise ValueError('Unknown VLF theme: {:s}'.format(str(theme)))
    colors = _colors(darkMode)
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.get_figure()
    fig.patch.set_facecolor(colors['bg'])

    station = [r.station for r in records]
    inPhase = [r.inPhase for r in records]
    quad = [r.quadrature for r in records]
    c1 = VLF_THEMES[theme]['p1']
    c2 = VLF_THEMES[theme]['p2']
    ax.plot(station, inPhase, '-o', color=c1, lw=3, ms=5, mfc=colors['marker'],
            mec=darkenColor(c1, 15), mew=2, label='In-Phase (%)')
    ax.plot(station, quad, '-o', color=c2, lw=3, ms=5, mfc=colors['marker'],
            mec=darkenColor(c2, 15), mew=2, label='Quadrature (%)')
    ax.set_ylim(axisLimits(inPhase + quad))
    title = 'VLF Survey - In-Phase & Quadrature Profile'
    handles, labels = ax.get_legend_handles_labels()

    if khPoints:
        kh = np.array([p.y for p in khPoints], dtype=float)
        ok = np.isfinite(kh)
        if ok.any():
            bx = ax.twinx()
            x = np.array([p.x for p in khPoints], dtype=float)
            bx.plot(x[ok], kh[ok], '-*', color=KH_COLOR, lw=2, ms=8,
                    label='Karous-Hjelt Filter')
            khmin, khmax = np.min(kh[ok]), np.max(kh[ok])
            khrange = khmax - khmin
            if khrange > 0:
                bx.set_ylim(khmin - khrange*0.2, khmax + khrange*0.2)
            bx.set_ylabel('K-H Value (Derivative)', color=KH_COLOR)
            bx.tick_params(axis='y', colors=KH_COLOR)
            title = 'VLF Survey Profile (In-Phase, Quadrature, and K-H Filter)'
            h, l = bx.get_legend_handles_labels()
            handles += h
            labels += l

    _styleAxis(ax, colors, title, 'Station (m)', 'Amplitude (%)')
    ax.legend(handles, labels, loc='upper right', fontsize=8)
    return fig


#%% resistivity
def showResistivity(groups, arrayType='wenner', ax=None, palette='primary',
                    darkMode=False):
    """Plot apparent resistivity profiles, one line per spacing.

    Parameters
    ----------
    groups : list of SeriesGroup
        Series ordered by spacing.
    arrayType : str, optional
        Array type, used in the title.
    ax : matplotlib.Axes, optional
        If specified, the plot will be plotted against this axis.
    palette : str, optional
        Key of `RESISTIVITY_PALETTES`. Colors are cycled if there are more
        spacings than colors.
    darkMode : bool, optional
        Alters coloring of the plot for a darker appearance.

    Returns
    -------
    fig : matplotlib.Figure
    """
    if palette not in RESISTIVITY_PALETTES:
        raise ValueError('Unknown resistivity palette: {:s}'.format(str(palette)))
    colors = _colors(darkMode)
    cycle = RESISTIVITY_PALETTES[palette]['colors']
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.get_figure()
    fig.patch.set_facecolor(colors['bg'])

    for i, group in enumerate(groups):
        color = cycle[i % len(cycle)]
        spacing = '{:g}'.format(group.spacing)
        if len(group.measured) > 0:
            x, y = zip(*group.measured)
            ax.plot(x, y, '-o', color=darkenColor(color, 10), lw=2.5, ms=6,
                    mfc=color, mec=color, zorder=1,
                    label='Depth Layer (a = {:s}m)'.format(spacing))
        if len(group.calculated) > 0:
            x, y = zip(*group.calculated)
            ax.plot(x, y, 's', ms=7, mfc='none', mec=color, mew=2.5, zorder=2,
                    label='Calculated ρ (a = {:s}m)'.format(spacing))

    ax.set_yscale('log')
    _styleAxis(ax, colors, '{:s} Array Apparent Resistivity Profile'.format(arrayType.upper()),
               'Station Midpoint (m)', r'Apparent Resistivity ($\Omega.m$) - Log Scale')
    ax.legend(loc='upper right', fontsize=8)
    return fig
