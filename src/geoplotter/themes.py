#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 08:41:05 2026
Color themes of the VLF plots and palettes of the resistivity plots. Kept
apart from the plotting module so the settings can be checked without
importing matplotlib.

@author: GeoPlotter's core developers
"""
VLF_THEMES = {
    'ocean': {'name': 'Ocean (Blue/Orange)', 'p1': '#00b4d8', 'p2': '#fca311'},
    'earth': {'name': 'Earth (Yellow/Green)', 'p1': '#90be6d', 'p2': '#f9c74f'},
    'classic': {'name': 'Classic (Blue/Red)', 'p1': '#1e90ff', 'p2': '#dc143c'},
    }

RESISTIVITY_PALETTES = {
    'primary': {'name': 'Primary (Green/Blue/Orange)',
                'colors': ['#00b67a', '#0ea5e9', '#f97316', '#8b5cf6', '#ec4899', '#ef4444']},
    'cool': {'name': 'Cool Tones (Blue/Purple)',
             'colors': ['#0077b6', '#48cae4', '#90e0ef', '#00b4d8', '#34a0a4', '#1f7a8c']},
    'warm': {'name': 'Warm Tones (Red/Yellow)',
             'colors': ['#e76f51', '#f4a261', '#e9c46a', '#a71d31', '#d83155', '#ffb703']},
    }

KH_COLOR = '#8b5cf6'
