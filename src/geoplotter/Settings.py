#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 10:02:33 2026
Processing and display settings passed to the Project.

@author: GeoPlotter's core developers
"""
from geoplotter.records import ARRAY_TYPES
from geoplotter.themes import VLF_THEMES, RESISTIVITY_PALETTES

#%%
class Settings(object):
    """Populate self.param with processing and display settings.

    Parameters
    ----------
    arrayType : str, optional
        Electrode array of resistivity data: 'wenner', 'schlumberger' or
        'dipole'.
    applyKHFilter : bool, optional
        Compute the Karous-Hjelt filter on VLF data.
    **kwargs
        Display settings: vlfTheme, resPalette, darkMode.
    """
    defaults = {
        'arrayType': 'wenner',
        'applyKHFilter': True,
        'vlfTheme': 'ocean',
        'resPalette': 'primary',
        'darkMode': False,
        }

    choices = {
        'arrayType': ARRAY_TYPES,
        'vlfTheme': tuple(VLF_THEMES),
        'resPalette': tuple(RESISTIVITY_PALETTES),
        }

    def __init__(self, arrayType='wenner', applyKHFilter=True, **kwargs):
        self.param = dict(self.defaults) # dict of settings
        self.setParam('arrayType', arrayType)
        self.setParam('applyKHFilter', applyKHFilter)
        for key, value in kwargs.items():
            self.setParam(key, value)


    @property
    def arrayType(self):
        return self.param['arrayType']


    @property
    def applyKHFilter(self):
        return self.param['applyKHFilter']


    def setParam(self, key, value):
        """Set and check a single setting.

        Parameters
        ----------
        key : str
            Name of the setting.
        value : str or bool
            New value. Boolean settings also accept 'True' or 'False'.
        """
        if key not in self.defaults:
            raise ValueError('Unknown setting: {:s}'.format(str(key)))
        if isinstance(self.defaults[key], bool):
            if isinstance(value, str) and value.strip() in ['True', 'False']:
                value = value.strip() == 'True'
            if not isinstance(value, bool):
                raise ValueError('{:s} must be True or False, got {:s}'.format(key, str(value)))
        elif value not in self.choices[key]:
            raise ValueError('{:s} must be one of {:s}, got {:s}'.format(
                key, ', '.join(self.choices[key]), str(value)))
        self.param[key] = value


    def setSetting(self):
        """Create the setting string.

        Returns
        -------
        string of settings values, one 'key = value' per line
        """
        return '\n'.join('{} = {}'.format(str(key), str(value)) for key, value in self.param.items())


    def readSetting(self, settings):
        """Read a setting string (as created by `setSetting()`) and populate
        self.param. Blank lines and unknown keys are ignored.

        Parameters
        ----------
        settings : str
            Raw settings string.
        """
        for val in settings.split('\n'):
            if ' = ' not in val:
                continue
            key, value = val.split(' = ', 1)
            key = key.strip()
            if key in self.defaults:
                self.setParam(key, value.strip())
