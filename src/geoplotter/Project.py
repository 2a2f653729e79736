#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 11:17:48 2026
Main entry point: turns pasted or uploaded text into plot ready profiles
according to the settings. Failures are reported in the returned result
rather than raised.

@author: GeoPlotter's core developers
"""
from geoplotter.Settings import Settings
from geoplotter.Survey import VLFSurvey, ResSurvey
from geoplotter.parsers import readTable

DATA_TYPES = ('vlf', 'resistivity')

SAMPLE_VLF = """Station	InPhase	Quadrature
0	45.2	-12.5
10	52.3	-15.8
20	48.7	-18.2
30	35.1	-22.1
40	15.6	-19.5
50	-5.9	-10.3
60	-20.4	5.2
70	-15.8	15.7
80	-8.1	12.4
90	2.5	8.9
100	10.1	4.1
110	15.0	-2.0
120	12.0	-8.0
"""

SAMPLE_RESISTIVITY = """P1	P2	P3	P4	K	R	Apparent_Rho
0	10	20	30	62.83	8.1	508.92
10	20	30	40	62.83	9.5
20	30	40	50	62.83	11.2	703.69
30	40	50	60	62.83	10.8
40	50	60	70	62.83	9.9	621.01
0	20	40	60	125.66	4.5
10	30	50	70	125.66	5.1	640.86
20	40	60	80	125.66	5.8
0	30	60	90	188.49	3.2	603.16
10	40	70	100	188.49	3.9	"""

MSG_NO_INPUT = 'Please paste or upload your data first!'
MSG_NO_VLF = 'No valid VLF data found. Expected format: Station, InPhase, Quadrature'
MSG_NO_RES = 'No valid Resistivity data found. Expected format: P1, P2, P3, P4, K, R.'
MSG_FAILED = 'An error occurred while plotting: {}'

#%%
class ProfileResult(object):
    """Outcome of `Project.process()`.

    `ok` is False when nothing can be plotted, `message` then tells why.
    `khPoints` is only filled for VLF data with the filter enabled,
    `groups` only for resistivity data.
    """
    def __init__(self, typ, ok=True, message='', survey=None, records=None,
                 khPoints=None, groups=None, stats=None):
        self.typ = typ
        self.ok = ok
        self.message = message
        self.survey = survey
        self.records = records if records is not None else []
        self.khPoints = khPoints if khPoints is not None else []
        self.groups = groups if groups is not None else []
        self.stats = stats if stats is not None else {}


    def __str__(self):
        if self.ok:
            return 'ProfileResult ({:s}) with {:d} records'.format(self.typ, len(self.records))
        return 'ProfileResult ({:s}) failed: {:s}'.format(self.typ, self.message)



class Project(object):
    """Process VLF or resistivity profiles.

    Parameters
    ----------
    settings : Settings, optional
        Array type, Karous-Hjelt flag and display settings. Default
        settings are used if not provided.
    typ : str, optional
        Type of data, either 'vlf' or 'resistivity'.
    debug : bool, optional
        Print processing information. Default is True.
    """
    def __init__(self, settings=None, typ='vlf', debug=True):
        self.settings = settings if settings is not None else Settings()
        self.debug = debug
        self.setDataType(typ)


    def setDataType(self, typ):
        """Set the type of data to process ('vlf' or 'resistivity')."""
        if typ not in DATA_TYPES:
            raise ValueError('Unknown data type {:s}, available types are: {:s}'.format(
                str(typ), ', '.join(DATA_TYPES)))
        self.typ = typ


    def process(self, text):
        """Parse `text` and compute everything needed to plot the profile.

        Parameters
        ----------
        text : str
            Raw table pasted or read from a file.

        Returns
        -------
        result : ProfileResult
            Never raises for bad data: `result.ok` is False and
            `result.message` explains the problem.
        """
        if text is None or text.strip() == '':
            return ProfileResult(self.typ, ok=False, message=MSG_NO_INPUT)
        try:
            if self.typ == 'vlf':
                return self._processVLF(text)
            return self._processResistivity(text)
        except Exception as e:
            if self.debug:
                print('Plotting error: {}'.format(e))
            return ProfileResult(self.typ, ok=False, message=MSG_FAILED.format(e))


    def _processVLF(self, text):
        survey = VLFSurvey(text, debug=self.debug)
        if len(survey) == 0:
            return ProfileResult('vlf', ok=False, message=MSG_NO_VLF, survey=survey)
        khPoints = survey.khFilter() if self.settings.applyKHFilter else []
        stats = survey.computeStats(kh=self.settings.applyKHFilter)
        return ProfileResult('vlf', survey=survey, records=survey.records,
                             khPoints=khPoints, stats=stats)


    def _processResistivity(self, text):
        survey = ResSurvey(text, arrayType=self.settings.arrayType, debug=self.debug)
        if len(survey) == 0:
            return ProfileResult('resistivity', ok=False, message=MSG_NO_RES, survey=survey)
        return ProfileResult('resistivity', survey=survey, records=survey.records,
                             groups=survey.groupBySpacing(),
                             stats=survey.computeStats())


    def importFile(self, fname):
        """Read a local text file and process it. Comma, semicolon, tab or
        space delimited files are accepted, quoted cells included.

        Parameters
        ----------
        fname : str
            Path of the file.

        Returns
        -------
        result : ProfileResult
        """
        try:
            text = readTable(fname)
        except OSError as e:
            if self.debug:
                print('Could not read {}: {}'.format(fname, e))
            return ProfileResult(self.typ, ok=False, message=MSG_FAILED.format(e))
        return self.process(text)


    def loadSample(self):
        """Process the sample dataset of the current data type. The VLF
        sample enables the Karous-Hjelt filter and the resistivity sample
        (Wenner) sets the array type accordingly.
        """
        if self.typ == 'vlf':
            self.settings.setParam('applyKHFilter', True)
            return self.process(SAMPLE_VLF)
        self.settings.setParam('arrayType', 'wenner')
        return self.process(SAMPLE_RESISTIVITY)


    def showResult(self, result, ax=None):
        """Plot a successful result with the display settings.

        Parameters
        ----------
        result : ProfileResult
            Result of `process()`.
        ax : matplotlib.Axes, optional
            If specified, the plot will be plotted against this axis.

        Returns
        -------
        fig : matplotlib.Figure
        """
        if not result.ok:
            raise ValueError('Nothing to plot: {:s}'.format(result.message))
        from geoplotter.plotting import showVLF, showResistivity # matplotlib only loaded to plot
        param = self.settings.param
        if result.typ == 'vlf':
            return showVLF(result.records, result.khPoints, ax=ax,
                           theme=param['vlfTheme'], darkMode=param['darkMode'])
        return showResistivity(result.groups, result.survey.arrayType, ax=ax,
                               palette=param['resPalette'], darkMode=param['darkMode'])
