#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 09:30:52 2026
Parse pasted or uploaded survey tables (VLF and resistivity) into records.
Lines that cannot be understood are skipped without raising.

@author: GeoPlotter's core developers
"""
import re, io, csv, chardet
import numpy as np
import pandas as pd

from geoplotter.records import VLFRecord, ResistivityRecord, DEPTH_FACTOR
from geoplotter.geomTools import computeK, resolveRho

VLF_HEADER = re.compile(r'station|inphase', re.IGNORECASE)
RES_HEADER = re.compile(r'electrode|pos|station', re.IGNORECASE)

_newline = re.compile(r'\r\n|\r|\n')
_delimiter = re.compile(r'[\t, ]+')
_number = re.compile(r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

#%% tokenizer
def readText(fname):
    """Read a text file whatever its encoding.

    Parameters
    ----------
    fname : str
        Path of the file.

    Returns
    -------
    text : str
        Content of the file.
    """
    with open(fname, 'rb') as f:
        raw = f.read()
    result = chardet.detect(raw)
    encoding = result['encoding'] if result['encoding'] is not None else 'utf-8'
    return raw.decode(encoding, errors='replace')


def readTable(fname):
    """Read a delimited text file and return it as tab separated text.

    The delimiter (comma, semicolon, tab or space) is detected from the
    first line and quoting is removed. Files pandas cannot tabulate
    (single column, ragged rows longer than the first one) are returned as
    read, the tokenizer then splits them on tabs, commas or spaces.

    Parameters
    ----------
    fname : str
        Path of the file.

    Returns
    -------
    text : str
        One line per row, cells separated by tabs.
    """
    text = readText(fname)
    try:
        df = pd.read_csv(io.StringIO(text, newline=None), sep=None, engine='python',
                         header=None, dtype=str, keep_default_na=False)
    except (csv.Error, pd.errors.ParserError, pd.errors.EmptyDataError):
        return text
    return '\n'.join('\t'.join(row) for row in df.fillna('').values.tolist())


def splitLines(text):
    """Return the non blank lines of `text`, stripped, whatever the newline style."""
    lines = [l.strip() for l in _newline.split(text)]
    return [l for l in lines if l != '']


def splitFields(line):
    """Split a line on runs of tabs, commas or spaces."""
    return [p for p in _delimiter.split(line.strip()) if p != '']


def parseFloat(token):
    """Parse the leading number of a token, NaN if there is none.

    Trailing characters are ignored so '12.5m' gives 12.5. Only the
    'Infinity' spelling gives an infinite value, 'nan' or 'inf' are
    treated as not a number.
    """
    m = _number.match(token.strip())
    if m is None:
        return np.nan
    val = m.group(0)
    if val.lstrip('+-') == 'Infinity':
        return -np.inf if val[0] == '-' else np.inf
    return float(val)


def dataLines(text, header):
    """Lines of `text` that do not match the `header` pattern."""
    return [l for l in splitLines(text) if header.search(l) is None]


#%% VLF
def _buildVLF(text):
    lines = dataLines(text, VLF_HEADER)
    records = []
    for line in lines:
        parts = splitFields(line)
        if len(parts) < 3:
            continue
        station, inPhase, quadrature = [parseFloat(p) for p in parts[:3]]
        if np.isfinite(station) and np.isfinite(inPhase) and np.isfinite(quadrature):
            records.append(VLFRecord(station, inPhase, quadrature))
    return records, len(lines) - len(records)


def parseVLF(text):
    """Parse VLF data (station, in-phase, quadrature).

    Parameters
    ----------
    text : str
        Raw table with at least 3 columns separated by tabs, commas or
        spaces. Header lines containing 'station' or 'inphase' are ignored.

    Returns
    -------
    records : list of VLFRecord
        Records in input order. Lines without 3 finite values are skipped.
    """
    return _buildVLF(text)[0]


#%% resistivity
def _buildResistivity(text, arrayType):
    lines = dataLines(text, RES_HEADER)
    records = []
    for line in lines:
        parts = splitFields(line)
        if len(parts) < 6: # P1, P2, P3, P4, K, R at least
            continue
        positions = tuple(parseFloat(p) for p in parts[:4])
        if any(np.isnan(p) for p in positions):
            continue
        spacing = abs(positions[1] - positions[0])
        if not spacing > 0:
            continue

        kFactor = parseFloat(parts[4])
        if not np.isfinite(kFactor) or kFactor == 0:
            kFactor = computeK(arrayType, positions)
            if kFactor is None or not np.isfinite(kFactor) or kFactor == 0:
                continue

        resistance = parseFloat(parts[5])
        suppliedRho = parseFloat(parts[6]) if len(parts) > 6 else np.nan
        resolved = resolveRho(kFactor, resistance, suppliedRho)
        if resolved is None:
            continue
        rho, isCalculated = resolved

        midpoint = (positions[0] + positions[3])/2
        depth = spacing*DEPTH_FACTOR
        if np.isfinite(midpoint) and np.isfinite(rho):
            records.append(ResistivityRecord(arrayType, positions, spacing,
                                             midpoint, depth, kFactor,
                                             resistance, rho, isCalculated))
    return records, len(lines) - len(records)


def parseResistivity(text, arrayType):
    """Parse resistivity data (P1, P2, P3, P4, K, R and optionally rho_a).

    Parameters
    ----------
    text : str
        Raw table separated by tabs, commas or spaces. Header lines
        containing 'electrode', 'pos' or 'station' are ignored.
    arrayType : str
        Array used for the survey ('wenner', 'schlumberger' or 'dipole'),
        needed when K is missing or zero in the table.

    Returns
    -------
    records : list of ResistivityRecord
        Records in input order. A missing apparent resistivity is computed
        as K*R and flagged with `isCalculated`. Rows with a null spacing,
        non numeric positions or no way to get K or rho_a are skipped.
    """
    return _buildResistivity(text, arrayType)[0]
