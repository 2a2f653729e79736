"""
Tests for the Project entry point.
"""
import warnings

import numpy as np
import pytest
from matplotlib.figure import Figure

from geoplotter import Project, Settings
from geoplotter.Project import (SAMPLE_VLF, SAMPLE_RESISTIVITY, MSG_NO_INPUT,
                                MSG_NO_VLF, MSG_NO_RES)
from geoplotter.Survey import ResSurvey


class TestProjectVLF:

    def setup_method(self):
        self.k = Project(Settings(applyKHFilter=True), typ='vlf', debug=False)

    def test_sample(self):
        result = self.k.process(SAMPLE_VLF)
        assert result.ok
        assert result.message == ''
        assert len(result.records) == 13
        assert len(result.khPoints) == 12
        assert result.stats['points'] == 13
        assert result.stats['inPhaseMin'] == -20.4
        assert result.stats['inPhaseMax'] == 52.3
        assert (result.stats['stationMin'], result.stats['stationMax']) == (0, 120)
        assert result.stats['khMin'] == pytest.approx(-2.15)
        assert result.stats['khMax'] == pytest.approx(1.06)

    def test_records_sorted(self):
        result = self.k.process('20 1 1\n0 2 2\n10 3 3')
        assert [r.station for r in result.records] == [0, 10, 20]

    def test_filter_disabled(self):
        k = Project(Settings(applyKHFilter=False), typ='vlf', debug=False)
        result = k.process(SAMPLE_VLF)
        assert result.ok
        assert result.khPoints == []
        assert 'khMin' not in result.stats

    def test_single_record_has_no_kh(self):
        result = self.k.process('0 1 2')
        assert result.ok
        assert result.khPoints == []

    def test_blank_input(self):
        for text in ['', '   \n\t', None]:
            result = self.k.process(text)
            assert not result.ok
            assert result.message == MSG_NO_INPUT

    def test_no_valid_data(self):
        result = self.k.process('Station InPhase Quadrature\nfoo bar baz')
        assert not result.ok
        assert result.message == MSG_NO_VLF
        assert result.records == []

    def test_load_sample_enables_filter(self):
        k = Project(Settings(applyKHFilter=False), typ='vlf', debug=False)
        result = k.loadSample()
        assert k.settings.applyKHFilter
        assert len(result.khPoints) == 12

    def test_idempotent(self):
        first = self.k.process(SAMPLE_VLF)
        second = self.k.process(SAMPLE_VLF)
        assert first.records == second.records
        assert first.khPoints == second.khPoints
        assert first.stats == second.stats

    def test_show_result(self):
        fig = self.k.showResult(self.k.process(SAMPLE_VLF))
        assert isinstance(fig, Figure)

    def test_show_failed_result(self):
        with pytest.raises(ValueError):
            self.k.showResult(self.k.process(''))

    def test_import_quoted_csv(self, tmp_path):
        fname = tmp_path / 'logger.csv'
        fname.write_text('"Station","InPhase","Quadrature"\n"0","45.2","-12.5"\n"10","52.3","-15.8"\n')
        result = self.k.importFile(str(fname))
        assert result.ok
        assert [r.station for r in result.records] == [0, 10]
        assert result.records[0].inPhase == 45.2
        assert len(result.khPoints) == 1


class TestProjectResistivity:

    def setup_method(self):
        self.k = Project(Settings(arrayType='wenner'), typ='resistivity', debug=False)

    def test_sample(self):
        result = self.k.process(SAMPLE_RESISTIVITY)
        assert result.ok
        assert len(result.records) == 10
        assert [g.spacingKey for g in result.groups] == ['10.00', '20.00', '30.00']
        assert result.stats['spacingCount'] == 3
        assert result.stats['calculatedPoints'] == 5
        assert result.khPoints == []

    def test_array_type_from_settings(self):
        k = Project(Settings(arrayType='schlumberger'), typ='resistivity', debug=False)
        result = k.process('0 10 20 30 0 2')
        assert result.records[0].arrayType == 'schlumberger'
        assert result.records[0].kFactor == pytest.approx(125.66, abs=1e-2)

    def test_no_valid_data(self):
        result = self.k.process('P1 P2 P3 P4 K R\n0 0 20 30 62.83 8.1')
        assert not result.ok
        assert result.message == MSG_NO_RES

    def test_internal_failure_reported(self, monkeypatch):
        def fail(self):
            raise ZeroDivisionError('division by zero')
        monkeypatch.setattr(ResSurvey, 'computeStats', fail)
        result = self.k.process(SAMPLE_RESISTIVITY)
        assert not result.ok
        assert result.message.startswith('An error occurred while plotting')
        assert 'division by zero' in result.message

    def test_load_sample_sets_wenner(self):
        k = Project(Settings(arrayType='dipole'), typ='resistivity', debug=False)
        result = k.loadSample()
        assert k.settings.arrayType == 'wenner'
        assert result.ok

    def test_import_file(self, tmp_path):
        fname = tmp_path / 'wenner.txt'
        fname.write_text(SAMPLE_RESISTIVITY)
        result = self.k.importFile(str(fname))
        assert result.ok
        assert len(result.records) == 10

    def test_import_missing_file(self, tmp_path):
        result = self.k.importFile(str(tmp_path / 'missing.txt'))
        assert not result.ok

    def test_import_semicolon_file(self, tmp_path):
        fname = tmp_path / 'wenner.csv'
        fname.write_text('P1;P2;P3;P4;K;R\n0;10;20;30;62.83;8.1\n10;20;30;40;62.83;9.5\n')
        result = self.k.importFile(str(fname))
        assert result.ok
        assert len(result.records) == 2
        assert result.records[0].apparentResistivity == pytest.approx(62.83*8.1)

    def test_dipole_without_separation_with_warnings_as_errors(self):
        k = Project(Settings(arrayType='dipole'), typ='resistivity', debug=False)
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            result = k.process('0 10 30 40 0 1\n0 10 10 20 0 1')
        assert result.ok
        assert len(result.records) == 2
        assert result.records[1].kFactor == pytest.approx(2*np.pi*10)

    def test_show_result(self):
        fig = self.k.showResult(self.k.process(SAMPLE_RESISTIVITY))
        assert isinstance(fig, Figure)


class TestProjectSetup:

    def test_default_settings(self):
        k = Project(debug=False)
        assert k.typ == 'vlf'
        assert k.settings.arrayType == 'wenner'

    def test_set_data_type(self):
        k = Project(debug=False)
        k.setDataType('resistivity')
        assert k.typ == 'resistivity'
        with pytest.raises(ValueError):
            k.setDataType('magnetic')

    def test_debug_prints_failure(self, capsys, monkeypatch):
        def fail(self):
            raise RuntimeError('boom')
        monkeypatch.setattr(ResSurvey, 'groupBySpacing', fail)
        k = Project(typ='resistivity')
        result = k.process(SAMPLE_RESISTIVITY)
        assert not result.ok
        assert 'Plotting error: boom' in capsys.readouterr().out
