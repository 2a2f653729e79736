"""
Tests for the Karous-Hjelt filter.
"""
import pytest

from geoplotter.filters import khFilter
from geoplotter.parsers import parseVLF
from geoplotter.records import VLFRecord, KHPoint
from geoplotter.Project import SAMPLE_VLF


class TestKHFilter:

    def test_single_pair(self):
        points = khFilter([VLFRecord(0, 45.2, -12.5), VLFRecord(10, 52.3, -15.8)])
        assert len(points) == 1
        assert points[0].x == 5
        assert points[0].y == pytest.approx(0.71)

    def test_less_than_two_records(self):
        assert khFilter([]) == []
        assert khFilter([VLFRecord(0, 1, 2)]) == []

    def test_coincident_stations_skipped(self):
        records = [VLFRecord(0, 1, 0), VLFRecord(0, 3, 0), VLFRecord(10, 5, 0)]
        assert khFilter(records) == [KHPoint(5, 0.2)]

    def test_sample_profile(self):
        points = khFilter(parseVLF(SAMPLE_VLF))
        assert len(points) == 12
        assert [p.x for p in points] == [5 + 10*i for i in range(12)]
        assert min(p.y for p in points) == pytest.approx(-2.15)
        assert max(p.y for p in points) == pytest.approx(1.06)

    def test_input_order_kept(self):
        # stations are not sorted here, that is up to the caller
        records = [VLFRecord(20, 1, 0), VLFRecord(10, 3, 0), VLFRecord(0, 7, 0)]
        points = khFilter(records)
        assert [p.x for p in points] == [15, 5]
        assert points[0].y == pytest.approx(-0.2)
        assert points[1].y == pytest.approx(-0.4)
