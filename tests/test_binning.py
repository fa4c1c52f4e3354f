"""Tests for ratingcharts.binning."""

import logging

import pytest

from ratingcharts.binning import Bin, bin_samples, max_bin_size


class TestBinSamples:
    def test_bins_are_contiguous(self) -> None:
        bins = bin_samples([1, 2, 3], (0, 10), 5)
        assert len(bins) == 5
        assert bins[0].lower_bound == 0
        assert bins[-1].upper_bound == 10
        for a, b in zip(bins, bins[1:]):
            assert a.upper_bound == b.lower_bound

    def test_members_conserved(self) -> None:
        samples = [0, 0, 5, 10, 15, 20, 20]
        bins = bin_samples(samples, (0, 20), 80)
        assert sum(len(b) for b in bins) == len(samples)
        assert sorted(m for b in bins for m in b.members) == sorted(samples)

    def test_max_lands_in_last_bin(self) -> None:
        bins = bin_samples([20, 20], (0, 20), 4)
        assert len(bins[-1]) == 2

    def test_lower_edge_inclusive(self) -> None:
        bins = bin_samples([5], (0, 20), 4)
        assert bins[1].members == (5.0,)

    def test_empty_samples(self) -> None:
        bins = bin_samples([], (0, 10), 3)
        assert len(bins) == 3
        assert max_bin_size(bins) == 0

    def test_degenerate_domain_single_bin(self) -> None:
        bins = bin_samples([3, 3, 3], (3, 3), 80)
        assert len(bins) == 1
        assert len(bins[0]) == 3
        assert bins[0].width == 0

    def test_out_of_domain_dropped_with_warning(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="ratingcharts.binning"):
            bins = bin_samples([-1, 2, 11, float("nan")], (0, 10), 2)
        assert sum(len(b) for b in bins) == 1
        assert "3 of 4 samples" in caplog.text

    def test_invalid_bin_count(self) -> None:
        with pytest.raises(ValueError, match="bin_count"):
            bin_samples([1], (0, 1), 0)


class TestMaxBinSize:
    def test_largest(self) -> None:
        bins = [Bin(0, 1, (0.5,)), Bin(1, 2, (1.1, 1.2, 1.3)), Bin(2, 3)]
        assert max_bin_size(bins) == 3

    def test_no_bins(self) -> None:
        assert max_bin_size([]) == 0
