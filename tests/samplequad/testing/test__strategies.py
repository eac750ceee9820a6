import hypothesis

from samplequad.testing import evenly_spaced_samples, sample_counts


class TestSampleCounts:
    @hypothesis.given(n=sample_counts(parity="odd"))
    def test_odd(self, n):
        assert n % 2 == 1

    @hypothesis.given(n=sample_counts(min_value=2, parity="even"))
    def test_even(self, n):
        assert n % 2 == 0
        assert n >= 2


class TestEvenlySpacedSamples:
    @hypothesis.given(data=evenly_spaced_samples(min_size=2, max_size=20))
    def test_size_and_order(self, data):
        assert 2 <= len(data) <= 20
        assert all(a.x < b.x for a, b in zip(data, data[1:]))
