"""
Tests for the benchmark service and its request adapter.

Validates:
  - Magnitude parsing and clamping
  - Structured error for non-numeric input
  - Single-run sections per mode, including the recursion sentinel
  - Chart assembly and time budget truncation
"""

import pytest
from bitbench.core.converter import BinaryResult
from bitbench.core.timer import TIME_QUANTUM_NS
from bitbench.errors import InvalidMagnitudeError
from bitbench.service import (
    BenchmarkService,
    Mode,
    RECURSION_WARNING,
    TOO_LARGE_SENTINEL,
    Variant,
)


STUB_CHART = {'sizes': [], 'points': []}


@pytest.fixture
def service():
    return BenchmarkService(warmup_calls=10)


@pytest.fixture
def no_chart(service, monkeypatch):
    monkeypatch.setattr(service, "build_chart", lambda n: STUB_CHART)
    return service


class TestParseMagnitude:
    @pytest.mark.parametrize("raw,expected", [
        ("0", 0),
        ("10", 10),
        ("+42", 42),
        ("-5", 0),
        ("1000000000", 1_000_000_000),
        ("1000000001", 1_000_000_000),
        ("99999999999999999999999", 1_000_000_000),
        ("9" * 5000, 1_000_000_000),
        ("-" + "9" * 5000, 0),
        ("0" * 5000 + "42", 42),
        ("-000", 0),
        (37, 37),
        (-1, 0),
    ])
    def test_valid(self, service, raw, expected):
        assert service.parse_magnitude(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", " 10", "10 ", "1_000", "0x10", None, 2.0, True])
    def test_invalid(self, service, raw):
        with pytest.raises(InvalidMagnitudeError):
            service.parse_magnitude(raw)

    def test_invalid_is_value_error(self, service):
        with pytest.raises(ValueError):
            service.parse_magnitude("nope")

    def test_custom_maximum(self):
        assert BenchmarkService(max_magnitude=500).parse_magnitude("501") == 500


class TestCoreOperations:
    def test_convert(self, service):
        assert service.convert(10) == BinaryResult("1010", 4)
        assert service.convert(10, Variant.RECURSIVE) == BinaryResult("1010", 4)

    def test_calibrate(self, service):
        assert service.calibrate(0) == 1_000_000
        assert 100 <= service.calibrate(123) <= 1_000_000

    def test_measure(self, service):
        assert service.measure(1_000_000_000) >= TIME_QUANTUM_NS
        assert service.measure(2_000_000, Variant.RECURSIVE) == TIME_QUANTUM_NS

    def test_measure_honours_recursion_limit(self):
        service = BenchmarkService(warmup_calls=0, recursion_limit=8)
        assert service.measure(9, Variant.RECURSIVE) == TIME_QUANTUM_NS

    def test_benchmark(self, service):
        point = service.benchmark(10)
        assert point.iterative_steps == point.recursive_steps == 4
        assert point.consistent is True

    def test_generate_dataset(self, service):
        assert service.generate_dataset(37) == [1, 2, 5, 10, 20, 37, 50, 100]


class TestMode:
    def test_variants(self):
        assert Mode.BOTH.variants == [Variant.ITERATIVE, Variant.RECURSIVE]
        assert Mode.RECURSIVE.variants == [Variant.RECURSIVE]

    def test_parse(self):
        assert Mode.parse("iterative") is Mode.ITERATIVE
        assert Mode.parse("sideways") is None
        assert Mode.parse(None) is None


class TestRun:
    def test_non_numeric(self, service, monkeypatch):
        def fail(n):
            raise AssertionError("core must not run on invalid input")

        monkeypatch.setattr(service, "build_chart", fail)
        assert service.run("abc", "both") == {'error': 'Input must be a number'}

    def test_zero_both(self, no_chart):
        response = no_chart.run("0", "both")
        assert response['n'] == 0
        for key in ('iterative', 'recursive'):
            assert response[key]['binary'] == "0"
            assert response[key]['steps'] == 1
            assert response[key]['time'] >= TIME_QUANTUM_NS
        assert response['chart'] is STUB_CHART

    def test_ten(self, no_chart):
        response = no_chart.run("10", "both")
        assert response['iterative']['binary'] == "1010"
        assert response['iterative']['steps'] == 4
        assert response['recursive']['steps'] == 4
        assert response['iterative']['binary'] == response['recursive']['binary']
        assert response['iterative']['time'] >= TIME_QUANTUM_NS
        assert response['recursive']['time'] >= TIME_QUANTUM_NS

    def test_too_large_for_recursion(self, no_chart):
        response = no_chart.run("2000000", "recursive")
        assert 'iterative' not in response
        assert response['recursive'] == {
            'binary': TOO_LARGE_SENTINEL,
            'steps': 0,
            'time': TIME_QUANTUM_NS,
            'warning': RECURSION_WARNING,
        }

    def test_iterative_only(self, no_chart):
        response = no_chart.run(5, "iterative")
        assert response['iterative']['binary'] == "101"
        assert 'recursive' not in response

    def test_unknown_mode_still_charts(self, no_chart):
        response = no_chart.run("5", "sideways")
        assert set(response) == {'n', 'chart'}

    def test_very_long_digit_string_clamped(self, no_chart):
        response = no_chart.run("9" * 5000, "iterative")
        assert response['n'] == 1_000_000_000
        assert response['iterative']['steps'] == 30

    def test_clamped(self, no_chart):
        response = no_chart.run("5000000000", "iterative")
        assert response['n'] == 1_000_000_000
        assert response['iterative']['steps'] == 30


class TestBuildChart:
    def test_small_chart(self, service):
        chart = service.build_chart(5)
        assert chart['sizes'] == [1, 2, 5, 10, 20, 50, 100]
        assert [p['n'] for p in chart['points']] == chart['sizes']
        assert 'truncated' not in chart
        for p in chart['points']:
            assert p['timeIterative'] >= TIME_QUANTUM_NS
            assert p['timeRecursive'] >= TIME_QUANTUM_NS
            assert p['stepsIterative'] == p['stepsRecursive'] == p['n'].bit_length()

    def test_budget_exhausted(self, caplog):
        service = BenchmarkService(warmup_calls=0, chart_budget_s=-1.0)
        with caplog.at_level("INFO", logger="bitbench.service"):
            chart = service.build_chart(37)
        assert chart == {'sizes': [], 'points': [], 'truncated': True}
        assert any("truncated" in r.getMessage() for r in caplog.records)

    def test_full_response_has_chart(self, service, monkeypatch):
        calls = []
        original = service.benchmark

        def recording(n):
            calls.append(n)
            return original(n)

        monkeypatch.setattr(service, "benchmark", recording)
        response = service.run("37", "both")
        assert response['chart']['sizes'] == [1, 2, 5, 10, 20, 37, 50, 100]
        assert calls == response['chart']['sizes']
