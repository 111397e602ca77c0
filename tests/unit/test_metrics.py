"""Unit tests for call outcome metrics"""

from voxa_metrics.domain.metrics import (
    compute_golden_window,
    compute_conversion,
    estimate_revenue,
    compute_sentiment_distribution,
    outcome_distribution,
    status_distribution,
    total_minutes,
)


def test_golden_window_missing_response_time_counts_outside(make_call):
    """Test calls without response time stay in the total and the median"""
    calls = [
        make_call("c1", response_time=30),
        make_call("c2", response_time=90),
        make_call("c3", response_time=None),
    ]

    result = compute_golden_window(calls)

    assert result.within_window == 1
    assert result.outside_window == 2
    assert result.percentage == 33.3
    assert result.median_response_time == 90  # median of [30, 90, 9999]


def test_golden_window_boundary_is_inclusive(make_call):
    """Test a call at exactly 60 seconds is within the window"""
    result = compute_golden_window([make_call("c1", response_time=60), make_call("c2", response_time=60.5)])

    assert result.within_window == 1
    assert result.percentage == 50.0


def test_golden_window_even_count_median(make_call):
    """Test median averages the two middle values"""
    calls = [make_call(f"c{i}", response_time=t) for i, t in enumerate([45, 10, 30, 20])]

    assert compute_golden_window(calls).median_response_time == 25


def test_golden_window_median_rounds_half_up(make_call):
    calls = [make_call("c1", response_time=10), make_call("c2", response_time=11)]

    assert compute_golden_window(calls).median_response_time == 11


def test_golden_window_sample(sample_calls):
    result = compute_golden_window(sample_calls)

    assert result.within_window == 2
    assert result.outside_window == 3
    assert result.percentage == 40.0
    assert result.median_response_time == 120


def test_golden_window_custom_threshold(make_call):
    """Test window and sentinel can be overridden"""
    calls = [make_call("c1", response_time=90), make_call("c2", response_time=None)]

    result = compute_golden_window(calls, window_seconds=120, missing_response_time=600)

    assert result.within_window == 1
    assert result.median_response_time == 345


def test_golden_window_no_calls():
    result = compute_golden_window([])

    assert result.percentage == 0
    assert result.within_window == 0
    assert result.outside_window == 0
    assert result.median_response_time == 0


def test_conversion_not_interested_is_union(make_call):
    """Test outcome and failed status both count as not interested"""
    calls = [
        make_call("c1", outcome="appointment"),
        make_call("c2", outcome="appointment"),
        make_call("c3", outcome="not-interested"),
        make_call("c4", status="failed"),
    ]

    result = compute_conversion(calls)

    assert result.appointments == 2
    assert result.conversion_rate == 50.0
    assert result.not_interested == 2
    assert result.qualified == 0


def test_conversion_call_matching_both_signals_counted_once(make_call):
    calls = [make_call("c1", outcome="not_interested", status="failed"), make_call("c2", outcome="other")]

    assert compute_conversion(calls).not_interested == 2


def test_conversion_qualified_and_rounding(make_call):
    calls = [
        make_call("c1", outcome="appointment"),
        make_call("c2", outcome="qualified"),
        make_call("c3", outcome="callback"),
    ]

    result = compute_conversion(calls)

    assert result.conversion_rate == 33.3
    assert result.qualified == 1
    assert result.not_interested == 0


def test_conversion_no_calls():
    result = compute_conversion([])

    assert result.conversion_rate == 0
    assert result.appointments == 0
    assert result.qualified == 0
    assert result.not_interested == 0


def test_estimate_revenue(make_call):
    """Test each appointment is worth the average deal value"""
    calls = [make_call(f"c{i}", outcome="appointment") for i in range(3)] + [make_call("c9", outcome="interested")]

    assert estimate_revenue(calls, 1000) == 3000
    assert estimate_revenue(calls, 0) == 0
    assert estimate_revenue(calls, None) == 0
    assert estimate_revenue(calls) == 0


def test_sentiment_distribution_ignores_unscored_calls(sample_calls):
    result = compute_sentiment_distribution(sample_calls)

    assert result.positive == 1
    assert result.neutral == 1
    assert result.negative == 1
    assert result.average == 0.57  # (0.9 + 0.6 + 0.2) / 3


def test_sentiment_distribution_bucket_boundaries(make_call):
    calls = [
        make_call("c1", sentiment=0.7),
        make_call("c2", sentiment=0.4),
        make_call("c3", sentiment=0.39),
        make_call("c4", sentiment=0.0),
    ]

    result = compute_sentiment_distribution(calls)

    assert result.positive == 1
    assert result.neutral == 1
    assert result.negative == 2


def test_sentiment_distribution_no_scores(make_call):
    result = compute_sentiment_distribution([make_call("c1")])

    assert result.positive == 0
    assert result.neutral == 0
    assert result.negative == 0
    assert result.average == 0


def test_outcome_and_status_distribution(sample_calls):
    outcomes = outcome_distribution(sample_calls)
    statuses = status_distribution(sample_calls)

    assert outcomes["appointment"].count == 1
    assert outcomes["appointment"].percentage == 20.0
    assert outcomes["callback"].count == 0
    assert statuses["completed"].count == 3
    assert statuses["completed"].percentage == 60.0
    assert statuses["busy"].percentage == 0


def test_distribution_no_calls():
    assert all(share.count == 0 and share.percentage == 0 for share in status_distribution([]).values())


def test_total_minutes(sample_calls):
    assert total_minutes(sample_calls) == 10.0


def test_golden_window_infinite_response_time(make_call):
    """Test an infinite response time counts outside without raising"""
    result = compute_golden_window([make_call("c1", response_time=float("inf"))])

    assert result.outside_window == 1
    assert result.percentage == 0
    assert result.median_response_time == float("inf")
