import itertools

import pytest

from conftest import build_result
from schemas.context import DeviceInfo, VerificationContext
from verification.sampling import BASE_RATE, MAX_RATE, calculate_adaptive_sampling_rate, is_new_device


def make_context(operational_days=None, recent_anomalies=0, with_device=True):
    device = DeviceInfo(operational_days=operational_days) if with_device else None
    return VerificationContext(device=device, recent_anomalies=recent_anomalies)


def test_new_device_with_anomaly_high_trust():
    rate = calculate_adaptive_sampling_rate(
        build_result(0.95),
        make_context(operational_days=100, recent_anomalies=1),
    )
    assert rate == pytest.approx(0.20)


def test_mature_device_low_trust():
    rate = calculate_adaptive_sampling_rate(
        build_result(0.91),
        make_context(operational_days=200, recent_anomalies=0),
    )
    assert rate == pytest.approx(0.10)


def test_mature_device_high_trust_gets_base_rate():
    rate = calculate_adaptive_sampling_rate(build_result(0.99), make_context(operational_days=180))
    assert rate == pytest.approx(BASE_RATE)


def test_every_adjustment_hits_the_cap():
    rate = calculate_adaptive_sampling_rate(
        build_result(0.90),
        make_context(operational_days=10, recent_anomalies=5),
    )
    # 0.05 + 0.05 + 0.10 + 0.05
    assert rate == pytest.approx(0.25)
    assert rate <= MAX_RATE


def test_missing_device_is_treated_as_new():
    context = make_context(with_device=False)
    assert is_new_device(context) is True
    assert calculate_adaptive_sampling_rate(build_result(0.99), context) == pytest.approx(0.10)


def test_missing_operational_days_is_treated_as_new():
    context = make_context(operational_days=None)
    assert is_new_device(context) is True
    assert calculate_adaptive_sampling_rate(build_result(0.99), context) == pytest.approx(0.10)


def test_rate_always_within_bounds():
    days = [None, 0, 179, 180, 1000]
    anomalies = [0, 1, 10]
    trust = [0.90, 0.9199, 0.92, 1.0, 1.2]

    for d, a, t in itertools.product(days, anomalies, trust):
        rate = calculate_adaptive_sampling_rate(build_result(t), make_context(d, a))
        assert BASE_RATE <= rate <= MAX_RATE


def test_anomalies_reported_on_device_count():
    context = VerificationContext.model_validate(
        {"device": {"operational_days": 400, "recent_anomalies": 3}}
    )

    assert context.anomaly_count == 3
    assert calculate_adaptive_sampling_rate(build_result(0.95), context) == pytest.approx(0.15)


def test_anomaly_count_takes_larger_report():
    context = VerificationContext(
        device=DeviceInfo(operational_days=400, recent_anomalies=0),
        recent_anomalies=2,
    )
    assert context.anomaly_count == 2
    assert calculate_adaptive_sampling_rate(build_result(0.95), context) == pytest.approx(0.15)
