import random

from conftest import build_result
from sampler.smart_sampler import SamplerConfig, SmartSampler
from schemas.result import Decision, DecisionKind


def approved(reading_id, rate):
    return Decision.from_result(
        build_result(0.99, reading_id=reading_id),
        DecisionKind.AUTO_APPROVED,
        "test",
        requires_sampling=True,
        sampling_rate=rate,
    )


def flagged(reading_id):
    return Decision.from_result(build_result(0.8, reading_id=reading_id), DecisionKind.FLAGGED_FOR_REVIEW, "test")


def rejected(reading_id):
    return Decision.from_result(build_result(0.1, reading_id=reading_id), DecisionKind.REJECTED, "test")


def test_target_count_follows_rates(empty_context):
    decisions = [approved(f"a-{i}", 0.30) for i in range(10)]
    plan = SmartSampler().select_samples(decisions, empty_context, rng=random.Random(5))

    assert plan.candidates == 10
    assert plan.target_sample_count == 3
    assert len(plan.selected) == 3
    assert plan.effective_rate == "30.0%"


def test_selection_in_batch_order_without_duplicates(empty_context):
    decisions = [approved(f"a-{i}", 0.30) for i in range(20)]
    plan = SmartSampler().select_samples(decisions, empty_context, rng=random.Random(11))

    positions = [s.position for s in plan.selected]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)
    for sample in plan.selected:
        assert decisions[sample.position].reading_id == sample.reading_id
        assert sample.sampling_rate == 0.30


def test_min_samples_floor(empty_context):
    decisions = [approved("a-0", 0.05), approved("a-1", 0.05)]
    plan = SmartSampler(SamplerConfig(min_samples=2)).select_samples(decisions, empty_context, rng=random.Random(0))

    assert plan.target_sample_count == 2
    assert [s.reading_id for s in plan.selected] == ["a-0", "a-1"]


def test_never_selects_more_than_candidates(empty_context):
    decisions = [approved("a-0", 0.30)]
    plan = SmartSampler(SamplerConfig(min_samples=5)).select_samples(decisions, empty_context, rng=random.Random(0))

    assert plan.target_sample_count == 1
    assert len(plan.selected) == 1


def test_review_queue_holds_flagged_in_order(empty_context):
    decisions = [flagged("f-1"), approved("a-0", 0.30), rejected("x-1"), flagged("f-2")]
    plan = SmartSampler().select_samples(decisions, empty_context, rng=random.Random(0))

    assert plan.review_queue == ["f-1", "f-2"]
    assert [s.reading_id for s in plan.selected] == ["a-0"]


def test_review_queue_can_be_disabled(empty_context):
    plan = SmartSampler(SamplerConfig(include_flagged=False)).select_samples(
        [flagged("f-1")], empty_context, rng=random.Random(0),
    )
    assert plan.review_queue == []


def test_no_candidates(empty_context):
    plan = SmartSampler().select_samples([rejected("x-1")], empty_context, rng=random.Random(0))

    assert plan.candidates == 0
    assert plan.target_sample_count == 0
    assert plan.selected == []
    assert plan.effective_rate == "0.0%"


def test_same_seed_same_plan(empty_context):
    decisions = [approved(f"a-{i}", 0.10) for i in range(30)]
    sampler = SmartSampler()

    first = sampler.select_samples(decisions, empty_context, rng=random.Random(99))
    second = sampler.select_samples(decisions, empty_context, rng=random.Random(99))

    assert first == second
