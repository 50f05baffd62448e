from __future__ import annotations

import pytest

from franchise_roi.recommendations.data_store import BUDGET_BUCKETS, BUDGET_LABELS, get_catalog
from franchise_roi.recommendations.models import FranchiseRecord, Industry, Interval
from franchise_roi.recommendations.ranges import parse_range
from franchise_roi.recommendations.retrieval import (
    get_recommendations,
    match,
    parse_industry_filter,
    rank,
)


def _record(brand, industry, investment, roi, break_even=2.0):
    return FranchiseRecord(
        brand=brand,
        industry=Industry(industry),
        investment_range=investment,
        investment=parse_range(investment),
        roi_percent=roi,
        break_even_years=break_even,
    )


SAMPLE = [
    _record("Small Food", "Food", "₹5–12 Lakh", 20),
    _record("Big Food", "Food", "₹30–80 Lakh", 25),
    _record("Huge Food", "Food", "₹60–90 Lakh", 25),
    _record("Edge Food", "Food", "₹40–50 Lakh", 18),
    _record("Big Retail", "Retail", "₹55–70 Lakh", 30),
    FranchiseRecord(
        brand="No Price",
        industry=Industry.food,
        investment_range="on request",
        investment=None,
        roi_percent=99,
        break_even_years=1,
    ),
]


# ── Matcher ──────────────────────────────────────────────────────────────


def test_overlap_not_containment():
    budget = Interval(min_value=10, max_value=20)
    result = match(SAMPLE, budget, Industry.food)
    # 5–12 only partially inside 10–20 and still qualifies
    assert [r.brand for r in result] == ["Small Food"]


def test_open_ended_budget_includes_every_food_record_reaching_fifty():
    result = match(SAMPLE, BUDGET_BUCKETS["₹50 Lakh+"], Industry.food)
    expected = [
        r.brand for r in SAMPLE
        if r.investment is not None and r.industry is Industry.food and r.investment.max_value >= 50
    ]
    assert [r.brand for r in result] == expected
    assert {"Big Food", "Huge Food", "Edge Food"} == set(expected)


def test_unparsed_investment_never_matches():
    result = match(SAMPLE, None, None)
    assert "No Price" not in [r.brand for r in result]


def test_no_budget_means_no_budget_constraint():
    result = match(SAMPLE, None, Industry.retail)
    assert [r.brand for r in result] == ["Big Retail"]


def test_wildcard_industry_matches_all_industries():
    result = match(SAMPLE, BUDGET_BUCKETS["₹50 Lakh+"], None)
    assert "Big Retail" in [r.brand for r in result]
    assert "Big Food" in [r.brand for r in result]


def test_industry_string_is_exact_and_case_sensitive():
    assert match(SAMPLE, None, "food") == []
    assert [r.brand for r in match(SAMPLE, None, "Retail")] == ["Big Retail"]


def test_unknown_industry_matches_nothing():
    assert match(SAMPLE, None, "Hospitality") == []


@pytest.mark.parametrize("industry", ["Any", "Other"])
def test_wildcard_spellings(industry):
    assert parse_industry_filter(industry) is None


def test_parse_industry_filter_rejects_unknown():
    assert parse_industry_filter("Salon") is Industry.salon
    with pytest.raises(ValueError):
        parse_industry_filter("Hospitality")


# ── Ranker ───────────────────────────────────────────────────────────────


def test_rank_orders_by_roi_descending():
    ranked = rank(SAMPLE[:5], limit=5)
    rois = [r.roi_percent for r in ranked]
    assert rois == sorted(rois, reverse=True)


def test_rank_ties_keep_input_order():
    ranked = rank(SAMPLE[:5], limit=5)
    tied = [r.brand for r in ranked if r.roi_percent == 25]
    assert tied == ["Big Food", "Huge Food"]

    reversed_input = [SAMPLE[2], SAMPLE[1]]
    assert [r.brand for r in rank(reversed_input, limit=2)] == ["Huge Food", "Big Food"]


def test_rank_truncates():
    assert len(rank(SAMPLE[:5], limit=3)) == 3
    assert len(rank(SAMPLE[:2], limit=5)) == 2


def test_rank_does_not_mutate_input():
    items = list(SAMPLE[:5])
    before = [r.brand for r in items]
    rank(items, limit=2)
    assert [r.brand for r in items] == before


def test_rank_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        rank(SAMPLE, limit=0)


# ── Pipeline over the packaged catalog ───────────────────────────────────


@pytest.mark.parametrize("budget", BUDGET_LABELS)
@pytest.mark.parametrize("industry", [i.value for i in Industry] + ["Other"])
def test_every_result_satisfies_filters_and_ordering(budget, industry):
    results = get_recommendations(budget, industry, limit=5)
    interval = BUDGET_BUCKETS[budget]

    assert len(results) <= 5
    for r in results:
        assert r.investment.overlaps(interval)
        if industry != "Other":
            assert r.industry.value == industry

    rois = [r.roi_percent for r in results]
    assert all(a >= b for a, b in zip(rois, rois[1:]))


def test_ties_follow_catalog_order():
    catalog = get_catalog()
    results = get_recommendations("₹20–50 Lakh", "Other", limit=12)
    order = catalog.brands()
    for a, b in zip(results, results[1:]):
        if a.roi_percent == b.roi_percent:
            assert order.index(a.brand) < order.index(b.brand)


def test_food_ten_to_twenty_top_three():
    results = get_recommendations("₹10–20 Lakh", "Food", limit=3)
    assert [r.brand for r in results] == ["Biryani by Kilo", "Chai Sutta Bar", "Naturals Ice Cream"]


def test_fitness_mid_budget():
    results = get_recommendations("₹20–50 Lakh", "Fitness", limit=5)
    assert [r.brand for r in results] == ["Anytime Fitness", "VLCC", "Crossfit Box"]


def test_open_ended_food_budget_finds_nothing_in_packaged_catalog():
    # No packaged Food franchise reaches ₹50 Lakh
    assert get_recommendations("₹50 Lakh+", "Food") == []


def test_idempotent():
    first = get_recommendations("₹20–50 Lakh", "Any", limit=5)
    second = get_recommendations("₹20–50 Lakh", "Any", limit=5)
    assert [r.brand for r in first] == [r.brand for r in second]


def test_unknown_budget_label_is_unconstrained():
    results = get_recommendations("₹1 Crore", "Salon", limit=5)
    assert [r.brand for r in results] == ["Looks Salon", "Jawed Habeebs"]


@pytest.mark.parametrize("industry", [None, "", "   "])
def test_absent_industry_is_no_constraint(industry):
    assert parse_industry_filter(industry) is None
    results = get_recommendations("₹10–20 Lakh", industry, limit=12)
    assert [r.brand for r in results] == [
        r.brand for r in get_recommendations("₹10–20 Lakh", "Any", limit=12)
    ]
    assert len(results) > 0


@pytest.mark.parametrize("budget", [None, ""])
def test_absent_budget_is_no_constraint(budget):
    results = get_recommendations(budget, "Salon", limit=5)
    assert [r.brand for r in results] == ["Looks Salon", "Jawed Habeebs"]
