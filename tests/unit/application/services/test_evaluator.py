"""Tests for application/services/evaluator.py."""

import logging

import pytest

from tagfilter.application.services.evaluator import FilterDecision, evaluate, excluded, included
from tagfilter.infrastructure.filters.tag import exclude_tags, require_tags
from tests.factories import make_descriptor


class TestEvaluate:
    """Tests for evaluate()."""

    def test_one_decision_per_descriptor_in_order(self) -> None:
        descriptors = [
            make_descriptor("slow", display_name="a"),
            make_descriptor("fast", display_name="b"),
            make_descriptor(display_name="c"),
        ]

        decisions = evaluate(exclude_tags("slow"), descriptors)

        assert [d.descriptor.display_name for d in decisions] == ["a", "b", "c"]
        assert [d.included for d in decisions] == [False, True, True]

    def test_empty(self) -> None:
        assert evaluate(require_tags("unit"), []) == ()

    def test_accepts_plain_callable(self) -> None:
        flt = require_tags("unit")
        decisions = evaluate(lambda d: flt.apply(d), [make_descriptor("unit")])

        assert decisions[0].included is True

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        descriptors = [make_descriptor("unit"), make_descriptor("slow")]

        with caplog.at_level(logging.DEBUG, logger="tagfilter"):
            evaluate(require_tags("unit"), descriptors)

        assert "1 included, 1 excluded" in caplog.text


    def test_logs_filter_and_counts(self, caplog: pytest.LogCaptureFixture) -> None:
        descriptors = [make_descriptor("slow"), make_descriptor("fast"), make_descriptor(" slow ")]

        with caplog.at_level(logging.DEBUG, logger="tagfilter"):
            evaluate(exclude_tags("slow"), descriptors)

        assert "Evaluated exclude[slow]: 1 included, 2 excluded" in caplog.text


class TestSelection:
    """Tests for included()/excluded() helpers."""

    def test_partition(self) -> None:
        decisions = evaluate(
            require_tags("unit"),
            [make_descriptor("unit"), make_descriptor("slow"), make_descriptor(" unit")],
        )

        assert len(included(decisions)) == 2
        assert len(excluded(decisions)) == 1
        assert all(isinstance(d, FilterDecision) for d in included(decisions))
