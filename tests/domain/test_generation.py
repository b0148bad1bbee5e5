"""Tests for the constrained string generator and its stages."""

from __future__ import annotations

import pytest

from randctl.domain.charsets import (
    DEFAULT_SPECIAL_CHARS,
    LOWER_CHARS,
    NUMERIC_CHARS,
    UPPER_CHARS,
    build_request,
)
from randctl.domain.errors import EntropyUnavailableError, InvalidConstraintError
from randctl.domain.generation import (
    draw_minimums,
    draw_optional,
    generate_string,
    optional_pool,
    permute,
    validate_request,
)
from randctl.domain.models import Category, GenerationRequest
from randctl.infrastructure.entropy import SystemEntropySource
from tests.conftest import (
    FailingEntropySource,
    RecordingEntropySource,
    ReplayEntropySource,
    ZeroEntropySource,
)


def _count(value: str, charset: str) -> int:
    return sum(1 for char in value if char in charset)


class TestValidateRequest:
    def test_length_shorter_than_minimums(self) -> None:
        request = build_request(3, min_numeric=2, min_lower=2)
        with pytest.raises(InvalidConstraintError) as excinfo:
            validate_request(request)
        assert excinfo.value.shortfall == 1
        assert "(3)" in str(excinfo.value)
        assert "(4)" in str(excinfo.value)

    def test_length_equal_to_minimums_is_valid(self) -> None:
        validate_request(build_request(4, min_numeric=2, min_lower=2))

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length(self, length: int) -> None:
        with pytest.raises(InvalidConstraintError):
            validate_request(build_request(length))

    def test_negative_minimum(self) -> None:
        with pytest.raises(InvalidConstraintError, match="'upper'"):
            validate_request(build_request(8, min_upper=-1))

    def test_empty_pool_with_optional_characters(self) -> None:
        request = build_request(
            8, numeric=False, lower=False, upper=False, special=False, min_numeric=2
        )
        with pytest.raises(InvalidConstraintError, match="no category is enabled"):
            validate_request(request)

    def test_empty_pool_without_optional_characters(self) -> None:
        request = build_request(
            2, numeric=False, lower=False, upper=False, special=False, min_numeric=2
        )
        validate_request(request)

    def test_required_category_with_empty_charset(self) -> None:
        request = GenerationRequest(
            length=4,
            categories=(Category(name="custom", charset="", minimum=1),),
        )
        with pytest.raises(InvalidConstraintError, match="charset is empty"):
            validate_request(request)

    def test_unknown_enabled_category(self) -> None:
        request = GenerationRequest(
            length=4,
            categories=(Category(name="digits", charset="01"),),
            enabled=frozenset({"digits", "emoji"}),
        )
        with pytest.raises(InvalidConstraintError, match="emoji"):
            validate_request(request)


class TestStages:
    def test_optional_pool_follows_declared_order(self) -> None:
        request = build_request(8, upper=False, special=False)
        assert optional_pool(request) == NUMERIC_CHARS + LOWER_CHARS

    def test_draw_minimums_counts(self, system_source: SystemEntropySource) -> None:
        request = build_request(10, min_numeric=2, min_upper=3)
        drawn = draw_minimums(request, system_source)
        assert len(drawn) == 5
        assert _count("".join(drawn[:2]), NUMERIC_CHARS) == 2
        assert _count("".join(drawn[2:]), UPPER_CHARS) == 3

    def test_minimums_drawn_from_disabled_categories(
        self, system_source: SystemEntropySource
    ) -> None:
        request = build_request(3, special=False, min_special=3)
        drawn = draw_minimums(request, system_source)
        assert all(char in DEFAULT_SPECIAL_CHARS for char in drawn)

    def test_draw_optional_fills_remaining(self, system_source: SystemEntropySource) -> None:
        request = build_request(10, numeric=False, lower=False, upper=False, min_numeric=4)
        drawn = draw_optional(request, system_source)
        assert len(drawn) == 6
        assert all(char in DEFAULT_SPECIAL_CHARS for char in drawn)

    def test_draw_optional_nothing_remaining(self) -> None:
        request = build_request(2, min_numeric=2)
        assert draw_optional(request, ReplayEntropySource([])) == []

    def test_permute_is_fisher_yates(self) -> None:
        # All-zero entropy makes every swap index 0:
        # [a, b, c] -> swap(2, 0) -> [c, b, a] -> swap(1, 0) -> [b, c, a]
        assert permute(["a", "b", "c"], ZeroEntropySource()) == ["b", "c", "a"]

    def test_permute_does_not_mutate_input(self, system_source: SystemEntropySource) -> None:
        chars = list("abcdef")
        shuffled = permute(chars, system_source)
        assert chars == list("abcdef")
        assert sorted(shuffled) == chars

    def test_permute_single_and_empty(self) -> None:
        source = ReplayEntropySource([])
        assert permute([], source) == []
        assert permute(["x"], source) == ["x"]


class TestGenerateString:
    def test_numeric_and_lower_example(self, system_source: SystemEntropySource) -> None:
        request = build_request(10, upper=False, special=False, min_numeric=2, min_lower=2)
        value = generate_string(request, system_source).value
        assert len(value) == 10
        assert _count(value, NUMERIC_CHARS) >= 2
        assert _count(value, LOWER_CHARS) >= 2
        assert all(char in NUMERIC_CHARS + LOWER_CHARS for char in value)

    def test_invalid_request_consumes_no_entropy(
        self, recording_source: RecordingEntropySource
    ) -> None:
        request = build_request(3, min_numeric=2, min_lower=2)
        with pytest.raises(InvalidConstraintError):
            generate_string(request, recording_source)
        assert recording_source.reads == []

    def test_entropy_failure_propagates(self, failing_source: FailingEntropySource) -> None:
        with pytest.raises(EntropyUnavailableError):
            generate_string(build_request(12), failing_source)
        assert failing_source.attempts == 1

    def test_override_special(self, system_source: SystemEntropySource) -> None:
        request = build_request(
            20, numeric=False, lower=False, upper=False, override_special="#~", min_special=5
        )
        value = generate_string(request, system_source).value
        assert set(value) <= {"#", "~"}

    @pytest.mark.parametrize(
        "knobs",
        [
            {"min_numeric": 1, "min_lower": 1, "min_upper": 1, "min_special": 1},
            {"special": False, "min_upper": 6},
            {"numeric": False, "upper": False, "min_special": 3},
            {"lower": False, "min_numeric": 16},
        ],
    )
    def test_properties_hold_across_runs(
        self, system_source: SystemEntropySource, knobs: dict[str, object]
    ) -> None:
        request = build_request(16, **knobs)  # type: ignore[arg-type]
        allowed = "".join(
            category.charset
            for category in request.categories
            if category.name in request.enabled or category.minimum > 0
        )
        for _ in range(200):
            value = generate_string(request, system_source).value
            assert len(value) == 16
            assert set(value) <= set(allowed)
            for category in request.categories:
                assert _count(value, category.charset) >= category.minimum

    def test_required_characters_are_not_front_loaded(
        self, system_source: SystemEntropySource
    ) -> None:
        """Digits are only ever drawn as minimums; they must spread over all slots."""
        request = build_request(
            10, numeric=False, upper=False, special=False, min_numeric=2
        )
        runs = 2000
        positions = [0] * 10
        for _ in range(runs):
            value = generate_string(request, system_source).value
            for index, char in enumerate(value):
                if char in NUMERIC_CHARS:
                    positions[index] += 1

        front = positions[0] + positions[1]
        total = sum(positions)
        assert total == runs * 2
        # Uniform placement puts ~20% of digits in the first two slots.
        assert front / total < 0.3
        expected = total / 10
        for count in positions:
            assert abs(count - expected) < expected * 0.25

    def test_custom_categories(self, system_source: SystemEntropySource) -> None:
        request = GenerationRequest(
            length=12,
            categories=(
                Category(name="hex", charset="0123456789abcdef", minimum=4),
                Category(name="sep", charset="-", minimum=1),
            ),
            enabled=frozenset({"hex"}),
        )
        value = generate_string(request, system_source).value
        assert len(value) == 12
        assert value.count("-") == 1
