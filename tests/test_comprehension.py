from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from comprehendex import UNINITIALIZED, collect, comprehend, option, result
from comprehendex.option import Absent, Present
from comprehendex.result import Failure, ResultBuilder, Success


def test_list_by_default_with_present() -> None:
    assert comprehend(lambda a, b: a * b, [1, 2, 3], option.new(2)) == [2, 4, 6]


def test_list_by_default_with_absent() -> None:
    assert comprehend(lambda a, b: a * b, [1, 2, 3], option.new()) == []


def test_list_by_default_with_success() -> None:
    assert comprehend(lambda a, b: a * b, [1, 2, 3], result.success(2)) == [2, 4, 6]


def test_list_by_default_with_failure() -> None:
    assert comprehend(lambda a, b: a * b, [1, 2, 3], result.failure(0)) == [0]


def test_failure_takes_precedence_in_list() -> None:
    actual = comprehend(lambda a, b, c: a * b * c, [1, 2, 3], result.failure(-1), [4])
    assert actual == [-1]


def test_into_option_with_absent() -> None:
    actual = comprehend(lambda a, b: a * b, [1, 2, 3], option.new(), into=option.new())
    assert actual == Absent()


def test_into_option_keeps_last_value() -> None:
    actual = comprehend(lambda a, b: a * b, [1, 2, 3], option.new(2), into=option.new())
    assert actual == Present(6)


def test_absent_prevails_over_present() -> None:
    actual = comprehend(
        lambda a, b, c: a * b * c,
        [1, 2, 3],
        option.present(2),
        option.absent(),
        into=option.new(),
    )
    assert actual == Absent()


def test_into_option_with_failure_source() -> None:
    actual = comprehend(lambda a, b: a * b, [1, 2, 3], result.failure("e"), into=option.present(9))
    assert actual == Absent()


def test_into_result_with_failure() -> None:
    actual = comprehend(lambda a, b: a * b, [1, 2, 3], result.failure(1), into=result.new())
    assert actual == Failure(1)


def test_into_result_with_success() -> None:
    actual = comprehend(lambda a, b: a * b, [1, 2, 3], result.success(2), into=result.new())
    assert actual == Success(6)


def test_into_result_with_only_successes() -> None:
    actual = comprehend(lambda a, b: a * b, result.success(2), result.success(2), into=result.new())
    assert actual == Success(4)


def test_top_most_failure_wins_with_only_failures() -> None:
    actual = comprehend(lambda a, b: a * b, result.failure(1), result.failure(2), into=result.new())
    assert actual == Failure(1)


def test_failure_prevails_over_success() -> None:
    actual = comprehend(
        lambda a, b, c: a * b * c,
        result.success(2),
        result.success(2),
        result.failure(0),
        into=result.new(),
    )
    assert actual == Failure(0)


def test_earliest_failure_wins_in_long_chain() -> None:
    calls: list[tuple[int, ...]] = []

    def body(*values: int) -> int:
        calls.append(values)
        return 0

    actual = comprehend(
        body,
        result.success(2),
        result.success(2),
        result.failure(10),
        result.success(2),
        result.failure(-1),
        into=result.new(),
    )
    assert actual == Failure(10)
    assert calls == []


def test_short_circuit_consumes_only_first_element() -> None:
    consumed: list[int] = []

    def numbers() -> Iterator[int]:
        for n in (1, 2, 3):
            consumed.append(n)
            yield n

    actual = comprehend(lambda a, b: a * b, numbers(), result.failure(0), into=result.new())
    assert actual == Failure(0)
    assert consumed == [1]


def test_uninitialized_failure_source_is_transparent() -> None:
    actual = comprehend(lambda a, b: a, [1, 2], result.new(), into=result.new())
    assert actual == Failure(UNINITIALIZED)
    assert comprehend(lambda a, b: a, [1, 2], result.new(), into=result.success(5)) == Success(5)


def test_callable_source_sees_bound_values() -> None:
    actual = comprehend(lambda a, b: (a, b), [1, 2], lambda a: range(a))
    assert actual == [(1, 0), (2, 0), (2, 1)]


def test_callable_source_returning_option() -> None:
    def half(n: int) -> Present[int] | Absent:
        return option.present(n // 2) if n % 2 == 0 else option.absent()

    assert comprehend(lambda a, b: b, [1, 2, 3, 4], half) == [1, 2]
    assert comprehend(lambda a, b: b, [1, 2, 3, 4], half, into=option.new()) == Present(2)


def test_no_sources_emits_body_once() -> None:
    assert comprehend(lambda: 5, into=option.new()) == Present(5)
    assert comprehend(lambda: 5) == [5]


def test_list_seed_is_extended() -> None:
    assert comprehend(lambda a: a, [2, 3], into=[1]) == [1, 2, 3]


def test_into_ready_builder() -> None:
    builder: ResultBuilder[int, str] = ResultBuilder(Success(0))
    assert comprehend(lambda a: a + 1, [1, 2], into=builder) == Success(3)


def test_unsupported_target_raises_type_error() -> None:
    with pytest.raises(TypeError):
        comprehend(lambda a: a, [1], into=42)


def test_exceptions_from_body_propagate(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="comprehendex.comprehension")
    with pytest.raises(ZeroDivisionError):
        comprehend(lambda a: 1 // a, [1, 0], into=result.new())
    assert "aborted" in caplog.text


def test_short_circuit_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="comprehendex.comprehension")
    comprehend(lambda a, b: a, [1], result.failure("e"), into=result.new())
    assert "short-circuited" in caplog.text


def test_collect_plain_iterable() -> None:
    assert collect([1, 2, 3], into=result.new()) == Success(3)
    assert collect([1, 2, 3], into=option.new()) == Present(3)
    assert collect([], into=result.new()) == Failure(UNINITIALIZED)
    assert collect([1, 2]) == [1, 2]


def test_collect_converts_between_containers() -> None:
    assert collect(result.failure("e"), into=option.new()) == Absent()
    assert collect(result.success(2), into=option.absent()) == Present(2)
    assert collect(option.present(1), into=result.new()) == Success(1)
    assert collect(option.absent(), into=result.new()) == Failure(UNINITIALIZED)
    assert collect(result.new(), into=option.present(3)) == Present(3)
