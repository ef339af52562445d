from interpolation_benchmark.searches import SearchResult
from interpolation_benchmark.verification import verify_result


def test_correct_result_passes() -> None:
    values = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert verify_result(values, 7, SearchResult(True, 7, 3)) is None
    assert verify_result(values, 42, SearchResult(False, 9, 4)) is None


def test_duplicate_indices_are_equivalent() -> None:
    values = [1, 3, 3, 3, 7]
    for index in (1, 2, 3):
        assert verify_result(values, 3, SearchResult(True, index, 1)) is None


def test_found_mismatch_is_reported() -> None:
    values = [1, 3, 5]
    failure = verify_result(values, 3, SearchResult(False, 1, 2), "Linear", "Line Fit")
    assert failure is not None
    assert failure.expected.found and not failure.actual.found
    assert failure.describe() == "VERIFICATION FAILURE!! (found false vs true) Linear, Line Fit, target 3"


def test_index_mismatch_is_reported() -> None:
    values = [1, 3, 5]
    failure = verify_result(values, 3, SearchResult(True, 2, 2), "Cubic", "Hybrid")
    assert failure is not None
    assert failure.describe() == "VERIFICATION FAILURE!! (index 2 vs 1) Cubic, Hybrid, target 3"


def test_out_of_range_index_is_reported() -> None:
    failure = verify_result([1, 3, 5], 5, SearchResult(True, 3, 1))
    assert failure is not None
