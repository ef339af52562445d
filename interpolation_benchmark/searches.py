import math
from dataclasses import dataclass

from .utils import clamp


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a single search.
    index is the matching position when found, otherwise the last examined position.
    guesses counts the element reads (probes) the search performed.
    """
    found: bool
    index: int
    guesses: int


# --- Baseline Search Algorithms ---

def search_linear(values: list[int], target: int) -> SearchResult:
    """
    Walks the list from the start, stopping early once an element exceeds the target.
    This is the ground truth the other searches are verified against.
    """
    guesses = 0
    index = 0
    while index < len(values):
        guesses += 1
        value = values[index]
        if value == target:
            return SearchResult(True, index, guesses)
        if value > target:
            break
        index += 1
    return SearchResult(False, index, guesses)

def search_binary(values: list[int], target: int) -> SearchResult:
    """
    Binary search algorithm.
    Each probe of the middle of the unknown area counts as one guess.
    """
    if not values:
        return SearchResult(False, 0, 0)

    low, high = 0, len(values) - 1
    guesses = 0
    while True:
        guesses += 1
        mid = (low + high) // 2
        guess = values[mid]
        if guess == target:
            return SearchResult(True, mid, guesses)
        elif guess < target:
            low = mid + 1
        else:
            # nothing left below index 0
            if mid == 0:
                return SearchResult(False, mid, guesses)
            high = mid - 1

        if low > high:
            return SearchResult(False, mid, guesses)


# --- Interpolated Search Algorithms ---

def _fit_line(min_index: int, max_index: int, min_value: int, max_value: int) -> tuple[float, float]:
    # y = mx + b through both bracket endpoints
    m = (max_value - min_value) / (max_index - min_index)
    b = min_value - m * min_index
    return m, b

def _bracket_search(values: list[int], target: int, alternate_binary: bool) -> SearchResult:
    """
    Shared loop of the line fit and hybrid searches.

    The bracket endpoints are read up front and not counted as guesses, since knowing
    the min and max of a list in advance is reasonable. Every probe lands strictly
    inside the bracket, so the bracket shrinks each iteration.

    When alternate_binary is set, every second iteration bisects the bracket instead
    of using the line fit.
    """
    if not values:
        return SearchResult(False, 0, 0)

    min_index = 0
    max_index = len(values) - 1
    min_value = values[min_index]
    max_value = values[max_index]

    if target < min_value or target > max_value:
        return SearchResult(False, min_index if target < min_value else max_index, 0)
    if target == min_value:
        return SearchResult(True, min_index, 0)
    if target == max_value:
        return SearchResult(True, max_index, 0)

    guesses = 0
    guess_index = min_index
    binary_step = False
    while min_index + 1 < max_index:
        guesses += 1
        if binary_step:
            guess_index = (min_index + max_index) // 2
        else:
            m, b = _fit_line(min_index, max_index, min_value, max_value)
            guess_index = math.floor((target - b) / m + 0.5)
        guess_index = clamp(min_index + 1, max_index - 1, guess_index)
        guess = values[guess_index]

        if guess == target:
            return SearchResult(True, guess_index, guesses)

        if guess < target:
            min_index, min_value = guess_index, guess
        else:
            max_index, max_value = guess_index, guess

        if alternate_binary:
            binary_step = not binary_step

    return SearchResult(False, guess_index, guesses)

def search_line_fit(values: list[int], target: int) -> SearchResult:
    """
    Interpolation search.
    Fits a line y = mx + b through the known bracket endpoints and probes where the
    line predicts the target. A probe that is too low becomes the new left endpoint,
    one that is too high becomes the new right endpoint, and the line is refit.

    A single huge value at the end of the list flattens the fitted line, so guesses
    land at small indices and the search creeps forward one element at a time.
    """
    return _bracket_search(values, target, alternate_binary=False)

def search_line_fit_blind(values: list[int], target: int) -> SearchResult:
    """
    Line fit search that also pays for reading the min and max of the list,
    counting those two reads as guesses.
    """
    result = search_line_fit(values, target)
    return SearchResult(result.found, result.index, result.guesses + 2)

def search_hybrid(values: list[int], target: int) -> SearchResult:
    """
    Alternates a line fit step (odd iterations, starting with the first) with a
    binary search step (even iterations).
    Line fit can beat binary search but can also get trapped on lists that break its
    linearity assumption. The binary step bounds how badly it can do there.
    """
    return _bracket_search(values, target, alternate_binary=True)


SEARCHES = {
    "Linear Search": search_linear,
    "Line Fit": search_line_fit,
    "Line Fit Blind": search_line_fit_blind,
    "Binary Search": search_binary,
    "Hybrid": search_hybrid,
}

def get_search(name: str):
    search = SEARCHES.get(name)
    if search is None:
        raise ValueError(f"Unknown search {name!r}, expected one of {list(SEARCHES)}")
    return search
