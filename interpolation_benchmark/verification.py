from dataclasses import dataclass

from .searches import SearchResult, search_linear


@dataclass(frozen=True)
class VerificationFailure:
    generator: str
    strategy: str
    target: int
    expected: SearchResult
    actual: SearchResult

    def describe(self) -> str:
        if self.expected.found != self.actual.found:
            detail = f"found {str(self.actual.found).lower()} vs {str(self.expected.found).lower()}"
        else:
            detail = f"index {self.actual.index} vs {self.expected.index}"
        return f"VERIFICATION FAILURE!! ({detail}) {self.generator}, {self.strategy}, target {self.target}"


def verify_result(values: list[int], target: int, result: SearchResult,
                  generator: str = "", strategy: str = "") -> VerificationFailure | None:
    """
    Checks a search result against a linear search of the same list.
    With duplicate values any index holding the target is accepted, so indices only
    have to match when the values at them differ.
    Returns None when the result is correct.
    """
    expected = search_linear(values, target)
    if result.found != expected.found:
        return VerificationFailure(generator, strategy, target, expected, result)
    if not result.found or result.index == expected.index:
        return None
    if not 0 <= result.index < len(values) or values[result.index] != values[expected.index]:
        return VerificationFailure(generator, strategy, target, expected, result)
    return None
