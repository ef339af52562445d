import numpy as np


def make_rng(seed=None) -> np.random.Generator:
    """
    Creates a random generator owned by the caller.
    Without a seed, the SeedSequence draws 128 bits of fresh OS entropy.
    A SeedSequence may also be passed directly, e.g. one spawned per worker.
    """
    if not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    return np.random.default_rng(seed)


def _positions(count: int) -> np.ndarray:
    # x in [0, 1] for each index; a single element sits at x = 0
    if count == 1:
        return np.zeros(1, dtype=np.float64)
    return np.arange(count, dtype=np.float64) / (count - 1)

def _to_sorted_list(y: np.ndarray) -> list[int]:
    """
    Rounds half up to integers and sorts.
    The curves are monotonic, but rounding can still tie or invert neighbours,
    so the sort is always done.
    """
    values = np.floor(y + 0.5).astype(np.int64)
    return np.sort(values).tolist()


# --- List Generators ---

def make_list_random(count: int, max_value: int, rng: np.random.Generator = None) -> list[int]:
    """
    Draws count values uniformly from [0, max_value] and sorts them.
    """
    if rng is None:
        rng = make_rng()
    values = rng.integers(0, max_value, size=count, endpoint=True, dtype=np.int64)
    return np.sort(values).tolist()

def make_list_linear(count: int, max_value: int, rng: np.random.Generator = None) -> list[int]:
    return _to_sorted_list(_positions(count) * max_value)

def make_list_linear_outlier(count: int, max_value: int, rng: np.random.Generator = None) -> list[int]:
    """
    Linear list whose last element is replaced by a value 100x the bound.
    This is the counter case for line fit search.
    """
    values = make_list_linear(count, max_value)
    values[-1] = max_value * 100
    return values

def make_list_quadratic(count: int, max_value: int, rng: np.random.Generator = None) -> list[int]:
    x = _positions(count)
    return _to_sorted_list(x * x * max_value)

def make_list_cubic(count: int, max_value: int, rng: np.random.Generator = None) -> list[int]:
    x = _positions(count)
    return _to_sorted_list(x * x * x * max_value)

def make_list_log(count: int, max_value: int, rng: np.random.Generator = None) -> list[int]:
    """
    Logarithmic curve normalized so the last index maps to max_value.
    """
    index = np.arange(count, dtype=np.float64)
    y = np.log(index + 2.0) / np.log(count + 1.0)
    return _to_sorted_list(y * max_value)


GENERATORS = {
    "Random": make_list_random,
    "Linear": make_list_linear,
    "Linear Outlier": make_list_linear_outlier,
    "Quadratic": make_list_quadratic,
    "Cubic": make_list_cubic,
    "Log": make_list_log,
}

def get_generator(name: str):
    generator = GENERATORS.get(name)
    if generator is None:
        raise ValueError(f"Unknown list generator {name!r}, expected one of {list(GENERATORS)}")
    return generator
