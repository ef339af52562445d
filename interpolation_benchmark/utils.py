import threading


def clamp(low: int, high: int, value: int) -> int:
    """Clamps value into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def lerp(a: float, b: float, t: float) -> float:
    """
    Linear interpolation between a and b.
    With t = 1/n this is the incremental mean update avg + (x - avg) / n.
    """
    return (1.0 - t) * a + t * b


class AtomicCounter:
    """
    Shared fetch-and-increment counter used to hand out job indices to worker threads.
    """
    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def fetch_add(self, amount: int = 1) -> int:
        with self._lock:
            value = self._value
            self._value += amount
            return value
