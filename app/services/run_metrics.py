"""Derived run metrics."""


def compute_pace(distance_km: float, duration_min: float) -> float:
    """Pace in min/km = duration / distance. 0 when distance is not positive."""
    if distance_km > 0:
        return duration_min / distance_km
    return 0.0
