"""Map occurrence counts onto font sizes."""

from __future__ import annotations

from tagcloud.pipeline.frequency import FrequencyTags


class FontSizeScaler:
    """Linear count → font-size mapping between *min_size* and *max_size*.

    The least frequent label gets *min_size*, the most frequent *max_size*.
    When every label occurs equally often they all get *max_size*.
    """

    def __init__(self, max_size: int, min_size: int = 1) -> None:
        if min_size <= 0:
            raise ValueError(f"min_size must be positive, got {min_size}")
        if min_size >= max_size:
            raise ValueError(
                f"min_size must be smaller than max_size, got {min_size} >= {max_size}"
            )
        self.max_size = max_size
        self.min_size = min_size

    def font_size(self, count: int, lowest: int, highest: int) -> int:
        if highest == lowest:
            return self.max_size
        t = (count - lowest) / (highest - lowest)
        return self.min_size + round(t * (self.max_size - self.min_size))

    def scale(self, frequencies: FrequencyTags) -> dict[str, int]:
        counts = frequencies.as_dict()
        if not counts:
            return {}
        lowest = min(counts.values())
        highest = max(counts.values())
        return {
            label: self.font_size(c, lowest, highest) for label, c in counts.items()
        }
