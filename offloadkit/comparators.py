"""Pixel-by-pixel image comparators."""

from __future__ import annotations

import abc
import enum
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from offloadkit.color import Color, cie75_distance


class CheckType(enum.Enum):
    """Statistics a comparison check may apply to."""

    NONE = "None"
    FURTHEST = "Furthest"
    RMS = "RMS"
    DIFF_RMS = "DiffRMS"
    PIXEL_PERCENT = "PixelPercent"
    INTERVALS = "Intervals"


@dataclass
class CompareCheck:
    """A threshold check on a comparison statistic."""

    type: CheckType = CheckType.NONE
    val: float = 0.0
    vals: list[float] = field(default_factory=list)


class ImageComparator(abc.ABC):
    """Receives pairs of pixels and judges the images they came from."""

    @abc.abstractmethod
    def process_pixel(self, left: Color, right: Color) -> None:
        """Account for one pair of corresponding pixels."""

    def report(self) -> str:
        """Human-readable summary of the comparison."""
        return ""

    def result(self) -> bool:
        """Whether the images are considered matching."""
        return True


def _ratio(num: float, den: float) -> float:
    return num / den if den else math.nan


class ImageComparatorDistance(ImageComparator):
    """Collects CIE76 color-distance statistics over an image pair."""

    # A CIE76 distance of 2.3 is a "just noticeable difference".
    VISIBLE_DIFF = 2.3
    HISTOGRAM_BINS = 10

    def __init__(self, checks: Optional[Iterable[CompareCheck]] = None) -> None:
        if checks is None:
            self.checks = [CompareCheck(CheckType.FURTHEST, self.VISIBLE_DIFF)]
        else:
            self.checks = list(checks)
        self.furthest = 0.0
        self.count = 0
        self.visible_diffs = 0
        self.histogram = [0] * self.HISTOGRAM_BINS
        self._distance_sum = 0.0
        self._visible_sum = 0.0

    def process_pixel(self, left: Color, right: Color) -> None:
        distance = cie75_distance(left, right)
        if distance > self.VISIBLE_DIFF:
            self.visible_diffs += 1
            self._visible_sum += distance
            # Anything more than 10 units past noticeable lands in the last bin.
            idx = int(min(max(distance - self.VISIBLE_DIFF, 0.0), 9.0))
            self.histogram[idx] += 1
        self.furthest = max(self.furthest, distance)
        self._distance_sum += distance
        self.count += 1

    def _rms(self) -> float:
        return math.sqrt(_ratio(self._distance_sum, self.count))

    def _diff_rms(self) -> float:
        return math.sqrt(_ratio(self._visible_sum, self.visible_diffs))

    def report(self) -> str:
        count = float(self.count)
        lines = [
            f"RMS Difference: {self._rms():e}",
            f"Furthest Pixel Difference: {self.furthest:e}",
            f"Pixels with visible differences: {self.visible_diffs} "
            f"{_ratio(self.visible_diffs, count) * 100.0:e}%",
            f"RMS Different Pixels Only: {self._diff_rms():e}",
            f"Total Pixels: {self.count}",
            "Histogram Data:",
        ]
        lines.extend(
            f"\t[{i}]: {n} {_ratio(n, count) * 100.0:e}"
            for i, n in enumerate(self.histogram)
        )
        return "\n".join(lines) + "\n"