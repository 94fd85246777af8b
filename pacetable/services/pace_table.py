"""
Pace Table Builder - Times for each reference distance across a pace range
"""

import math
from typing import Iterable, List, Union

import pandas as pd

from pacetable.utils.helpers import (
    format_distance,
    format_pace,
    format_speed,
    format_time,
    pace_to_speed
)


class PaceTableBuilder:
    """Builds the pace table shown to the user"""

    @staticmethod
    def paces(min_pace: float, max_pace: float, increment: float) -> List[Union[int, float]]:
        """
        List the paces of the table, slowest first.

        min_pace is the slowest pace (largest s/km) and max_pace the fastest;
        they are swapped if given the other way round.

        Args:
            min_pace: Slowest pace in seconds per km
            max_pace: Fastest pace in seconds per km
            increment: Step between rows in seconds per km, may be fractional

        Returns:
            Paces in seconds per km, descending

        Raises:
            ValueError: If increment is not positive
        """
        if increment <= 0:
            raise ValueError(f"increment must be positive, got {increment}")

        slowest, fastest = max(min_pace, max_pace), min(min_pace, max_pace)
        steps = int(math.floor((slowest - fastest) / increment + 1e-9))
        paces = (round(slowest - i * increment, 6) for i in range(steps + 1))
        # Whole-second paces as ints
        return [int(p) if float(p).is_integer() else p for p in paces]

    @staticmethod
    def build(min_pace: float, max_pace: float, increment: float, distances: Iterable[int]) -> pd.DataFrame:
        """
        Build the numeric pace table.

        Args:
            min_pace: Slowest pace in seconds per km
            max_pace: Fastest pace in seconds per km
            increment: Step between rows in seconds per km
            distances: Distances in metres, one column each

        Returns:
            DataFrame indexed by pace (s/km) with a "speed" column (km/h)
            and one column per distance holding the time in seconds
        """
        paces = PaceTableBuilder.paces(min_pace, max_pace, increment)
        distances = sorted(set(distances))

        df = pd.DataFrame(index=pd.Index(paces, name="pace"))
        df["speed"] = [pace_to_speed(p) for p in paces]
        for distance in distances:
            df[distance] = df.index.to_series() * distance / 1000
        return df

    @staticmethod
    def vma_percentages(vma: float, paces: Iterable[int]) -> pd.Series:
        """
        Percentage of VMA that each pace represents

        Args:
            vma: Maximal aerobic speed in km/h
            paces: Paces in seconds per km

        Returns:
            Series indexed by pace
        """
        paces = list(paces)
        values = [pace_to_speed(p) / vma * 100 if vma > 0 else 0.0 for p in paces]
        return pd.Series(values, index=pd.Index(paces, name="pace"), name="vma_pct")

    @staticmethod
    def format_table(df: pd.DataFrame, with_centiseconds: bool = False) -> pd.DataFrame:
        """Render a table from build() as display strings"""
        formatted = pd.DataFrame(index=[format_pace(p) for p in df.index])
        formatted.index.name = "pace"
        formatted["speed"] = [format_speed(s) for s in df["speed"]]
        for column in df.columns:
            if column == "speed":
                continue
            formatted[format_distance(column)] = [
                format_time(t, with_centiseconds) for t in df[column]
            ]
        return formatted
