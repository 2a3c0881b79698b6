from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from skadis.skadis_arc import ClosedPolyline

Point = Tuple[float, float]


@dataclass(frozen=True)
class Hole:
    center: Point
    column: int
    row: int
    polyline: ClosedPolyline

    def as_array(self) -> NDArray[np.float64]:
        # col, row, x, y
        return np.array([
            float(self.column), float(self.row),
            float(self.center[0]), float(self.center[1]),
        ], dtype=np.float64)


class HoleSet:
    """
    Ordered, read-only container of holes in generation order
    (columns right to left, top to bottom within a column).
    """
    def __init__(self, holes: Sequence[Hole] = ()) -> None:
        self._holes: Tuple[Hole, ...] = tuple(holes)

    def __len__(self) -> int: return len(self._holes)
    def __iter__(self) -> Iterator[Hole]: return iter(self._holes)
    def __getitem__(self, index: int) -> Hole: return self._holes[index]

    @property
    def holes(self) -> Tuple[Hole, ...]:
        return self._holes

    # --- queries/exports ---
    def polylines(self) -> List[ClosedPolyline]:
        return [h.polyline for h in self._holes]

    def to_numpy(self) -> NDArray[np.float64]:
        """
        Return holes as (N,4): col, row, x, y
        """
        if not self._holes:
            return np.zeros((0, 4), dtype=np.float64)
        return np.vstack([h.as_array() for h in self._holes]).astype(np.float64, copy=False)

    def centers(self) -> NDArray[np.float64]:
        return self.to_numpy()[:, 2:4]

    def num_columns(self) -> int:
        return len({h.column for h in self._holes})

    def in_column(self, column: int) -> List[Hole]:
        return [h for h in self._holes if h.column == column]

    def summary(self) -> None:
        print("=== HoleSet Summary ===")
        print(f"Total holes: {len(self._holes)}")
        print(f"Columns: {self.num_columns()}")
        if self._holes:
            first = self._holes[0]
            print(f"  first hole: ({first.center[0]:.3f}, {first.center[1]:.3f})")
        print("=======================")
