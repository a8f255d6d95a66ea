"""Progress callback adapters for noise map builders.

Builders call their progress callback once per completed row with the row
index. These adapters turn that notification into a tqdm progress bar or
periodic log records.
"""

from __future__ import annotations

import logging
from typing import IO, Any

from tqdm import tqdm

logger = logging.getLogger(__name__)


class TqdmRowProgress:
    """Progress callback that advances a tqdm bar by one per row.

    The bar closes itself after the last row. Use as a context manager to
    close it early when a build fails.

    Parameters
    ----------
    total_rows: int
        Number of rows the build will produce (the builder's height).
    desc: str
        Label shown in front of the bar.
    leave: bool
        Keep the finished bar on screen.
    file: IO[str] | None
        Output stream; defaults to tqdm's (stderr).
    """

    def __init__(
        self,
        total_rows: int,
        desc: str = "Noise Map",
        leave: bool = False,
        file: IO[str] | None = None,
    ) -> None:
        if total_rows < 0:
            raise ValueError(f"total_rows must be >= 0, got {total_rows}")
        self.total_rows = total_rows
        self._bar = tqdm(total=total_rows, desc=desc, leave=leave, file=file, unit="row")

    @property
    def rows_done(self) -> int:
        return int(self._bar.n)

    def __call__(self, row: int) -> None:
        # Rows past total_rows arrive after the bar has closed.
        if row >= self.total_rows:
            return
        self._bar.update(1)
        if row + 1 == self.total_rows:
            self.close()

    def close(self) -> None:
        self._bar.close()

    def __enter__(self) -> "TqdmRowProgress":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class LoggingRowProgress:
    """Progress callback that logs every `every` rows and on the last row."""

    def __init__(self, total_rows: int, every: int = 64, level: int = logging.INFO) -> None:
        if total_rows < 0:
            raise ValueError(f"total_rows must be >= 0, got {total_rows}")
        if every <= 0:
            raise ValueError(f"every must be positive, got {every}")
        self.total_rows = total_rows
        self.every = every
        self.level = level

    def __call__(self, row: int) -> None:
        done = row + 1
        if done % self.every == 0 or done == self.total_rows:
            logger.log(self.level, "Noise map row %d/%d", done, self.total_rows)
