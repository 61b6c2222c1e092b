"""
Progress reporting for panel generation.

``generate`` records every finished individual together with the number of
observations it contributed. Listeners are plain callables that receive a
:class:`PanelProgress` snapshot, so the same hook serves scripts, notebooks
and tqdm bars.
"""

import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO


@dataclass(frozen=True)
class PanelProgress:
    """Counts after a finished individual."""

    individuals: int
    total_individuals: int
    observations: int

    @property
    def fraction(self) -> float:
        if self.total_individuals <= 0:
            return 1.0
        return self.individuals / self.total_individuals

    @property
    def done(self) -> bool:
        return self.individuals >= self.total_individuals


class PanelTracker:
    """Running individual and observation counts for one ``generate`` call.

    The listener hears about every *every*-th individual and always about
    the last one. By default that is about 100 notifications per panel.
    """

    def __init__(
        self,
        total_individuals: int,
        listener: Callable[[PanelProgress], None],
        every: Optional[int] = None,
    ):
        self.total_individuals = total_individuals
        self.individuals = 0
        self.observations = 0
        self.every = every if every is not None else max(1, total_individuals // 100)
        self._listener = listener

    def snapshot(self) -> PanelProgress:
        return PanelProgress(self.individuals, self.total_individuals, self.observations)

    def record(self, n_observations: int):
        """Count one finished individual with *n_observations* rows."""
        self.individuals += 1
        self.observations += n_observations
        if self.individuals >= self.total_individuals or self.individuals % self.every == 0:
            self._listener(self.snapshot())


class ConsoleProgress:
    """Rewrites one status line, e.g. ``Generated 90/200 individuals (612 observations)``.

    Writes to *stream*, or to ``sys.stderr`` at call time when omitted.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def __call__(self, progress: PanelProgress):
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(
            f"\rGenerated {progress.individuals}/{progress.total_individuals} individuals "
            f"({progress.observations} observations)"
        )
        if progress.done:
            stream.write("\n")
        stream.flush()


class TqdmProgress:
    """tqdm bar over individuals with the observation count as postfix (lazy import).

    Usage::

        from longsim.progress import TqdmProgress
        model.generate(500, progress_callback=TqdmProgress())
    """

    def __init__(self, **tqdm_kwargs):
        self._tqdm_kwargs = tqdm_kwargs
        self._bar = None

    def __call__(self, progress: PanelProgress):
        from tqdm import tqdm

        if self._bar is None:
            self._bar = tqdm(total=progress.total_individuals, unit="individual", **self._tqdm_kwargs)

        self._bar.set_postfix(observations=progress.observations, refresh=False)
        self._bar.update(progress.individuals - self._bar.n)

        if progress.done:
            self._bar.close()
            self._bar = None
