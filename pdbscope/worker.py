"""Execution helpers for background work."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable

from pdbscope.parser import parse


class Worker:
    """Single background thread for parse and table work."""

    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1)

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Run work on the background thread.

        Parameters
        ----------
        fn
            Callable to execute.
        *args
            Positional arguments to pass to ``fn``.
        **kwargs
            Keyword arguments to pass to ``fn``.

        Returns
        -------
        concurrent.futures.Future
            Future for the submitted work.
        """
        return self._executor.submit(fn, *args, **kwargs)

    def submit_parse(self, pdb_text: str) -> Future:
        """Parse PDB text off the calling thread.

        The future resolves to a :class:`~pdbscope.model.state.Structure` or
        raises the parser's :class:`~pdbscope.errors.ParseError`.
        """
        return self.submit(parse, pdb_text)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
