"""ANSI-colored stage logger for the lead scoring pipeline.

Each recalculation runs through FETCH -> FACTORS -> AGGREGATE -> PERSIST.
A failing stage is logged in red under its own label. Coloring the stages makes a single client's recalculation easy to follow
in a busy terminal.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_MAGENTA = "\033[95m"
_CYAN = "\033[96m"
_GRAY = "\033[90m"


class ScoringStage:
    """(label, color) pairs for each pipeline stage."""

    RECORD = ("RECORD", _GREEN)
    FETCH = ("FETCH", _YELLOW)
    FACTORS = ("FACTORS", _BLUE)
    AGGREGATE = ("AGGREGATE", _MAGENTA)
    PERSIST = ("PERSIST", _GREEN)
    INSIGHTS = ("INSIGHTS", _CYAN)


def _format_kwargs(kwargs: dict[str, Any]) -> str:
    if not kwargs:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_GRAY}({details}){_RESET}"


class ScoringLogger:
    """Color-coded logger for scoring stages.

    Usage:
        log = ScoringLogger("LeadScoringService")
        with log.timed_step(ScoringStage.FACTORS, "Computing factors", client_id=cid):
            factors = await calculator.compute(cid)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step(self, stage: tuple[str, str], message: str, **kwargs: Any) -> None:
        label, color = stage
        self._logger.info(
            f"{color}{_BOLD}[{label}]{_RESET} {color}{message}{_RESET}"
            + _format_kwargs(kwargs)
        )

    def step_error(self, stage: tuple[str, str], message: str, error: Exception | None = None) -> None:
        label, _ = stage
        formatted = f"{_RED}{_BOLD}[{label}]{_RESET} {_RED}{message}{_RESET}"
        if error:
            formatted += f" {_DIM}-> {type(error).__name__}: {error}{_RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(f"   {_GRAY}|- {message}{_RESET}" + _format_kwargs(kwargs))

    @contextmanager
    def timed_step(self, stage: tuple[str, str], message: str, **kwargs: Any):
        """Log start and end of a stage with elapsed time; failures are logged and re-raised."""
        self.step(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} failed after {elapsed:.3f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            label, color = stage
            self._logger.info(
                f"{color}[{label}]{_RESET} {_GREEN}done: {message} in {elapsed:.3f}s{_RESET}"
            )
