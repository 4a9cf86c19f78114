"""Colored store logger — ANSI-colored console logging for entity store activity.

Provides a StoreLogger with color-coded output per store stage,
making it easy to visually trace seeding, mutations and persistence
in the terminal.

Color scheme:
    🟢 Green   — Seed / Create
    🔵 Blue    — Load
    🟡 Yellow  — Update
    🟣 Magenta — Delete
    🟠 Cyan    — Persist
    🔴 Red     — Errors / Quarantine
    ⚪ Gray    — Timing / Details
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Store Stage Definitions ──────────────────────────────────────────

class StoreStage:
    """Predefined store stages with colors and icons."""

    SEED = ("SEED", _Colors.GREEN, "🌱")
    LOAD = ("LOAD", _Colors.BLUE, "📂")
    CREATE = ("CREATE", _Colors.GREEN, "➕")
    UPDATE = ("UPDATE", _Colors.YELLOW, "✏️")
    DELETE = ("DELETE", _Colors.MAGENTA, "🗑️")
    PERSIST = ("PERSIST", _Colors.CYAN, "💾")
    QUARANTINE = ("QUARANTINE", _Colors.RED, "🚧")
    ERROR = ("ERROR", _Colors.RED, "❌")


def _format_details(kwargs: dict[str, Any], tone: str) -> str:
    if not kwargs:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {tone}({details}){_Colors.RESET}"


# ── StoreLogger ──────────────────────────────────────────────────────

class StoreLogger:
    """Color-coded logger for one entity store.

    Usage:
        log = StoreLogger("dashboard_store.store.products")
        log.event(StoreStage.CREATE, "Created product", id="k3j9x0a")
        log.warning(StoreStage.UPDATE, "No product with that id", id="missing")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)
        self._component = component_name

    def event(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a completed store operation in its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.info(formatted + _format_details(kwargs, _Colors.GRAY))

    def warning(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a degraded-but-handled situation (fallbacks, lenient no-ops)."""
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.YELLOW}⚠ {message}{_Colors.RESET}"
        )
        self._logger.warning(formatted + _format_details(kwargs, _Colors.DIM))

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a store step error in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed) at DEBUG level."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        self._logger.debug(formatted + _format_details(kwargs, _Colors.DIM))

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> Iterator[None]:
        """Context manager that logs the elapsed time of a step at DEBUG level.

        Usage:
            with log.timed_step(StoreStage.PERSIST, "Writing products", records=12):
                storage.save("products", payload)
        """
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed * 1000:.1f}ms", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.detail(f"{message} — {elapsed * 1000:.1f}ms", **kwargs)
