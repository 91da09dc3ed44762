"""ContextVar-based scan configuration for tagscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Every scanner entry point reads the active config once per call, so a
generator can switch behaviour for a whole pass without threading the
options through each call site.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tagscan.config import ScanConfig, scan_config_context
    from tagscan import find_tags_quoted

    with scan_config_context(ScanConfig(quote_chars=('"', "'"))):
        tags = find_tags_quoted(source, "//<Code>", "//</Code>")

    # Or set and reset explicitly
    set_scan_config(ScanConfig(ignore_case=False))
    try:
        tags = find_tags(source, "BEGIN", "END")
    finally:
        reset_scan_config()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        ignore_case: Compare markers case-insensitively (length-preserving fold)
        quote_chars: Quote characters used by find_tags_quoted when the caller
            passes None
        exclude_chars: Opener/closer pairs used by find_tags when the caller
            passes None

    """

    ignore_case: bool = True
    quote_chars: tuple[str, ...] = ('"',)
    exclude_chars: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ScanConfig":
        """Create ScanConfig from a mapping.

        Unknown keys are silently ignored. List values for the character
        fields are converted to tuples so the result stays hashable.

        Args:
            config_dict: Mapping whose keys match ScanConfig attribute names.

        Returns:
            New ScanConfig instance.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "quote_chars": ['"', "'"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.quote_chars
            ('"', "'")

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            if key not in valid_fields:
                continue
            if key in ("quote_chars", "exclude_chars"):
                value = tuple(value)
            filtered[key] = value
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get the active scan configuration for this thread/context."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for the current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the module-level default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(ignore_case=False)):
        ...     find_tags("<A>x</A>", "<a>", "</a>")
        []

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
