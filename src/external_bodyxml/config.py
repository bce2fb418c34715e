"""ContextVar-based render configuration.

Config can be passed explicitly to the renderer or set once for the current
context and picked up by every renderer created inside it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from external_bodyxml.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(strict=True)):
        xhtml = transform(payload)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        max_depth: Deepest node nesting the renderer accepts. Deeper trees
            raise StructuralError instead of exhausting the interpreter stack.
            Every level counts, wrapper nodes and the root included, so a
            chain of inline formatting reaches the limit at about half this
            many formatting nodes (each one sits inside a Phrasing wrapper).
        strict: Raise UnsupportedVariantError for node classes the renderer
            has no rule for, instead of skipping them silently.

    """

    max_depth: int = 256
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"strict": True, "unknown_key": 1}).strict
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(max_depth=32)):
        ...     get_render_config().max_depth
        32

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
