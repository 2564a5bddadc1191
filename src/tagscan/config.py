"""ContextVar-based tokenizer configuration for tagscan.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Tokenizer reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tagscan.config import TokenizerConfig, tokenizer_config_context

    with tokenizer_config_context(TokenizerConfig(strict_end=False)):
        events = tokenize("<a><b>")

    # Or pass the config explicitly
    tokenizer = Tokenizer(text, config=TokenizerConfig(coerce_values=False))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        strict_end: Raise when the input ends with open tags or inside
            unfinished markup. When False, exhaustion is silent.
        coerce_values: Parse attribute values and content as literals.
            When False, values stay strings (empty still becomes None and
            content is still trimmed).

    """

    strict_end: bool = True
    coerce_values: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TokenizerConfig":
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "strict_end": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_end
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get current tokenizer configuration (context-local)."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(strict_end=False)):
        ...     get_tokenizer_config().strict_end
        False

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
