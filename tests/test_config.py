"""Tests for ContextVar-based tokenizer configuration.

Validates thread isolation, context manager behavior, and the explicit
config argument.
"""

from threading import Thread

import pytest

from tagscan import (
    Tokenizer,
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenize,
    tokenizer_config_context,
)


class TestTokenizerConfigDataclass:
    """Test TokenizerConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = TokenizerConfig()
        assert config.strict_end is True
        assert config.coerce_values is True

    def test_immutability(self) -> None:
        config = TokenizerConfig()
        with pytest.raises(AttributeError):
            config.strict_end = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = TokenizerConfig.from_dict({"coerce_values": False, "bogus": 1})
        assert config == TokenizerConfig(coerce_values=False)


class TestConfigContext:
    """Context-local config handling."""

    def test_default_context(self) -> None:
        assert get_tokenizer_config() == TokenizerConfig()

    def test_context_manager_restores(self) -> None:
        with tokenizer_config_context(TokenizerConfig(strict_end=False)):
            assert get_tokenizer_config().strict_end is False
            assert tokenize("<a>") != []
        assert get_tokenizer_config().strict_end is True

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with tokenizer_config_context(TokenizerConfig(coerce_values=False)):
                raise RuntimeError("boom")
        assert get_tokenizer_config().coerce_values is True

    def test_set_and_reset(self) -> None:
        set_tokenizer_config(TokenizerConfig(coerce_values=False))
        try:
            assert tokenize('<a x="1"/>')[0].attributes[0].value == "1"
        finally:
            reset_tokenizer_config()
        assert tokenize('<a x="1"/>')[0].attributes[0].value == 1

    def test_explicit_config_wins(self) -> None:
        with tokenizer_config_context(TokenizerConfig(coerce_values=False)):
            tokenizer = Tokenizer("<a>7</a>", config=TokenizerConfig())
            events = list(tokenizer.events())
        assert events[1].content == 7

    def test_config_read_at_construction(self) -> None:
        with tokenizer_config_context(TokenizerConfig(coerce_values=False)):
            tokenizer = Tokenizer("<a>7</a>")
        assert [e.content for e in tokenizer.events()][1] == "7"

    def test_thread_isolation(self) -> None:
        seen: dict[str, bool] = {}

        def worker() -> None:
            seen["strict_end"] = get_tokenizer_config().strict_end

        with tokenizer_config_context(TokenizerConfig(strict_end=False)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()

        assert seen["strict_end"] is True


class TestCoercionSwitch:
    def test_values_stay_strings(self) -> None:
        config = TokenizerConfig(coerce_values=False)
        events = tokenize('<a n="1" e="">  true  </a>', config=config)
        assert events[0].attributes[0].value == "1"
        assert events[0].attributes[1].value is None
        assert events[1].content == "true"
