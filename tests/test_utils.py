"""Tests for markscan utility modules and character classes."""

import logging

import pytest


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        from markscan.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "markscan.mymodule"
        assert isinstance(logger, logging.Logger)

    def test_keeps_package_names(self) -> None:
        from markscan.utils.logger import get_logger

        assert get_logger("markscan").name == "markscan"
        assert get_logger("markscan.lexer.code").name == "markscan.lexer.code"

    def test_reexported(self) -> None:
        from markscan.utils import get_logger

        assert get_logger("x").name == "markscan.x"

    def test_package_logger_has_null_handler(self) -> None:
        from markscan.utils.logger import get_logger

        handlers = get_logger("markscan").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestFlattenMatches:
    def test_strings_kept_whole(self) -> None:
        from markscan.lexer.charsets import flatten_matches

        assert flatten_matches([": ", "ab"]) == [": ", "ab"]

    def test_iterables_flattened_and_none_dropped(self) -> None:
        from markscan.lexer.charsets import EOL, flatten_matches

        assert flatten_matches([":", EOL, None]) == [":", "\n", "\0"]

    def test_empty(self) -> None:
        from markscan.lexer.charsets import flatten_matches

        assert flatten_matches([]) == []


class TestCharacterClasses:
    @pytest.mark.parametrize("c", [" ", "\t"])
    def test_is_space(self, c: str) -> None:
        from markscan.lexer.charsets import is_space

        assert is_space(c)

    @pytest.mark.parametrize("c", ["\n", "a", "", None])
    def test_is_not_space(self, c: str | None) -> None:
        from markscan.lexer.charsets import is_space

        assert not is_space(c)

    def test_is_alpha(self) -> None:
        from markscan.lexer.charsets import is_alpha

        assert is_alpha("a")
        assert is_alpha("Z")
        assert not is_alpha("-")
        assert not is_alpha("_")
        assert not is_alpha("1")
        assert not is_alpha(None)
        assert not is_alpha("ab")

    def test_is_number(self) -> None:
        from markscan.lexer.charsets import is_number

        assert is_number("0")
        assert is_number("9")
        assert not is_number("-")
        assert not is_number("+")
        assert not is_number(None)

    def test_is_alphanumeric(self) -> None:
        from markscan.lexer.charsets import is_alphanumeric

        for c in ["a", "Q", "7", ".", "+", "-"]:
            assert is_alphanumeric(c)
        for c in ["_", " ", ":", None]:
            assert not is_alphanumeric(c)

    def test_nl(self) -> None:
        from markscan.lexer.charsets import nl

        assert nl("a: b", "code") == "a: b\ncode"
        assert nl() == ""

    def test_dashes(self) -> None:
        from markscan.lexer.charsets import DASH

        assert DASH == ("-", "–", "—")
