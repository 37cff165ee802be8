"""Tests for compile_pattern() and pattern helper functions."""

from __future__ import annotations

import pytest

from moneypattern.diagnostics import DiagnosticCode, InvalidPatternError
from moneypattern.syntax import (
    PatternToken,
    TokenKind,
    compile_pattern,
    contains_code,
    count_code_markers,
    strip_whitespace,
)


class TestDigitRunCollapse:
    """The single digit-placeholder run collapses to major/minor instructions."""

    @pytest.mark.parametrize(
        ("pattern", "canonical"),
        [
            ("S0.00", "S#.%"),
            ("S#,##0.00", "S#.%"),
            ("S #,##0.00", "S#.%"),
            ("CCC0.00", "CCC#.%"),
            ("SCCC 0", "SCCC#"),
            ("0.00 S", "#.%S"),
            ("##0.###", "#.%"),
        ],
    )
    def test_canonical_form(self, pattern: str, canonical: str) -> None:
        assert compile_pattern(pattern, ".", ",").canonical == canonical

    def test_token_positions_refer_to_source_pattern(self) -> None:
        """Each instruction remembers where it came from in the pattern."""
        compiled = compile_pattern("S #,##0.00", ".", ",")

        assert [(t.kind, t.position) for t in compiled.tokens] == [
            (TokenKind.SYMBOL, 0),
            (TokenKind.WHITESPACE, 1),
            (TokenKind.MAJOR_DIGITS, 2),
            (TokenKind.DECIMAL, 7),
            (TokenKind.MINOR_DIGITS, 8),
        ]

    def test_major_only_pattern(self) -> None:
        compiled = compile_pattern("S0", ".", ",")

        assert compiled.canonical == "S#"
        assert TokenKind.MINOR_DIGITS not in {token.kind for token in compiled.tokens}

    def test_configured_separators(self) -> None:
        """Continental separators: ',' is decimal, '.' is grouping."""
        compiled = compile_pattern("S#.##0,00", ",", ".")

        assert compiled.canonical == "S#.%"
        assert compiled.tokens[-1] == PatternToken(TokenKind.MINOR_DIGITS, 7)

    def test_swapped_separators_change_the_split(self) -> None:
        """With '.' as grouping, "0.00" is one major run without decimals."""
        assert compile_pattern("S0.00", ",", ".").canonical == "S#"

    def test_code_markers_become_code_instructions(self) -> None:
        kinds = [token.kind for token in compile_pattern("SCCC0.00", ".", ",").tokens]

        assert kinds.count(TokenKind.CODE) == 3

    def test_source_is_preserved(self) -> None:
        assert compile_pattern("S 0.00", ".", ",").source == "S 0.00"


class TestMalformedPatterns:
    """Malformed or ambiguous patterns raise InvalidPatternError."""

    def test_two_digit_runs(self) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern("0.00.00", ".", ",")

        assert exc_info.value.diagnostic.code is DiagnosticCode.PATTERN_MULTIPLE_DIGIT_RUNS
        assert exc_info.value.pattern == "0.00.00"

    def test_space_inside_digit_run(self) -> None:
        """A space splits the numeric part into two runs."""
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern("S0 000.00", ".", ",")

        assert exc_info.value.diagnostic.code is DiagnosticCode.PATTERN_MULTIPLE_DIGIT_RUNS

    @pytest.mark.parametrize("pattern", ["", "S", "CCC", "S ."])
    def test_no_digit_run(self, pattern: str) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern(pattern, ".", ",")

        assert exc_info.value.diagnostic.code is DiagnosticCode.PATTERN_NO_DIGITS

    def test_unknown_character(self) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern("X0.00", ".", ",")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic.code is DiagnosticCode.PATTERN_INVALID_CHARACTER
        assert diagnostic.pattern_index == 0
        assert diagnostic.found == "X"

    @pytest.mark.parametrize(
        ("pattern", "index"),
        [
            ("S.0.00", 1),
            ("S0.00.", 5),
            (". S 0.00", 0),
        ],
    )
    def test_extra_decimal_literal_with_minor_digits(self, pattern: str, index: int) -> None:
        """Minor digits follow exactly one decimal literal."""
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern(pattern, ".", ",")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic.code is DiagnosticCode.PATTERN_MULTIPLE_DECIMALS
        assert diagnostic.pattern_index == index

    def test_configured_separator_counts_as_extra_decimal(self) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern("S,0,00", ",", ".")

        assert exc_info.value.diagnostic.code is DiagnosticCode.PATTERN_MULTIPLE_DECIMALS

    def test_decimal_literal_without_minor_digits_is_allowed(self) -> None:
        """A trailing decimal literal after a major-only run stays valid."""
        assert compile_pattern("S0.", ",", ".").canonical == "S#"
        assert compile_pattern("S0 .", ".", ",").canonical == "S#."

    def test_lowercase_markers_are_not_markers(self) -> None:
        with pytest.raises(InvalidPatternError):
            compile_pattern("s0.00", ".", ",")


class TestPatternHelpers:
    """Helpers shared by the compiler, decoder and registry."""

    def test_strip_whitespace_removes_all_kinds(self) -> None:
        assert strip_whitespace(" $ 1 234.56\t\n") == "$1234.56"

    def test_strip_whitespace_removes_non_breaking_spaces(self) -> None:
        assert strip_whitespace("1 234,56 €") == "1234,56€"

    def test_count_code_markers(self) -> None:
        assert count_code_markers("SCCC0.00") == 3
        assert count_code_markers("S0.00") == 0

    def test_contains_code(self) -> None:
        assert contains_code("CC0")
        assert not contains_code("S0.00")
