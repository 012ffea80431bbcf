"""Tests for rucpy.normalization.ruc_normalizer."""
from __future__ import annotations

import pytest

from rucpy.normalization.ruc_normalizer import normalize_ruc
from rucpy.validation.errors import ErrorKind, RucFormatError


class TestSeparators:
    def test_hyphen_removed(self) -> None:
        assert normalize_ruc("80028061-0") == "800280610"

    def test_spaces_removed(self) -> None:
        assert normalize_ruc(" 8002 8061 0 ") == "800280610"

    def test_already_canonical_unchanged(self) -> None:
        assert normalize_ruc("9991603") == "9991603"

    def test_empty_string(self) -> None:
        assert normalize_ruc("") == ""


class TestUnicodeVariants:
    @pytest.mark.parametrize("raw", [
        "80028061\u00a00",     # no-break space
        "80028061\u30000",     # ideographic space
        "80028061\t0\n",       # tab / newline
        "80028061\u20130",     # en dash
        "80028061\u22120",     # minus sign
        "80028061\u200b0",     # zero-width space
        "\ufeff800280610",     # byte order mark
    ])
    def test_invisible_and_dash_variants_removed(self, raw: str) -> None:
        assert normalize_ruc(raw) == "800280610"

    def test_fullwidth_digits_folded(self) -> None:
        assert normalize_ruc("\uff18\uff10\uff10\uff12\uff18\uff10\uff16\uff11\uff0d\uff10") == "800280610"

    def test_letters_pass_through(self) -> None:
        # Digit-class checks belong to the validator
        assert normalize_ruc("80000001-X") == "80000001X"

    def test_no_length_check(self) -> None:
        assert normalize_ruc("1-2") == "12"


class TestMalformedInput:
    @pytest.mark.parametrize("raw", [
        "8002\x0080610",    # NUL
        "8002806\x1b10",    # ESC
        "\x07800280610",    # BEL
        "80028\ud80061",    # unpaired surrogate
    ])
    def test_raises_invalid_format(self, raw: str) -> None:
        with pytest.raises(RucFormatError) as excinfo:
            normalize_ruc(raw)
        assert excinfo.value.kind is ErrorKind.INVALID_FORMAT

    def test_non_string_raises_invalid_format(self) -> None:
        with pytest.raises(RucFormatError) as excinfo:
            normalize_ruc(800280610)  # type: ignore[arg-type]
        assert excinfo.value.error.kind is ErrorKind.INVALID_FORMAT

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            normalize_ruc("\x00")
