from __future__ import annotations

import re

import pytest

from resplit import (
    RegexSplitter,
    SplitConfig,
    iter_pieces,
    split_inclusive,
    split_inclusive_left,
)

TEXTS = [
    "",
    "abc",
    "\n",
    "\n\n",
    "line one\nline two\r\nline three\n",
    "List of fruits:\n-apple\n-pear\n-banana",
    "a--b---c-",
]
PATTERNS = [r"\r?\n", r"(?m)^-", r"-+", r"x*", r"", r"\b"]


def test_split_inclusive_mixed_newlines():
    text = "This is just\na set of lines\r\nwith different newlines."

    assert list(split_inclusive(r"\r?\n", text)) == [
        "This is just\n",
        "a set of lines\r\n",
        "with different newlines.",
    ]


def test_split_inclusive_left_line_markers():
    text = "List of fruits:\n-apple\n-pear\n-banana"

    assert list(split_inclusive_left(r"(?m)^-", text)) == [
        "List of fruits:\n",
        "-apple\n",
        "-pear\n",
        "-banana",
    ]


def test_split_inclusive_left_newlines():
    text = "Mary had a little lamb\nlittle lamb\r\nlittle lamb."

    assert list(split_inclusive_left(r"\r?\n", text)) == [
        "Mary had a little lamb",
        "\nlittle lamb",
        "\r\nlittle lamb.",
    ]


@pytest.mark.parametrize("pattern", PATTERNS)
@pytest.mark.parametrize("text", TEXTS)
def test_pieces_reassemble_text(pattern, text):
    assert "".join(split_inclusive(pattern, text)) == text
    assert "".join(split_inclusive_left(pattern, text)) == text


@pytest.mark.parametrize("text", TEXTS)
def test_no_match_yields_single_piece(text):
    assert list(split_inclusive("@", text)) == [text]
    assert list(split_inclusive_left("@", text)) == [text]


def test_zero_length_match_at_start():
    assert list(split_inclusive(r"^", "abc")) == ["", "abc"]
    assert list(split_inclusive_left(r"^", "abc")) == ["abc"]


def test_empty_pattern_splits_every_character():
    assert list(split_inclusive("", "abc")) == ["", "a", "b", "c"]
    assert list(split_inclusive_left("", "abc")) == ["a", "b", "c"]


def test_bytes_pattern_and_text():
    text = b"Mary had a little lamb\nlittle lamb\r\nlittle lamb."

    assert list(split_inclusive(rb"\r?\n", text)) == [
        b"Mary had a little lamb\n",
        b"little lamb\r\n",
        b"little lamb.",
    ]
    assert list(split_inclusive_left(re.compile(rb"\r?\n"), text)) == [
        b"Mary had a little lamb",
        b"\nlittle lamb",
        b"\r\nlittle lamb.",
    ]


def test_compiled_pattern_is_used_as_is():
    pattern = re.compile(r"[.!?]\s*")
    assert list(split_inclusive(pattern, "Hi. Bye! Ok")) == ["Hi. ", "Bye! ", "Ok"]


def test_config_flags_apply_to_string_patterns():
    cfg = SplitConfig(flags=re.IGNORECASE)
    assert list(split_inclusive("x", "aXb", config=cfg)) == ["aX", "b"]
    assert list(split_inclusive("x", "aXb")) == ["aXb"]


def test_entry_points_override_config_mode():
    cfg = SplitConfig(mode="delimiter_start")
    assert list(split_inclusive(",", "a,b", config=cfg)) == ["a,", "b"]


def test_iter_pieces_uses_config_mode():
    pieces = iter_pieces(",", "a,b", config=SplitConfig(mode="delimiter_start"))
    assert [(p.start, p.end, p.text) for p in pieces] == [(0, 1, "a"), (1, 3, ",b")]


def test_iter_pieces_unknown_mode():
    with pytest.raises(ValueError):
        iter_pieces(",", "a,b", config=SplitConfig(mode="sideways"))


def test_invalid_pattern_type():
    with pytest.raises(TypeError, match="finditer"):
        list(split_inclusive(42, "abc"))


def test_matcher_errors_propagate():
    with pytest.raises(re.error):
        list(split_inclusive("(", "abc"))


def test_str_bytes_mismatch_raised_on_iteration():
    pieces = split_inclusive(r"\n", b"a\nb")
    with pytest.raises(TypeError):
        next(pieces)


def test_split_is_lazy():
    pulled: list[int] = []
    pattern = re.compile(r"\n")

    class RecordingMatcher:
        def finditer(self, text):
            for match in pattern.finditer(text):
                pulled.append(match.start())
                yield match

    pieces = split_inclusive(RecordingMatcher(), "a\n" * 10_000)

    assert pulled == []
    assert next(pieces) == "a\n"
    assert pulled == [1]


class TestRegexSplitter:
    def test_both_modes(self):
        splitter = RegexSplitter(r"\r?\n")
        text = "one\ntwo\r\nthree"

        assert list(splitter.split_inclusive(text)) == ["one\n", "two\r\n", "three"]
        assert list(splitter.split_inclusive_left(text)) == [
            "one",
            "\ntwo",
            "\r\nthree",
        ]

    def test_pieces_default_mode_from_config(self):
        splitter = RegexSplitter(";", SplitConfig(mode="delimiter_start"))
        assert [p.bounds for p in splitter.pieces("a;b")] == [(0, 1), (1, 3)]
        assert [p.bounds for p in splitter.pieces("a;b", "delimiter_end")] == [
            (0, 2),
            (2, 3),
        ]

    def test_reusable_across_texts(self):
        splitter = RegexSplitter(",")
        assert list(splitter.split_inclusive("a,b")) == ["a,", "b"]
        assert list(splitter.split_inclusive("c,d,")) == ["c,", "d,"]

    def test_repr(self):
        assert "','" in repr(RegexSplitter(","))
