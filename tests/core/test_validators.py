"""Tests for _validators.py — ready-made validator predicates."""

import re

import pytest

from envtiers._validators import (
    Choices,
    HasPrefix,
    IsBool,
    IsInt,
    Matches,
    MinLength,
    all_of,
    non_empty,
)


def test_non_empty():
    assert non_empty("x") is True
    assert non_empty("") is False


class TestMinLength:
    def test_boundary(self):
        assert MinLength(8)("s3cr3t12") is True
        assert MinLength(8)("short") is False

    def test_zero_accepts_empty(self):
        assert MinLength(0)("") is True

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            MinLength(-1)


class TestHasPrefix:
    def test_single_prefix(self):
        assert HasPrefix("https://")("https://default-issuer.com") is True
        assert HasPrefix("https://")("http://x") is False
        assert HasPrefix("https://")("") is False

    def test_multiple_prefixes(self):
        check = HasPrefix("http://", "https://")
        assert check("http://a") and check("https://b")

    def test_requires_prefix(self):
        with pytest.raises(ValueError):
            HasPrefix()


class TestChoices:
    def test_case_sensitive(self):
        check = Choices(["debug", "info"])
        assert check("info") is True
        assert check("INFO") is False

    def test_case_insensitive(self):
        assert Choices(["debug", "info"], case_sensitive=False)("INFO") is True


class TestMatches:
    def test_full_match_required(self):
        check = Matches(r"[a-z]+")
        assert check("abc") is True
        assert check("abc1") is False

    def test_compiled_pattern(self):
        assert Matches(re.compile(r"\d{4}"))("2024") is True


class TestIsInt:
    def test_parses(self):
        assert IsInt()("8000") is True
        assert IsInt()("eighty") is False
        assert IsInt()("") is False

    def test_bounds(self):
        check = IsInt(minimum=1, maximum=65535)
        assert check("443") is True
        assert check("0") is False
        assert check("70000") is False


class TestIsBool:
    @pytest.mark.parametrize("value", ["true", "0", "YES", " off "])
    def test_accepts(self, value):
        assert IsBool()(value) is True

    @pytest.mark.parametrize("value", ["", "maybe", "2"])
    def test_rejects(self, value):
        assert IsBool()(value) is False


class TestAllOf:
    def test_all_must_pass(self):
        check = all_of(HasPrefix("https://"), MinLength(12))
        assert check("https://a.example") is True
        assert check("https://a") is False
        assert check("http://long.example") is False

    def test_empty_accepts_everything(self):
        assert all_of()("") is True
