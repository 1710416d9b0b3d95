"""Tests for tfmdoc.markdown.slug."""

import pytest

from tfmdoc.markdown.slug import DROPPED_CHARS, slugify


class TestSlugify:
    """Tests for slugify()."""

    def test_lowercases_and_hyphenates(self):
        assert slugify("Getting Started") == "getting-started"

    @pytest.mark.parametrize("char", DROPPED_CHARS)
    def test_drops_punctuation(self, char):
        assert slugify(f"a{char}b") == "ab"

    def test_keeps_other_characters(self):
        assert slugify("snake_case-and/slash") == "snake_case-and/slash"
        assert slugify("Über $5") == "über-$5"

    def test_does_not_collapse_or_trim_hyphens(self):
        assert slugify("Inputs & Outputs") == "inputs--outputs"
        assert slugify(" leading and trailing ") == "-leading-and-trailing-"

    def test_code_and_links(self):
        assert slugify("`terraform init` (v1.5)") == "terraform-init-v15"
        assert slugify("[Usage](#usage)") == "usageusage"

    def test_empty(self):
        assert slugify("") == ""

    def test_deterministic(self):
        title = "Module: Inputs, Outputs & More!"
        assert slugify(title) == slugify(title) == "module:-inputs-outputs--more"
