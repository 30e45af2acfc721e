"""Tests for the gitmoji intention catalogue."""

from __future__ import annotations

import pytest

from release_checker.core.gitmoji import (
    SEVERITY_INDEX,
    SYMBOL_INDEX,
    Gitmoji,
    Severity,
    find_intention,
    gitmojis_for,
)


class TestCatalogue:
    def test_size(self):
        assert len(Gitmoji) == 73

    def test_exactly_one_major(self):
        assert gitmojis_for(Severity.MAJOR) == (Gitmoji.BOOM,)

    def test_bucket_sizes(self):
        assert len(gitmojis_for(Severity.MINOR)) == 9
        assert len(gitmojis_for(Severity.PATCH)) == 42
        assert len(gitmojis_for(Severity.OTHER)) == 21

    def test_every_intention_has_one_severity(self):
        assert set(SEVERITY_INDEX) == set(Gitmoji)
        for gitmoji in Gitmoji:
            assert SEVERITY_INDEX[gitmoji] is gitmoji.severity

    def test_symbols_are_unique(self):
        assert len(SYMBOL_INDEX) == 2 * len(Gitmoji)

    def test_shortcode_form(self):
        for gitmoji in Gitmoji:
            assert gitmoji.shortcode.startswith(":")
            assert gitmoji.shortcode.endswith(":")

    def test_indexes_are_read_only(self):
        with pytest.raises(TypeError):
            SYMBOL_INDEX[":new:"] = Gitmoji.BOOM
        with pytest.raises(TypeError):
            SEVERITY_INDEX[Gitmoji.MEMO] = Severity.MAJOR

    def test_display_is_glyph(self):
        assert str(Gitmoji.TADA) == "🎉"
        assert str(Gitmoji.BEERS) == "🍻"
        assert str(Gitmoji.BOOM) == "💥"

    def test_shortcodes(self):
        assert Gitmoji.TADA.shortcode == ":tada:"
        assert Gitmoji.BEERS.shortcode == ":beers:"
        assert Gitmoji.BOOM.shortcode == ":boom:"

    def test_glyph_keeps_variation_selector(self):
        assert Gitmoji.AMBULANCE.glyph == "\U0001F691\ufe0f"
        assert Gitmoji.TECHNOLOGIST.glyph == "\U0001F9D1\u200d\U0001F4BB"

    def test_from_symbol(self):
        assert Gitmoji.from_symbol(":sparkles:") is Gitmoji.SPARKLES
        assert Gitmoji.from_symbol("✨") is Gitmoji.SPARKLES
        assert Gitmoji.from_symbol(":nope:") is None


class TestFindIntention:
    def test_shortcode(self):
        assert find_intention("hello :boom:") is Gitmoji.BOOM

    def test_glyph(self):
        assert find_intention("🐛 fix a bug") is Gitmoji.BUG

    def test_anywhere_in_text(self):
        assert find_intention("fix a bug\n\nrefs :bug: in body") is Gitmoji.BUG

    def test_inside_a_word(self):
        assert find_intention("prefix:memo:suffix") is Gitmoji.MEMO

    def test_no_symbol(self):
        assert find_intention("plain commit message") is None

    def test_empty(self):
        assert find_intention("") is None

    def test_similar_shortcodes_do_not_collide(self):
        assert find_intention(":construction_worker: ci") is Gitmoji.CONSTRUCTION_WORKER
        assert find_intention(":construction: wip") is Gitmoji.CONSTRUCTION
        assert find_intention(":closed_lock_with_key: secrets") is Gitmoji.CLOSED_LOCK_WITH_KEY

    def test_multiple_symbols_use_declaration_order(self):
        # position in the message does not matter, only catalogue order
        assert find_intention(":sparkles: then 💥") is Gitmoji.BOOM
        assert find_intention(":memo: :bug:") is Gitmoji.BUG
        assert find_intention("♻️ :sparkles:") is Gitmoji.SPARKLES
