"""Tests for individual pattern detection modules."""

import pytest

from linkscan.models import LinkTarget
from linkscan.patterns.base import DetectorError, compile_pattern
from linkscan.patterns.handle import detect as detect_handles
from linkscan.patterns.hashtag import detect as detect_hashtags
from linkscan.patterns.url import URLDetector, detect as detect_urls


def _values(matches):
    return [m.value for m in matches]


class TestUserHandlePatterns:
    def test_simple_handle(self):
        matches = detect_handles("hello @world")
        assert len(matches) == 1
        assert matches[0].offset == 6
        assert matches[0].length == 6
        assert matches[0].value == "@world"
        assert matches[0].type == "user_handle"

    def test_underscores_and_digits(self):
        assert _values(detect_handles("ping @dev_team42 now")) == ["@dev_team42"]

    def test_bare_sigil_is_a_match(self):
        matches = detect_handles("typing @")
        assert len(matches) == 1
        assert matches[0].offset == 7
        assert matches[0].length == 1
        assert matches[0].value == "@"

    def test_double_sigil(self):
        matches = detect_handles("@@nested")
        assert [(m.offset, m.length, m.value) for m in matches] == [
            (0, 1, "@"),
            (1, 7, "@nested"),
        ]

    def test_not_preceded_by_word_character(self):
        assert detect_handles("user@example.com") == []

    def test_stops_at_punctuation(self):
        assert _values(detect_handles("thanks @ana, @bo.")) == ["@ana", "@bo"]

    def test_case_is_preserved(self):
        assert _values(detect_handles("@MixedCase")) == ["@MixedCase"]

    def test_unicode_word_characters(self):
        matches = detect_handles("héllo @jöhn")
        assert matches[0].offset == 6
        assert matches[0].value == "@jöhn"

    def test_ignores_hashtags(self):
        assert detect_handles("#topic only") == []


class TestHashtagPatterns:
    def test_simple_hashtag(self):
        matches = detect_hashtags("check #topic and more")
        assert len(matches) == 1
        assert matches[0].offset == 6
        assert matches[0].value == "#topic"
        assert matches[0].type == "hashtag"

    def test_double_sigil(self):
        matches = detect_hashtags("##tag")
        assert [(m.offset, m.value) for m in matches] == [(0, "#"), (1, "#tag")]

    def test_not_preceded_by_word_character(self):
        assert detect_hashtags("issue#12") == []

    def test_multiple_in_order(self):
        assert _values(detect_hashtags("#a #b_c #日本")) == ["#a", "#b_c", "#日本"]

    def test_ignores_handles(self):
        assert detect_hashtags("@someone") == []


class TestUrlPatterns:
    def test_full_url(self):
        matches = detect_urls("Check https://example.com/path")
        assert len(matches) == 1
        assert matches[0].offset == 6
        assert matches[0].value == "https://example.com/path"
        assert matches[0].type == "url"

    def test_full_url_with_query_and_fragment(self):
        text = "go http://example.com/a?b=1#frag"
        assert _values(detect_urls(text)) == ["http://example.com/a?b=1#frag"]

    def test_no_protocol(self):
        matches = detect_urls("Visit example.com.")
        assert len(matches) == 1
        assert matches[0].offset == 6
        assert matches[0].value == "example.com"

    def test_www_with_port_and_path(self):
        assert _values(detect_urls("www.example.org:8080/a")) == ["www.example.org:8080/a"]

    def test_short_domain(self):
        assert _values(detect_urls("see bit.ly/abc123")) == ["bit.ly/abc123"]

    def test_email_is_a_link(self):
        assert _values(detect_urls("Email me at user@example.com")) == ["user@example.com"]

    def test_mailto(self):
        assert _values(detect_urls("mailto:bob@example.com")) == ["mailto:bob@example.com"]

    def test_trailing_punctuation_trimmed(self):
        matches = detect_urls("Read http://example.com/a, then stop.")
        assert _values(matches) == ["http://example.com/a"]
        assert matches[0].length == len("http://example.com/a")

    def test_unbalanced_paren_trimmed(self):
        assert _values(detect_urls("(see http://example.com/a)")) == ["http://example.com/a"]

    def test_balanced_paren_kept(self):
        url = "http://en.wikipedia.org/wiki/Foo_(bar)"
        assert _values(detect_urls(f"read {url}")) == [url]

    def test_scheme_without_host_is_not_a_link(self):
        assert detect_urls("go to http://. now") == []

    def test_unknown_extension_not_a_domain(self):
        assert detect_urls("open notes.txt please") == []

    def test_handle_with_domain_is_not_a_url(self):
        assert detect_urls("@example.com") == []

    def test_plain_words(self):
        assert detect_urls("@user #tag nothing here") == []

    def test_internationalized_host(self):
        matches = detect_urls("http://münchen.de/x")
        assert _values(matches) == ["http://münchen.de/x"]
        assert (matches[0].offset, matches[0].length) == (0, 19)

    def test_non_ascii_path(self):
        url = "https://example.com/straße?q=é"
        assert _values(detect_urls(f"see {url}.")) == [url]

    def test_internationalized_www_host(self):
        assert _values(detect_urls("visit www.bücher.de today")) == ["www.bücher.de"]

    def test_email_not_restarted_inside_dotted_words(self):
        assert detect_urls("a." * 5000) == []
        assert _values(detect_urls("x.y.z@example.com")) == ["x.y.z@example.com"]

    def test_multiple_urls_in_order(self):
        matches = detect_urls("a http://x.io b example.net c")
        assert _values(matches) == ["http://x.io", "example.net"]
        assert matches[0].offset < matches[1].offset


class TestUrlLinkTargets:
    def test_explicit_target_replaces_visible_text(self):
        text = "see example.com"
        targets = [LinkTarget(start=4, length=11, target="https://example.com/landing")]
        matches = detect_urls(text, targets)
        assert _values(matches) == ["https://example.com/landing"]
        # Range still describes the visible span
        assert (matches[0].offset, matches[0].length) == (4, 11)

    def test_target_ignored_when_not_preferred(self):
        targets = [LinkTarget(start=4, length=11, target="https://example.com/landing")]
        matches = detect_urls("see example.com", targets, prefer_link_target=False)
        assert _values(matches) == ["example.com"]

    def test_target_must_cover_match_start(self):
        targets = [LinkTarget(start=0, length=3, target="https://elsewhere.com")]
        assert _values(detect_urls("see example.com", targets)) == ["example.com"]

    def test_first_covering_target_wins(self):
        targets = [
            LinkTarget(start=0, length=20, target="https://first.com"),
            LinkTarget(start=4, length=11, target="https://second.com"),
        ]
        assert _values(detect_urls("see example.com", targets)) == ["https://first.com"]


class TestPatternCompilation:
    def test_invalid_pattern_raises_detector_error(self):
        with pytest.raises(DetectorError):
            compile_pattern(r"([")

    def test_url_detector_builds(self):
        assert URLDetector().url_pattern is not None
