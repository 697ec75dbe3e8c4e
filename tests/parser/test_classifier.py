"""
Tests for block classification
"""

import pytest
from lyrics_markup import (
    BlockClassifier,
    LYRICS_PROFILE,
    INSTRUMENT_PROFILE,
)


class TestBlockClassifier:
    """Tests for BlockClassifier.classify()"""

    def test_lyrics_block(self):
        """Should recognize the {lyrics} marker"""
        assert BlockClassifier.classify("{lyrics}\n[C]Hello") == 'lyrics'

    def test_instrument_block(self):
        """Should recognize the {instrument} marker"""
        assert BlockClassifier.classify("{instrument}\n[C]  [G]") == 'instrument'

    def test_marker_alone(self):
        """A bare marker is still a classified block"""
        assert BlockClassifier.classify("{lyrics}") == 'lyrics'

    @pytest.mark.parametrize("text", [
        "",
        "Just a paragraph",
        " {lyrics}\n[C]Hello",   # no trimming
        "{Lyrics}\n[C]Hello",    # case-sensitive
        "{LYRICS}",
        "{instrumental}\n[C]",
        "lyrics}\n[C]",
        "[C]{lyrics}",
    ])
    def test_unclassified(self, text):
        """Anything not starting with an exact marker is unclassified"""
        assert BlockClassifier.classify(text) is None

    def test_profile_for(self):
        """Should hand back the matching rendering profile"""
        assert BlockClassifier.profile_for("{lyrics}x") is LYRICS_PROFILE
        assert BlockClassifier.profile_for("{instrument}x") is INSTRUMENT_PROFILE
        assert BlockClassifier.profile_for("x") is None
