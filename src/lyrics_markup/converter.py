#!/usr/bin/env python3
"""
Lyrics Converter - Turns marked-up lyric/instrument blocks into HTML

A block starts with a marker prefix ({lyrics} or {instrument}). The rest of
the block is run through an ordered pipeline of regex substitutions:

1. line wrapping - every non-empty line becomes a <div>
2. chord annotation - [C] / [N.C.] first, then decorated chords like [Am7]
3. ruby annotation - {明日|あした} pairs (lyrics only)

Each stage consumes the string produced by the previous one. Nothing is
kept between calls, so every entry point is a pure function.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import MissingMarkerError


LYRICS_TARGET = '{lyrics}'
INSTRUMENT_TARGET = '{instrument}'

LYRICS = 'lyrics'
INSTRUMENT = 'instrument'


@dataclass(frozen=True)
class SubstitutionRule:
    """A single pattern -> template rewrite"""
    name: str
    pattern: re.Pattern
    template: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.template, text)


@dataclass(frozen=True)
class BlockProfile:
    """How one kind of block is rendered"""
    kind: str  # 'lyrics' or 'instrument'
    marker: str
    css_class: str
    strict_chords: bool  # strict simple-chord rule (lyrics) vs loose (instrument)
    ruby: bool


LYRICS_PROFILE = BlockProfile(
    kind=LYRICS,
    marker=LYRICS_TARGET,
    css_class='chord',
    strict_chords=True,
    ruby=True,
)

INSTRUMENT_PROFILE = BlockProfile(
    kind=INSTRUMENT,
    marker=INSTRUMENT_TARGET,
    css_class='instrument',
    strict_chords=False,
    ruby=False,
)

PROFILES = (LYRICS_PROFILE, INSTRUMENT_PROFILE)


class BlockClassifier:
    """Decides which kind of block a paragraph is"""

    @staticmethod
    def classify(text: str) -> Optional[str]:
        """
        Return 'lyrics', 'instrument', or None for an unrecognized block.

        Case-sensitive prefix test; leading whitespace is not trimmed.
        """
        profile = BlockClassifier.profile_for(text)
        return profile.kind if profile else None

    @staticmethod
    def profile_for(text: str) -> Optional[BlockProfile]:
        for profile in PROFILES:
            if text.startswith(profile.marker):
                return profile
        return None


class LineWrapper:
    """Wraps each non-empty line in an outer container"""

    # Same line terminators a browser regex '.' refuses to cross
    LINE_PATTERN = re.compile(r'[^\n\r\u2028\u2029]+')

    @staticmethod
    def wrap(text: str, css_class: str) -> str:
        """Wrap every run of non-line-break characters; blank lines stay blank"""
        rule = SubstitutionRule(
            name='line',
            pattern=LineWrapper.LINE_PATTERN,
            template=f"<div class='{css_class}'>\\g<0></div>",
        )
        return rule.apply(text)


class ChordAnnotator:
    """
    Rewrites bracketed chord tokens as <span> annotations.

    Two simple-chord rules exist because lyrics and instrument blocks have
    always been rendered differently:

    - strict (lyrics): the whole token is one root letter or N.C.
    - loose (instrument): the whole token is one or more root letters,
      so [AE] renders as a single span instead of A with an E decoration.

    The simple rule always runs before the decorated-chord rule.
    """

    SIMPLE_STRICT = re.compile(r'\[(?P<chord>[ABCDEFG]|N\.C\.)\]')
    SIMPLE_LOOSE = re.compile(r'\[(?P<chord>[ABCDEFG]+)\]')
    # \w is ASCII only: chord decorations never carry non-Latin letters
    COMPLEX = re.compile(r'\[(?P<chord>[ABCDEFG])(?P<dec>[\w#b\-/]+)\]', re.ASCII)

    @staticmethod
    def rules(css_class: str, strict: bool = True) -> Tuple[SubstitutionRule, ...]:
        """Return the chord rules in the order they must be applied"""
        simple = SubstitutionRule(
            name='simple-strict' if strict else 'simple-loose',
            pattern=ChordAnnotator.SIMPLE_STRICT if strict else ChordAnnotator.SIMPLE_LOOSE,
            template=f"<span class='{css_class}'>\\g<chord></span>",
        )
        complex_chord = SubstitutionRule(
            name='complex',
            pattern=ChordAnnotator.COMPLEX,
            template=f"<span class='{css_class}'>\\g<chord><sub>\\g<dec></sub></span>",
        )
        return (simple, complex_chord)

    @staticmethod
    def annotate(text: str, css_class: str, strict: bool = True) -> str:
        for rule in ChordAnnotator.rules(css_class, strict):
            text = rule.apply(text)
        return text


class RubyAnnotator:
    """Rewrites {漢字|かな} pairs as <ruby> annotations"""

    RUBY_PATTERN = re.compile(
        r'\{(?P<ji>[\u3005\u4e00-\u9fff]+)\|(?P<hira>[\u3040-\u30ff]+)\}'
    )
    RULE = SubstitutionRule(
        name='ruby',
        pattern=RUBY_PATTERN,
        template='<ruby>\\g<ji><rt>\\g<hira></rt></ruby>',
    )

    @staticmethod
    def annotate(text: str) -> str:
        return RubyAnnotator.RULE.apply(text)


def render_block(body: str, profile: BlockProfile) -> str:
    """Run the annotation pipeline on a block body (marker already removed)"""
    markup = LineWrapper.wrap(body, profile.css_class)
    markup = ChordAnnotator.annotate(markup, profile.css_class, profile.strict_chords)
    if profile.ruby:
        markup = RubyAnnotator.annotate(markup)
    return markup


def _strip_marker(text: str, profile: BlockProfile) -> str:
    if not text.startswith(profile.marker):
        raise MissingMarkerError(profile.marker, text)
    return text[len(profile.marker):]


def convert_lyrics(text: str) -> str:
    """
    Convert a {lyrics} block to HTML.

    Raises MissingMarkerError if the block does not start with '{lyrics}'.
    """
    return render_block(_strip_marker(text, LYRICS_PROFILE), LYRICS_PROFILE)


def convert_interlude(text: str) -> str:
    """
    Convert an {instrument} block to HTML. No ruby stage.

    Raises MissingMarkerError if the block does not start with '{instrument}'.
    """
    return render_block(_strip_marker(text, INSTRUMENT_PROFILE), INSTRUMENT_PROFILE)


def convert_block(text: str) -> Optional[str]:
    """Classify a block and convert it, or return None if it has no marker"""
    profile = BlockClassifier.profile_for(text)
    if profile is None:
        return None
    return render_block(text[len(profile.marker):], profile)
