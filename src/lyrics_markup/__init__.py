"""
Lyrics Markup - Convert {lyrics} and {instrument} song blocks to HTML

This package turns a small plain-text notation (inline [chords] and
{漢字|かな} ruby pairs) into nested <div>/<span>/<ruby> markup, and can
apply that conversion to every marked paragraph of a rendered HTML page.
"""

from .converter import (
    LYRICS_TARGET,
    INSTRUMENT_TARGET,
    SubstitutionRule,
    BlockProfile,
    LYRICS_PROFILE,
    INSTRUMENT_PROFILE,
    BlockClassifier,
    LineWrapper,
    ChordAnnotator,
    RubyAnnotator,
    render_block,
    convert_lyrics,
    convert_interlude,
    convert_block,
)

from .errors import (
    LyricsMarkupError,
    MissingMarkerError,
    ConfigError,
)

from .config import PageConfig
from .page import PageResult, PageTransformer, transform_document
from .batch import BatchProcessor

__version__ = "0.1.0"

__all__ = [
    # Markers and profiles
    'LYRICS_TARGET',
    'INSTRUMENT_TARGET',
    'SubstitutionRule',
    'BlockProfile',
    'LYRICS_PROFILE',
    'INSTRUMENT_PROFILE',
    # Pipeline stages
    'BlockClassifier',
    'LineWrapper',
    'ChordAnnotator',
    'RubyAnnotator',
    # Entry points
    'render_block',
    'convert_lyrics',
    'convert_interlude',
    'convert_block',
    # Errors
    'LyricsMarkupError',
    'MissingMarkerError',
    'ConfigError',
    # Pages
    'PageConfig',
    'PageResult',
    'PageTransformer',
    'transform_document',
    # Batch processing
    'BatchProcessor',
]
