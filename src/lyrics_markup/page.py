#!/usr/bin/env python3
"""
Page transformer - applies the lyrics converter to a rendered HTML page

Finds every paragraph inside the page's content containers, and for those
whose text starts with a block marker replaces the paragraph's contents with
the converted markup. All other paragraphs are left exactly as they were.
"""

import html
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from bs4 import BeautifulSoup

from .config import PageConfig
from .converter import BlockClassifier, render_block

_LOG = logging.getLogger(__name__)


@dataclass
class PageResult:
    """Outcome of transforming one page"""
    html: str
    paragraphs_seen: int = 0
    converted: Dict[str, int] = field(default_factory=dict)  # block kind -> count

    @property
    def total_converted(self) -> int:
        return sum(self.converted.values())


class PageTransformer:
    """Rewrites marked paragraphs of an HTML document"""

    def __init__(self, config: Optional[PageConfig] = None):
        self.config = config or PageConfig()

    def transform(self, html_content: str) -> PageResult:
        soup = BeautifulSoup(html_content, 'html.parser')
        result = PageResult(html='')
        seen = set()

        for container in soup.select(self.config.container_selector):
            for paragraph in container.find_all(self.config.paragraph_tag):
                # Nested containers would otherwise visit a paragraph twice
                if id(paragraph) in seen:
                    continue
                seen.add(id(paragraph))
                result.paragraphs_seen += 1

                kind = self.transform_paragraph(paragraph)
                if kind:
                    result.converted[kind] = result.converted.get(kind, 0) + 1

        _LOG.debug(
            "Converted %d of %d paragraphs",
            result.total_converted, result.paragraphs_seen,
        )
        # Re-serializing rewrites entities and void tags, so only do it on change
        result.html = str(soup) if result.total_converted else html_content
        return result

    def transform_paragraph(self, paragraph) -> Optional[str]:
        """
        Convert a single paragraph element in place.

        Returns the block kind, or None if the paragraph was left untouched.
        """
        text = paragraph.get_text()
        profile = BlockClassifier.profile_for(text)
        if profile is None:
            return None

        body = text[len(profile.marker):]
        if self.config.escape_text:
            body = html.escape(body, quote=False)
        markup = render_block(body, profile)

        fragment = BeautifulSoup(markup, 'html.parser')
        paragraph.clear()
        for child in list(fragment.contents):
            paragraph.append(child.extract())
        return profile.kind


def transform_document(html_content: str, config: Optional[PageConfig] = None) -> str:
    """Convert every marked paragraph of a page and return the new HTML"""
    return PageTransformer(config).transform(html_content).html
