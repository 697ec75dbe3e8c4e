"""
Page configuration for the HTML transformer.

Stored as a small YAML file, e.g.:

    container_selector: .md-content__inner.md-typeset
    paragraph_tag: p
    escape_text: true
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union
import soupsieve
import yaml

from .errors import ConfigError


DEFAULT_CONTAINER_SELECTOR = '.md-content__inner.md-typeset'


@dataclass
class PageConfig:
    """Where to look for blocks in a rendered page and how to treat their text."""
    container_selector: str = DEFAULT_CONTAINER_SELECTOR  # CSS selector for content roots
    paragraph_tag: str = 'p'  # Element holding one block
    escape_text: bool = True  # HTML-escape paragraph text before conversion

    def to_yaml(self) -> str:
        data = {
            'container_selector': self.container_selector,
            'paragraph_tag': self.paragraph_tag,
            'escape_text': self.escape_text,
        }
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_content: str, source: Optional[str] = None) -> 'PageConfig':
        """Parse from YAML content. An empty document yields the defaults."""
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", source) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Top level must be a mapping", source)

        known = {f.name for f in fields(cls)}
        unknown = [key for key in data if key not in known]
        if unknown:
            names = ', '.join(sorted(map(str, unknown)))
            raise ConfigError(f"Unknown keys: {names}", source)

        for key in ('container_selector', 'paragraph_tag'):
            if key in data and (not isinstance(data[key], str) or not data[key].strip()):
                raise ConfigError(f"'{key}' must be a non-empty string", source)
        if 'escape_text' in data and not isinstance(data['escape_text'], bool):
            raise ConfigError("'escape_text' must be true or false", source)

        if 'container_selector' in data:
            try:
                soupsieve.compile(data['container_selector'])
            except soupsieve.SelectorSyntaxError as e:
                raise ConfigError(f"Invalid container_selector: {e}", source) from e

        return cls(**data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'PageConfig':
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read config: {e}", str(path)) from e
        return cls.from_yaml(content, source=str(path))
