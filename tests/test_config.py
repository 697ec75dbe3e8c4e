"""Tests for config.py: PageConfig YAML loading."""

import pytest

from lyrics_markup import ConfigError, PageConfig


class TestPageConfigDefaults:

    def test_defaults(self):
        config = PageConfig()
        assert config.container_selector == '.md-content__inner.md-typeset'
        assert config.paragraph_tag == 'p'
        assert config.escape_text is True

    def test_empty_document(self):
        assert PageConfig.from_yaml('') == PageConfig()


class TestPageConfigFromYaml:

    def test_overrides(self):
        config = PageConfig.from_yaml(
            "container_selector: article.song\n"
            "paragraph_tag: div\n"
            "escape_text: false\n"
        )
        assert config.container_selector == 'article.song'
        assert config.paragraph_tag == 'div'
        assert config.escape_text is False

    def test_partial_override_keeps_defaults(self):
        config = PageConfig.from_yaml("paragraph_tag: pre\n")
        assert config.paragraph_tag == 'pre'
        assert config.container_selector == '.md-content__inner.md-typeset'

    def test_dump_and_reload(self):
        config = PageConfig(container_selector='main', escape_text=False)
        assert PageConfig.from_yaml(config.to_yaml()) == config

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match='Unknown keys: selector'):
            PageConfig.from_yaml("selector: main\n")

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match='mapping'):
            PageConfig.from_yaml("- p\n- div\n")

    def test_empty_selector(self):
        with pytest.raises(ConfigError, match='container_selector'):
            PageConfig.from_yaml("container_selector: ''\n")

    def test_escape_text_must_be_bool(self):
        with pytest.raises(ConfigError, match='escape_text'):
            PageConfig.from_yaml("escape_text: sometimes\n")

    def test_invalid_yaml(self):
        with pytest.raises(ConfigError, match='Invalid YAML'):
            PageConfig.from_yaml("container_selector: [unclosed\n")


class TestPageConfigLoad:

    def test_load_file(self, tmp_path):
        path = tmp_path / 'page.yaml'
        path.write_text("container_selector: main\n", encoding='utf-8')
        assert PageConfig.load(path).container_selector == 'main'

    def test_error_names_file(self, tmp_path):
        path = tmp_path / 'page.yaml'
        path.write_text("bogus: 1\n", encoding='utf-8')
        with pytest.raises(ConfigError) as exc_info:
            PageConfig.load(path)
        assert exc_info.value.source == str(path)
        assert str(path) in str(exc_info.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match='Cannot read config'):
            PageConfig.load(tmp_path / 'missing.yaml')


class TestPageConfigValidation:

    def test_malformed_selector(self):
        with pytest.raises(ConfigError, match='Invalid container_selector'):
            PageConfig.from_yaml("container_selector: 'div[['\n")

    def test_compound_selector_accepted(self):
        config = PageConfig.from_yaml("container_selector: 'main > article.song, div#lyrics'\n")
        assert config.container_selector == 'main > article.song, div#lyrics'

    def test_non_string_key(self):
        with pytest.raises(ConfigError, match='Unknown keys: 1'):
            PageConfig.from_yaml("1: x\n")

    def test_mixed_unknown_keys(self):
        with pytest.raises(ConfigError, match='Unknown keys: 1, bogus'):
            PageConfig.from_yaml("bogus: x\n1: y\nparagraph_tag: p\n")
