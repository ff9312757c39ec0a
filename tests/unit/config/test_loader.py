"""Tests for ConfigLoader precedence and error handling."""

from pathlib import Path

import pytest

from headinglinks.config.defaults import DEFAULT_LINK_LIST_CONFIG
from headinglinks.config.loader import ConfigLoader, load_config
from headinglinks.lib.errors import ConfigError, FileNotFoundError


@pytest.mark.unit
class TestParseYaml:
    """Tests for ConfigLoader.parse_yaml()."""

    def test_parse_yaml_mapping(self, write_file) -> None:
        """Test that a YAML mapping is returned as a dict."""
        path = write_file("headinglinks.yml", "list_title: Contents\n")
        assert ConfigLoader(env_vars={}).parse_yaml(str(path)) == {
            "list_title": "Contents"
        }

    def test_parse_yaml_empty_file(self, write_file) -> None:
        """Test that an empty file parses to an empty dict."""
        path = write_file("headinglinks.yml", "")
        assert ConfigLoader(env_vars={}).parse_yaml(str(path)) == {}

    def test_parse_yaml_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError) as exc_info:
            ConfigLoader(env_vars={}).parse_yaml(str(tmp_path / "nope.yml"))
        assert "nope.yml" in str(exc_info.value)

    def test_parse_yaml_invalid_yaml(self, write_file) -> None:
        """Test that malformed YAML raises ConfigError."""
        path = write_file("headinglinks.yml", "list_title: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader(env_vars={}).parse_yaml(str(path))
        assert exc_info.value.field == "yaml_parse"

    def test_parse_yaml_non_mapping(self, write_file) -> None:
        """Test that a top-level list is rejected."""
        path = write_file("headinglinks.yml", "- a\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader(env_vars={}).parse_yaml(str(path))
        assert exc_info.value.field == "yaml_structure"

    def test_parse_yaml_substitutes_injected_env_vars(self, write_file) -> None:
        """Test ${VAR} substitution reads the loader's environment mapping."""
        path = write_file(
            "headinglinks.yml",
            "list_title: ${TOC_TITLE}\nsubfield_name: ${TOC_FIELD:-label}\n",
        )
        loader = ConfigLoader(env_vars={"TOC_TITLE": "On this page"})
        assert loader.parse_yaml(str(path)) == {
            "list_title": "On this page",
            "subfield_name": "label",
        }

    def test_parse_yaml_ignores_process_env_when_mapping_given(
        self,
        write_file,
        isolated_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that an injected mapping replaces os.environ entirely."""
        monkeypatch.setenv("TOC_TITLE", "From process")
        path = write_file("headinglinks.yml", "list_title: ${TOC_TITLE}\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader(env_vars={}).parse_yaml(str(path))
        assert exc_info.value.field == "TOC_TITLE"

    def test_parse_yaml_defaults_to_process_env(
        self,
        write_file,
        isolated_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test ${VAR} substitution falls back to os.environ."""
        monkeypatch.setenv("TOC_TITLE", "From process")
        path = write_file("headinglinks.yml", "list_title: ${TOC_TITLE}\n")
        assert ConfigLoader().parse_yaml(str(path)) == {"list_title": "From process"}


class TestLoadConfig:
    """Tests for ConfigLoader.load_config()."""

    def test_defaults_without_any_source(self, tmp_path: Path) -> None:
        """Test that built-in defaults apply when nothing is configured."""
        config = ConfigLoader(env_vars={}).load_config(project_dir=str(tmp_path))
        assert config.list_title == "Table of Contents"
        assert config.heading_levels == [1, 2, 3, 4, 5, 6]

    def test_project_config_discovery(self, tmp_path: Path, write_file) -> None:
        """Test that headinglinks.yml in the project dir is used."""
        write_file("headinglinks.yml", "heading_levels: 2-6\nlist_title: Contents\n")
        config = ConfigLoader(env_vars={}).load_config(project_dir=str(tmp_path))
        assert config.heading_levels == [2, 3, 4, 5, 6]
        assert config.list_title == "Contents"

    def test_yml_preferred_over_yaml(self, tmp_path: Path, write_file) -> None:
        """Test that .yml wins when both extensions exist."""
        write_file("headinglinks.yml", "list_title: from-yml\n")
        write_file("headinglinks.yaml", "list_title: from-yaml\n")
        config = ConfigLoader(env_vars={}).load_config(project_dir=str(tmp_path))
        assert config.list_title == "from-yml"

    def test_env_overrides_file(self, tmp_path: Path, write_file) -> None:
        """Test that HEADINGLINKS_* variables override file values."""
        path = write_file("custom.yml", "list_title: File\nsubfield_name: text\n")
        loader = ConfigLoader(
            env_vars={
                "HEADINGLINKS_LIST_TITLE": "Env",
                "HEADINGLINKS_HEADING_LEVELS": "2,3",
            }
        )
        config = loader.load_config(config_path=str(path))
        assert config.list_title == "Env"
        assert config.subfield_name == "text"
        assert config.heading_levels == [2, 3]

    def test_explicit_overrides_win(self, tmp_path: Path) -> None:
        """Test that explicit overrides beat env vars and skip None values."""
        loader = ConfigLoader(env_vars={"HEADINGLINKS_LIST_TITLE": "Env"})
        config = loader.load_config(
            project_dir=str(tmp_path),
            overrides={"list_title": "", "heading_levels": None},
        )
        assert config.list_title == ""
        assert config.heading_levels == [1, 2, 3, 4, 5, 6]

    def test_invalid_config_raises_config_error(
        self, tmp_path: Path, write_file
    ) -> None:
        """Test that schema violations become a readable ConfigError."""
        write_file("headinglinks.yml", "heading_levels: [0, 9]\nbogus: 1\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader(env_vars={}).load_config(project_dir=str(tmp_path))
        message = str(exc_info.value)
        assert exc_info.value.field == "config_validation"
        assert "heading_levels" in message
        assert "bogus" in message

    def test_project_config_is_cached(self, tmp_path: Path, write_file) -> None:
        """Test that project configs are read once per directory."""
        path = write_file("headinglinks.yml", "list_title: First\n")
        loader = ConfigLoader(env_vars={})
        assert loader.load_config(project_dir=str(tmp_path)).list_title == "First"
        path.write_text("list_title: Second\n", encoding="utf-8")
        assert loader.load_config(project_dir=str(tmp_path)).list_title == "First"

    def test_load_config_helper_uses_environment(
        self,
        tmp_path: Path,
        isolated_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test the one-call helper reads os.environ and the working directory."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HEADINGLINKS_DIRECTIVE_TAG", "toc")
        assert load_config().directive_tag == "toc"

    def test_injected_env_resolves_config_references(self, write_file) -> None:
        """Test a loader with an explicit environment loads files that use it."""
        path = write_file("custom.yml", "list_title: ${HL_TOC_TITLE}\n")
        loader = ConfigLoader(env_vars={"HL_TOC_TITLE": "On this page"})
        config = loader.load_config(config_path=str(path))
        assert config.list_title == "On this page"

    def test_defaults_come_from_default_link_list_config(
        self, tmp_path: Path
    ) -> None:
        """Test that an unconfigured load equals the default mapping."""
        config = ConfigLoader(env_vars={}).load_config(project_dir=str(tmp_path))
        assert config.model_dump() == DEFAULT_LINK_LIST_CONFIG

    def test_default_mapping_not_mutated(self, tmp_path: Path, write_file) -> None:
        """Test that merging file values leaves the default mapping intact."""
        write_file("headinglinks.yml", "list_title: Contents\nheading_levels: 2-3\n")
        ConfigLoader(env_vars={}).load_config(project_dir=str(tmp_path))
        assert DEFAULT_LINK_LIST_CONFIG["list_title"] == "Table of Contents"
        assert DEFAULT_LINK_LIST_CONFIG["heading_levels"] == [1, 2, 3, 4, 5, 6]
