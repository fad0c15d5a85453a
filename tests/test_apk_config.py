"""Tests for APK configuration helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from projprops import ProjectProperties, PropertyFormatError, PropertyType
from projprops.apk_config import CONFIG_PREFIX, get_configs, set_configs


def make(project: Path) -> ProjectProperties:
    return ProjectProperties.create(project, PropertyType.DEFAULT)


def test_prefix():
    assert CONFIG_PREFIX == "apk-config-"


class TestGetConfigs:
    """Test get_configs."""

    def test_no_configurations(self, project: Path):
        assert get_configs(make(project)) == {}

    def test_reads_listed_configurations(self, project: Path):
        props = make(project)
        props.set_property("apk-configurations", "european, northamerica")
        props.set_property("apk-config-european", "en,fr,it,de,es")
        props.set_property("apk-config-northamerica", "en,es")
        configs = get_configs(props)
        assert configs == {"european": "en,fr,it,de,es", "northamerica": "en,es"}
        assert list(configs) == ["european", "northamerica"]

    def test_skips_names_without_value(self, project: Path):
        props = make(project)
        props.set_property("apk-configurations", "european,,asia")
        props.set_property("apk-config-european", "en")
        assert get_configs(props) == {"european": "en"}

    def test_ignores_unlisted_config_keys(self, project: Path):
        props = make(project)
        props.set_property("apk-configurations", "european")
        props.set_property("apk-config-european", "en")
        props.set_property("apk-config-asia", "ja")
        assert get_configs(props) == {"european": "en"}


class TestSetConfigs:
    """Test set_configs."""

    def test_writes_list_and_entries(self, project: Path):
        props = make(project)
        set_configs(props, {"european": "en,fr", "northamerica": "en,es"})
        assert props.get_property("apk-configurations") == "european,northamerica"
        assert props.get_property("apk-config-european") == "en,fr"
        assert props.get_property("apk-config-northamerica") == "en,es"

    def test_replaces_previous_configurations(self, project: Path):
        props = make(project)
        set_configs(props, {"european": "en,fr", "asia": "ja"})
        set_configs(props, {"asia": "ja,ko"})
        assert props.get_property("apk-config-european") is None
        assert get_configs(props) == {"asia": "ja,ko"}

    def test_empty_removes_everything(self, project: Path):
        props = make(project)
        set_configs(props, {"european": "en"})
        set_configs(props, {})
        assert props.get_property("apk-configurations") is None
        assert props.get_property("apk-config-european") is None

    def test_saved_with_comment(self, project: Path):
        props = make(project)
        set_configs(props, {"european": "en"})
        props.save()
        text = (project / "default.properties").read_text()
        assert "# apk configurations." in text
        loaded = ProjectProperties.load(project, PropertyType.DEFAULT)
        assert get_configs(loaded) == {"european": "en"}


@pytest.mark.parametrize("name", ["euro,pe", " european", "asia ", "", "north america"])
def test_set_configs_rejects_names_that_do_not_read_back(project: Path, name: str):
    props = make(project)
    set_configs(props, {"european": "en"})
    with pytest.raises(PropertyFormatError):
        set_configs(props, {name: "en"})
    assert get_configs(props) == {"european": "en"}
