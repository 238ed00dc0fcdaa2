"""Tests for AnalyserManager."""

import pytest

from analyser_manager import (
    AnalyserFetchError,
    AnalyserManager,
    AnalyserSpec,
    ConfigParseError,
    ConfigReadError,
    InstallDirectory,
    InstallEvent,
    InvalidAnalyserSpecError,
    RegistryUnavailableError,
    RootCreateError,
    UnknownPluginError,
    UnsupportedRegistryError,
    make_analyser_manager,
)
from analyser_manager.manager._in_memory import (
    InMemoryPackageRegistry,
    InMemoryPluginRegistry,
)
from analyser_manager.models import PluginConfig
from conftest import CONFIG, RecordingHookRunner, analyser_tarball

CENTRAL_CONFIG = PluginConfig.model_validate({"shortName": "david-dm", "version": "1.0.5"})


def _make_manager(tmp_path, events=None, hook_runner=None):
    plugins = InMemoryPluginRegistry()
    plugins.add("sidekick-david", CENTRAL_CONFIG)
    plugins.add("sidekick-jshint", PluginConfig.model_validate({"shortName": "jshint"}))
    plugins.add("sidekick-pypi", registry="pypi")
    npm = InMemoryPackageRegistry()
    old = analyser_tarball({**CONFIG, "version": "1.0.4"})
    npm.publish("sidekick-david", "1.0.4", old, latest=False)
    npm.publish("sidekick-david", "1.0.5", analyser_tarball())
    manager = AnalyserManager(
        install_dir=InstallDirectory(tmp_path / "analysers"),
        plugin_registry=plugins,
        package_registries={"npm": npm},
        hook_runner=hook_runner or RecordingHookRunner(),
        on_event=events.append if events is not None else None,
    )
    manager.init()
    return manager, plugins, npm


# --- init / registry cache ---


def test_init_creates_root_and_warms_cache(tmp_path):
    manager, plugins, _ = _make_manager(tmp_path)
    assert (tmp_path / "analysers").is_dir()
    assert plugins.fetch_count == 1
    manager.fetch_canonical_config("sidekick-david")
    manager.fetch_plugin_list()
    assert plugins.fetch_count == 1


def test_fetch_plugin_list_force_refreshes(tmp_path):
    manager, plugins, _ = _make_manager(tmp_path)
    plugins.add("sidekick-new")
    assert "sidekick-new" not in manager.fetch_plugin_list()
    assert "sidekick-new" in manager.fetch_plugin_list(force=True)
    assert plugins.fetch_count == 2


def test_init_fails_when_root_cannot_be_created(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    manager = AnalyserManager(
        install_dir=InstallDirectory(blocker / "analysers"),
        plugin_registry=InMemoryPluginRegistry(),
        package_registries={},
    )
    with pytest.raises(RootCreateError):
        manager.init()


def test_init_fails_when_registry_unavailable(tmp_path):
    class DownRegistry:
        def fetch_plugin_list(self):
            raise RegistryUnavailableError("HTTP 503", url="https://example.com")

    manager = AnalyserManager(
        install_dir=InstallDirectory(tmp_path),
        plugin_registry=DownRegistry(),
        package_registries={},
    )
    with pytest.raises(RegistryUnavailableError):
        manager.init()


def test_fetch_canonical_config(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    entry = manager.fetch_canonical_config("sidekick-david")
    assert entry.registry == "npm"
    assert entry.config == CENTRAL_CONFIG


def test_fetch_canonical_config_unknown(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    with pytest.raises(UnknownPluginError, match="rubbish-subbish-analyser"):
        manager.fetch_canonical_config("rubbish-subbish-analyser")


# --- fetch_analyser ---


def test_fetch_analyser_reads_installed_config_without_network(tmp_path):
    manager, _, npm = _make_manager(tmp_path)
    path = manager.install_dir.create("test-analyser", "1.0.0")
    manager.install_dir.write_config(path, PluginConfig.model_validate({"shortName": "test"}))
    result = manager.fetch_analyser("test-analyser", "1.0.0")
    assert result.path == path
    assert result.config == manager.install_dir.read_config(path)
    assert result.config.short_name == "test"
    assert npm.downloads == []


def test_fetch_analyser_never_installs(tmp_path):
    manager, _, npm = _make_manager(tmp_path)
    with pytest.raises(AnalyserFetchError, match="sidekick-david@1.0.5"):
        manager.fetch_analyser("sidekick-david", "1.0.5")
    assert npm.downloads == []
    assert not manager.install_dir.exists("sidekick-david", "1.0.5")


def test_fetch_analyser_missing_config(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    manager.install_dir.create("test-analyser", "1.0.0")
    with pytest.raises(ConfigReadError):
        manager.fetch_analyser("test-analyser", "1.0.0")


def test_fetch_analyser_invalid_config(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    path = manager.install_dir.create("test-analyser", "1.0.0")
    (path / "config.json").write_text("{ this is not json")
    with pytest.raises(ConfigParseError):
        manager.fetch_analyser("test-analyser", "1.0.0")


# --- install_analyser ---


def test_install_latest(tmp_path):
    manager, _, npm = _make_manager(tmp_path)
    result = manager.install_analyser({"name": "sidekick-david"})
    assert result.path == tmp_path / "analysers" / "sidekick-david@1.0.5"
    assert result.config == CENTRAL_CONFIG
    assert len(npm.downloads) == 1


def test_install_twice_downloads_once(tmp_path):
    manager, _, npm = _make_manager(tmp_path)
    first = manager.install_analyser("sidekick-david")
    second = manager.install_analyser("sidekick-david")
    assert len(npm.downloads) == 1
    assert second.path == first.path
    assert second.config.short_name == "david-dm"


def test_install_specific_version(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    result = manager.install_analyser(AnalyserSpec(name="sidekick-david", version="1.0.4"))
    assert result.path.name == "sidekick-david@1.0.4"
    assert manager.fetch_analyser("sidekick-david", "1.0.4").config.version == "1.0.4"


def test_install_explicit_latest_token(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    result = manager.install_analyser({"name": "sidekick-david", "version": "latest"})
    assert result.path.name == "sidekick-david@1.0.5"


def test_install_force_recreates_directory(tmp_path):
    manager, _, npm = _make_manager(tmp_path)
    result = manager.install_analyser("sidekick-david")
    marker = result.path / "marker.txt"
    marker.write_text("stale")
    again = manager.install_analyser("sidekick-david", force=True)
    assert again.path == result.path
    assert not marker.exists()
    assert (again.path / "config.json").exists()
    assert len(npm.downloads) == 2


def test_install_unknown_analyser(tmp_path):
    manager, _, npm = _make_manager(tmp_path)
    with pytest.raises(UnknownPluginError) as exc:
        manager.install_analyser({"name": "rubbish-subbish-analyser"})
    assert str(exc.value) == "Unknown analyser: rubbish-subbish-analyser"
    assert npm.downloads == []


def test_install_unsupported_registry(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    with pytest.raises(UnsupportedRegistryError, match="pypi"):
        manager.install_analyser("sidekick-pypi")


def test_install_emits_tagged_events(tmp_path):
    events = []
    manager, _, _ = _make_manager(tmp_path, events=events)
    manager.install_analyser("sidekick-david")
    assert events == [
        InstallEvent(stage=stage, plugin="sidekick-david", version="1.0.5", analyser="sidekick-david")
        for stage in ("downloading", "downloaded", "installing", "installed")
    ]


def test_already_installed_emits_no_events(tmp_path):
    events = []
    manager, _, _ = _make_manager(tmp_path, events=events)
    manager.install_analyser("sidekick-david")
    events.clear()
    manager.install_analyser("sidekick-david")
    assert events == []


def test_failing_event_callback_does_not_break_install(tmp_path, caplog):
    def explode(event):
        raise RuntimeError("listener bug")

    manager, _, _ = _make_manager(tmp_path)
    manager._on_event = explode
    with caplog.at_level("WARNING", logger="analyser_manager.manager._manager"):
        result = manager.install_analyser("sidekick-david")
    assert result.path.is_dir()
    assert "callback failed for sidekick-david" in caplog.text


# --- versions ---


def test_is_newer_version_available(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    result = manager.is_newer_version_available("sidekick-david", "0.0.1")
    assert result.newer is True
    assert result.latest == "1.0.5"


def test_is_newer_version_available_garbage_current(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    result = manager.is_newer_version_available("sidekick-david", "garbage")
    assert result.latest == "1.0.5"
    assert result.newer is None


def test_is_newer_version_available_unknown(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    with pytest.raises(UnknownPluginError):
        manager.is_newer_version_available("rubbish-subbish-analyser", "1.0.0")


def test_installed_version_pass_throughs(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    manager.install_analyser({"name": "sidekick-david", "version": "1.0.4"})
    manager.install_analyser("sidekick-david")
    assert manager.get_latest_version_of_installed_analyser("sidekick-david") == "1.0.5"
    assert manager.get_latest_version_of_installed_analyser("sidekick-jshint") is None
    assert manager.get_all_installed_analysers() == ["sidekick-david@1.0.4", "sidekick-david@1.0.5"]


# --- analyser lists ---


def test_validate_analyser_list_drops_unknown(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    result = manager.validate_analyser_list(
        [{"name": "unknown-xyz"}, {"name": "sidekick-david", "failCiOnError": True}]
    )
    assert [a.name for a in result] == ["sidekick-david"]
    assert result[0].fail_ci_on_error is True


def test_validate_analyser_list_drops_malformed_references(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    result = manager.validate_analyser_list(
        [{"failCiOnError": True}, 42, "sidekick-jshint", {"name": "sidekick-david"}]
    )
    assert [a.name for a in result] == ["sidekick-jshint", "sidekick-david"]


def test_install_reference_without_name(tmp_path):
    manager, _, npm = _make_manager(tmp_path)
    with pytest.raises(InvalidAnalyserSpecError) as exc:
        manager.install_analyser({"version": "1.0.5"})
    assert exc.value.spec == {"version": "1.0.5"}
    assert npm.downloads == []


def test_get_all_analysers_for_config_then_validate(tmp_path):
    manager, _, _ = _make_manager(tmp_path)
    declared = manager.get_all_analysers_for_config(
        {"languages": {"js": {"quality": ["sidekick-jshint", "sidekick-gone"]}}}
    )
    assert [a.name for a in manager.validate_analyser_list(declared)] == ["sidekick-jshint"]


# --- factory ---


def test_make_analyser_manager_uses_given_dir(tmp_path):
    manager = make_analyser_manager(install_dir=tmp_path / "analysers")
    assert manager.install_dir.root == tmp_path / "analysers"


def test_make_analyser_manager_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("ANALYSER_INSTALL_DIR", str(tmp_path / "from-env"))
    manager = make_analyser_manager()
    assert manager.install_dir.root == tmp_path / "from-env"


@pytest.mark.integration
def test_install_real_analyser(tmp_path):
    manager = make_analyser_manager(install_dir=tmp_path)
    manager.init()
    result = manager.install_analyser("sidekick-david")
    assert result.config.short_name == "david-dm"
    check = manager.is_newer_version_available("sidekick-david", "0.0.1")
    assert check.newer is True
