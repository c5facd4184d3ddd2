import json
from pathlib import Path

import pytest

from create_chatterino_plugin import cli, config
from create_chatterino_plugin.cancel import CancelToken
from create_chatterino_plugin.config import Settings
from create_chatterino_plugin.errors import AbortedByUser, UnsupportedPlatformError
from create_chatterino_plugin.models import Permission


class _FakePrompter:
    def __init__(self, names=(), permissions=None, overwrite=False):
        self.token = CancelToken()
        self.names = list(names)
        self.permissions = permissions
        self.overwrite = overwrite
        self.asked: list[str] = []

    def ask_plugin_name(self) -> str:
        self.asked.append("name")
        value = self.names.pop(0)
        if isinstance(value, BaseException):
            self.token.cancel()
            raise value
        return value

    def ask_permissions(self):
        self.asked.append("permissions")
        return self.permissions or []

    def confirm_overwrite(self, name: str) -> bool:
        self.asked.append("overwrite")
        return self.overwrite


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(base_dir=tmp_path)


def _plugin_dir(settings: Settings, name: str) -> Path:
    return settings.base_dir / "Plugins" / name


def test_args_only_needs_no_prompts(settings, capsys):
    prompter = _FakePrompter()

    code = cli.main(["mybot", "-p", "HTTP"], prompter=prompter, settings=settings)

    assert code == 0
    assert prompter.asked == []
    manifest = json.loads((_plugin_dir(settings, "mybot") / "info.json").read_text("utf-8"))
    assert manifest["permissions"] == [{"type": "HTTP"}]
    assert 'Plugin "mybot" created successfully!' in capsys.readouterr().out


def test_missing_args_are_prompted(settings):
    prompter = _FakePrompter(names=["asked"], permissions=[Permission.FILESYSTEM_READ])

    assert cli.main([], prompter=prompter, settings=settings) == 0
    assert prompter.asked == ["name", "permissions"]
    script = (_plugin_dir(settings, "asked") / "init.lua").read_text("utf-8")
    assert "/test-fs" in script


def test_empty_permissions_flag_falls_back_to_prompt(settings):
    prompter = _FakePrompter(permissions=[Permission.HTTP])

    assert cli.main(["mybot", "--permissions", ""], prompter=prompter, settings=settings) == 0
    assert prompter.asked == ["permissions"]


def test_unknown_permission_is_an_error(settings, capsys):
    code = cli.main(["mybot", "-p", "HTTP,Telepathy"], prompter=_FakePrompter(), settings=settings)

    assert code == 1
    out = capsys.readouterr().out
    assert "Failed to create plugin: Unknown permission(s): Telepathy" in out
    assert not _plugin_dir(settings, "mybot").exists()


def test_declined_overwrite_is_not_an_error(settings, capsys):
    plugin_dir = _plugin_dir(settings, "mybot")
    plugin_dir.mkdir(parents=True)
    prompter = _FakePrompter(overwrite=False)

    code = cli.main(["mybot", "-p", "HTTP"], prompter=prompter, settings=settings)

    assert code == 0
    assert prompter.asked == ["overwrite"]
    assert list(plugin_dir.iterdir()) == []
    out = capsys.readouterr().out
    assert "Plugin creation aborted." in out
    assert "Failed" not in out


def test_accepted_overwrite_replaces_files(settings):
    plugin_dir = _plugin_dir(settings, "mybot")
    plugin_dir.mkdir(parents=True)
    (plugin_dir / "init.lua").write_text("-- old\n", encoding="utf-8")

    code = cli.main(
        ["mybot", "-p", "FilesystemRead"],
        prompter=_FakePrompter(overwrite=True),
        settings=settings,
    )

    assert code == 0
    assert "/test-fs" in (plugin_dir / "init.lua").read_text("utf-8")


def test_interrupt_at_prompt_exits_1(settings, capsys):
    prompter = _FakePrompter(names=[AbortedByUser()])

    code = cli.main([], prompter=prompter, settings=settings)

    assert code == 1
    out = capsys.readouterr().out
    assert "Aborted by user. Exiting..." in out
    assert "Failed" not in out
    assert not (settings.base_dir / "Plugins").exists()


def test_keyboard_interrupt_outside_prompt_exits_1(settings, monkeypatch, capsys):
    def _boom(self, request):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli.PluginScaffolder, "scaffold", _boom)

    code = cli.main(["mybot", "-p", "HTTP"], prompter=_FakePrompter(), settings=settings)

    assert code == 1
    assert "Ctrl + C was pressed. Exiting..." in capsys.readouterr().out


def test_unsupported_platform_is_reported(tmp_path, monkeypatch, capsys):
    def _unsupported():
        raise UnsupportedPlatformError("plan9")

    monkeypatch.setattr(cli, "resolve_base_directory", _unsupported)

    code = cli.main(["mybot", "-p", "HTTP"], prompter=_FakePrompter(), settings=Settings())

    assert code == 1
    assert "Failed to create plugin: Unsupported platform: plan9" in capsys.readouterr().out


def test_filesystem_error_is_reported(tmp_path, capsys):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    code = cli.main(
        ["mybot", "-p", "HTTP"], prompter=_FakePrompter(), settings=Settings(base_dir=blocker)
    )

    assert code == 1
    assert "Failed to create plugin:" in capsys.readouterr().out


def test_invalid_positional_name_is_reported(settings, capsys):
    code = cli.main(["../escape", "-p", "HTTP"], prompter=_FakePrompter(), settings=settings)

    assert code == 1
    assert "Invalid plugin name" in capsys.readouterr().out
    assert not (settings.base_dir / "escape").exists()


def test_settings_feed_manifest(tmp_path):
    settings = Settings(base_dir=tmp_path, author="Ada", homepage="https://example.org")

    assert cli.main(["mybot", "-p", "HTTP"], prompter=_FakePrompter(), settings=settings) == 0
    manifest = json.loads((tmp_path / "Plugins" / "mybot" / "info.json").read_text("utf-8"))
    assert manifest["authors"] == ["Ada"]
    assert manifest["homepage"] == "https://example.org"


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert "create-chatterino-plugin" in capsys.readouterr().out


def test_bad_log_level_is_reported(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("C2_PLUGIN_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("C2_PLUGIN_LOG_LEVEL", "loud")
    config._load_settings.cache_clear()

    try:
        code = cli.main(["mybot", "-p", "HTTP"], prompter=_FakePrompter())
    finally:
        config._load_settings.cache_clear()

    assert code == 1
    out = capsys.readouterr().out
    assert "Failed to create plugin:" in out
    assert "log_level" in out
    assert not (tmp_path / "Plugins").exists()


def test_blank_positional_name_is_prompted(settings):
    prompter = _FakePrompter(names=["real"])

    assert cli.main(["   ", "-p", "HTTP"], prompter=prompter, settings=settings) == 0
    assert prompter.asked == ["name"]
    assert sorted(p.name for p in (settings.base_dir / "Plugins").iterdir()) == ["real"]


def test_positional_name_is_stripped(settings):
    assert cli.main([" mybot ", "-p", "HTTP"], prompter=_FakePrompter(), settings=settings) == 0
    assert _plugin_dir(settings, "mybot").is_dir()


def test_newline_in_positional_name_is_rejected(settings, capsys):
    code = cli.main(["my\nbot", "-p", "HTTP"], prompter=_FakePrompter(), settings=settings)

    assert code == 1
    assert "Invalid plugin name" in capsys.readouterr().out
    assert not (settings.base_dir / "Plugins").exists()
