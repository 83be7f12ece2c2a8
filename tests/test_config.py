import pytest

from fmark import config
from fmark.core import programs
from fmark.errors import ConfigError
from fmark.store import Store


@pytest.fixture(autouse=True)
def programs_on_path(monkeypatch):
    found = []
    monkeypatch.setattr(config, "require_programs", lambda *names: found.extend(names))
    return found


def test_defaults(tmp_path, programs_on_path):
    settings = config.load_settings([], {"HOME": str(tmp_path)})

    assert settings.menu_program == "bemenu"
    assert settings.browser == "firefox"
    assert settings.rows == 20
    assert settings.path == tmp_path / ".bookmarks"
    assert programs_on_path == ["bemenu", "firefox"]


def test_default_file_is_created_from_template(tmp_path):
    settings = config.load_settings([], {"HOME": str(tmp_path)})

    assert settings.path.read_text(encoding="utf-8") == (
        "{T}Project's Github {C}Development {U}https://github.com/vannrr/fmark\n"
    )
    assert list(Store.load(settings.path)) == [config.TEMPLATE_RECORD]


def test_existing_default_file_is_left_alone(tmp_path):
    path = tmp_path / ".bookmarks"
    path.write_text("", encoding="utf-8")
    config.load_settings([], {"HOME": str(tmp_path)})
    assert path.read_text(encoding="utf-8") == ""


def test_environment_defaults_are_overridden_by_flags(tmp_path):
    bookmarks = tmp_path / "marks.txt"
    bookmarks.write_text("", encoding="utf-8")
    environ = {
        "HOME": str(tmp_path),
        config.ENV_VARIABLE: f"--menu dmenu --rows 5 -b qutebrowser -p '{bookmarks}'",
    }

    settings = config.load_settings(["-r", "7", "--menu", "rofi"], environ)

    assert settings.menu_program == "rofi"
    assert settings.rows == 7
    assert settings.browser == "qutebrowser"
    assert settings.path == bookmarks


def test_unbalanced_quotes_in_environment(tmp_path):
    with pytest.raises(ConfigError):
        config.load_settings([], {"HOME": str(tmp_path), config.ENV_VARIABLE: "--menu 'dmenu"})


def test_unsupported_menu(tmp_path):
    with pytest.raises(ConfigError) as info:
        config.load_settings(["-m", "wofi"], {"HOME": str(tmp_path)})
    assert "wofi" in str(info.value)


def test_explicit_path_must_exist(tmp_path):
    with pytest.raises(ConfigError) as info:
        config.load_settings(["-p", str(tmp_path / "nope")], {"HOME": str(tmp_path)})
    assert "File not found" in str(info.value)


def test_missing_home():
    with pytest.raises(ConfigError):
        config.load_settings([], {})


@pytest.mark.parametrize(
    "value, rows",
    [("10", 10), ("0", 1), ("-4", 1), ("999", 255), ("abc", 20), (None, 20)],
)
def test_parse_rows(value, rows):
    assert config.parse_rows(value) == rows


def test_require_program_found(monkeypatch):
    monkeypatch.setattr(programs.shutil, "which", lambda name: f"/usr/bin/{name}")
    assert programs.require_program("dmenu") == "dmenu"


def test_require_program_missing(monkeypatch):
    monkeypatch.setattr(programs.shutil, "which", lambda name: None)
    with pytest.raises(ConfigError) as info:
        programs.require_programs("bemenu", "firefox")
    assert "bemenu" in str(info.value)
