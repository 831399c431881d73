import pytest

from termtoys.ini import IniError, IniSettings


def _settings():
    return IniSettings({"BG_body": 0, "default_profile": "plain"})


def test_defaults():
    s = _settings()
    assert s["BG_body"] == 0
    assert s["default_profile"] == "plain"
    assert list(s) == ["BG_body", "default_profile"]


def test_set_line_forms():
    s = _settings()
    assert s.set_line("BG_body=12") == "BG_body"
    assert s["BG_body"] == 12
    s.set_line("BG_body 7")
    assert s["BG_body"] == 7
    s.set_line("default_profile = fancy one")
    assert s["default_profile"] == "fancy one"


def test_set_line_errors():
    s = _settings()
    with pytest.raises(IniError):
        s.set_line("BG_body=abc")
    with pytest.raises(IniError):
        s.set_line("unknown=1")
    with pytest.raises(IniError):
        s.set_line("BG_bodyX=1")
    assert s["BG_body"] == 0


def test_prefix_names_do_not_clash():
    s = IniSettings({"foo": 1, "foobar": 2})
    s.set_line("foobar=5")
    assert s.as_dict() == {"foo": 1, "foobar": 5}


def test_load_and_reset(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text(
        "# comment\n; other\n\nBG_body=3\ndefault_profile=dark\nbogus=1\n",
        encoding="utf-8",
    )
    s = _settings()
    problems = s.load(str(path))
    assert len(problems) == 1
    assert ":6:" in problems[0]
    assert s.as_dict() == {"BG_body": 3, "default_profile": "dark"}
    s.reset()
    assert s.as_dict() == {"BG_body": 0, "default_profile": "plain"}


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        _settings().load(str(tmp_path / "missing.ini"))


def test_describe():
    s = _settings()
    s.set_line("BG_body=5")
    assert s.describe() == "0: BG_body=5\n1: default_profile=plain\n"


def test_bad_default_type():
    with pytest.raises(TypeError):
        IniSettings({"x": 1.5})