from bgshell.settings import Settings, font_size_choices


def test_missing_file_gives_defaults(tmp_path):
    settings = Settings.load(tmp_path / "absent.ini")
    assert settings.font_size == 22
    assert settings.http_proxy_on is False


def test_round_trip(tmp_path):
    path = tmp_path / "settings.ini"
    original = Settings(font_size=34, http_proxy_on=True)
    original.save(path)
    assert Settings.load(path) == original


def test_zero_font_size_falls_back_to_default(tmp_path):
    path = tmp_path / "settings.ini"
    Settings(font_size=0).save(path)
    assert Settings.load(path).font_size == 22


def test_unparsable_values_fall_back(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text("[General]\nFontSize=large\nHttpProxyOn=yes\n", encoding="utf-8")
    loaded = Settings.load(path)
    assert loaded == Settings()


def test_proxy_flag_nonzero_is_on(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text("[General]\nHttpProxyOn=7\n", encoding="utf-8")
    assert Settings.load(path).http_proxy_on is True


def test_font_size_choices_shape():
    choices = font_size_choices()
    assert choices[0] == 18
    assert all(size < 52 for size in choices)
    assert all(b - a == 4 for a, b in zip(choices, choices[1:]))
    assert 22 in choices