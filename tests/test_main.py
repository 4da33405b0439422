"""Tests for the pinlayout command-line inspector."""

import pytest

from pinlayout.main import main, parse_range, parse_size
from pinlayout.render import Size


def test_parse_size():
    assert parse_size("200x150") == Size(200, 150)
    assert parse_size("10.5X20") == Size(10.5, 20)


def test_parse_range_is_inclusive():
    assert list(parse_range("100:300:100")) == [100, 200, 300]


def test_bundled_definition(capsys):
    assert main(["logo"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Pinned(")
    assert "parent 200x200: child at (20, 20) size 60x60" in out


def test_multiple_sizes(capsys):
    main(["dialog", "--size", "200x100", "--size", "400x300"])
    out = capsys.readouterr().out
    assert "parent 200x100: child at (60, 25) size 80x50" in out
    assert "parent 400x300: child at (160, 125) size 80x50" in out


def test_definition_path(tmp_path, capsys):
    path = tmp_path / "edge.yaml"
    path.write_text("pin: {left: 20, right: 30}\n")
    main([str(path), "-s", "200x200"])
    assert "child at (20, 0) size 150x200" in capsys.readouterr().out


def test_sweep(capsys):
    main(["badge", "--sweep-width", "50:150:50", "--sweep-height", "100:100:1"])
    out = capsys.readouterr().out
    assert "Width sweep:" in out
    assert "Height sweep:" in out
    # Fixed 60 wide at 20 from the left, shifted back inside a 50 wide parent
    assert "50.00     -10.00      50.00      60.00" in out


def test_bad_size_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["logo", "--size", "wide"])
    assert excinfo.value.code == 2
    assert "expected WxH" in capsys.readouterr().err
