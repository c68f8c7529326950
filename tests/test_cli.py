# tests/test_cli.py

import json

import pytest

from fancal.cli import _parse_date, main


def test_parse_date():
    assert _parse_date("2024-3-15") == (2024, 3, 15, 0, 0, 0)
    assert _parse_date("1492-01-31T06:05") == (1492, 1, 31, 6, 5, 0)
    assert _parse_date("-40-2-1T01:02:03") == (-40, 2, 1, 1, 2, 3)


def test_list(capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out.split() == ["aldenmark", "gregorian", "greyhawk", "harptos", "khorvaire"]


def test_format(capsys):
    assert main(["format", "2024-03-15", "--template", "long"]) == 0
    assert capsys.readouterr().out.strip() == "15 March, 2024"


def test_day_summary(capsys):
    assert main(["day", "1492-1-31", "--calendar", "harptos"]) == 0
    out = capsys.readouterr().out
    assert "festival      : Midwinter" in out
    assert "Dale Reckoning" in out


def test_day_json(capsys):
    assert main(["day", "2024-03-15", "--json", "--attr", "darkness"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["weekday"] == "Friday"
    assert out["attributes"] == {"darkness": 1.0}


def test_unknown_calendar_exits_2(capsys):
    assert main(["info", "--calendar", "nope"]) == 2
    assert "Unknown calendar" in capsys.readouterr().err


def test_info(capsys):
    assert main(["info", "--calendar", "harptos"]) == 0
    assert json.loads(capsys.readouterr().out)["moons"] == ["Selune"]


def test_validate(tmp_path, tiny_dict, capsys):
    good = tmp_path / "good.json"
    good.write_text(json.dumps(tiny_dict), encoding="utf-8")
    assert main(["validate", str(good)]) == 0
    assert capsys.readouterr().out.strip() == "ok"

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({**tiny_dict, "cycles": [{"name": "Empty"}]}), encoding="utf-8")
    assert main(["validate", str(bad)]) == 1
    assert "- cycle 'Empty': no entries" in capsys.readouterr().out


def test_calendar_file(tmp_path, tiny_dict, capsys):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps(tiny_dict), encoding="utf-8")
    assert main(["format", "100-2-3", "--file", str(path), "-t", "D MMMM YYYY"]) == 0
    assert capsys.readouterr().out.strip() == "3 Frost 0100"


def test_leap(capsys):
    assert main(["leap", "--start-year", "1896", "--end-year", "1904"]) == 0
    assert "2 leap years of 9" in capsys.readouterr().out


def test_pretty_month(capsys):
    assert main(["pretty-month", "1492", "1", "--calendar", "harptos"]) == 0
    out = capsys.readouterr().out
    assert "Hammer 1492" in out
    assert "31: Midwinter (outside the week)" in out


def test_moon(capsys):
    assert main(["moon", "2025"]) == 0
    assert "Luna" in capsys.readouterr().out


def test_daylight(capsys):
    pytest.importorskip("numpy")
    assert main(["daylight", "2023", "--step", "30"]) == 0
    assert "shortest 8.00 h" in capsys.readouterr().out
