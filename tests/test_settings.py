"""Tests for key sheets: MachineSettings, JSON load/save and machine building."""

import json
from random import Random

import pytest

from settings import MachineSettings, build_machine, load_config, parse_setting, save_config
from settings_generator import choose_pairs, generate_settings
from settings_generator import main as keygen_main


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(0, 0), (25, 25), ("7", 7), (" 3 ", 3), ("-1", -1), ("A", 0), ("u", 20)],
)
def test_parse_setting(raw, expected: int) -> None:
    assert parse_setting(raw) == expected


@pytest.mark.parametrize("bad", ["", "AB", "?", 1.7, None, True])
def test_parse_setting_invalid(bad) -> None:
    with pytest.raises(ValueError):
        parse_setting(bad)


def test_defaults() -> None:
    s = MachineSettings()
    assert s.rotors == ["I", "II", "III"]
    assert s.positions == [0, 0, 0]
    assert s.rings == [0, 0, 0]
    assert s.plugs == []


def test_normalises_names_letters_and_plugs() -> None:
    s = MachineSettings(rotors=[0, "ii", "3"], positions=["A", "D", "U"], rings=[1, "B", 0], plugs=["ab", ("c", "d")])
    assert s.rotors == ["I", "II", "IV"]
    assert s.positions == [0, 3, 20]
    assert s.rings == [1, 1, 0]
    assert s.plugs == ["AB", "CD"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rotors": ["I", "II"]},
        {"rotors": ["I", "I", "III"]},
        {"positions": [0, 0]},
        {"rings": [0, 0, 0, 0]},
        {"plugs": ["AB", "AC"]},
        {"rotors": ["I", "II", "IX"]},
    ],
)
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        MachineSettings(**kwargs)


def test_from_dict_missing_keys() -> None:
    with pytest.raises(ValueError, match="Missing keys in config: plugs, rings"):
        MachineSettings.from_dict({"rotors": ["I", "II", "III"], "positions": [0, 0, 0]})


def test_save_and_load_round_trip(tmp_path) -> None:
    s = MachineSettings(rotors=["V", "I", "III"], positions=[1, 2, 3], rings=[4, 5, 6], plugs=["QW"])
    path = save_config(s, tmp_path / "key.json")
    assert json.loads(path.read_text(encoding="utf-8"))["rotors"] == ["V", "I", "III"]
    assert load_config(path) == s


def test_load_config_accepts_letters_and_indices(tmp_path) -> None:
    path = tmp_path / "key.json"
    path.write_text(
        json.dumps({"rotors": [0, 1, 2], "positions": "AAA", "rings": ["A", "A", "A"], "plugs": []}),
        encoding="utf-8",
    )
    assert build_machine(load_config(path)).process("AAAAA") == "BDZGO"


def test_load_config_rejects_non_object(tmp_path) -> None:
    path = tmp_path / "key.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_config(path)


def test_build_machine_is_fresh_each_time() -> None:
    s = MachineSettings(positions=[0, 3, 20])
    first = build_machine(s)
    cipher = first.process("HELLO")
    assert first.window != "ADU"
    assert build_machine(s).process(cipher) == "HELLO"


# ============================================================================
# Key generator
# ============================================================================


def test_choose_pairs_disjoint() -> None:
    pairs = choose_pairs(10, Random(1))
    letters = "".join(pairs)
    assert len(pairs) == 10
    assert len(set(letters)) == 20


def test_choose_pairs_clamped() -> None:
    assert len(choose_pairs(40, Random(1))) == 13
    assert choose_pairs(-2, Random(1)) == []


def test_generate_settings_deterministic_with_seed() -> None:
    a = generate_settings(Random(42))
    b = generate_settings(Random(42))
    assert a == b
    assert len(set(a.rotors)) == 3
    assert all(0 <= p < 26 for p in a.positions + a.rings)


def test_keygen_main_writes_loadable_file(tmp_path, capsys) -> None:
    out = tmp_path / "daily.json"
    keygen_main(["--seed", "7", "--pairs", "6", "--outfile", str(out)])
    assert "Wrote" in capsys.readouterr().out
    settings = load_config(out)
    assert len(settings.plugs) == 6
    assert settings == generate_settings(Random(7), 6)
