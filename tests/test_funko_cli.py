"""Tests for the Funko collection command-line interface."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from filetasks import funko_cli

pytestmark = pytest.mark.catalog


ITEM_ARGS = [
    "--name", "Sonic",
    "--description", "The blue hedgehog",
    "--type", "Pop!",
    "--genre", "Videojuegos",
    "--franchise", "Sonic the Hedgehog",
    "--number", "1",
    "--exclusive", "false",
    "--features", "Bobblehead",
    "--value", "15",
]


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("FUNKO_DATA_DIR", str(tmp_path))
    return tmp_path


def _add(funko_id="1", extra=None):
    return funko_cli.main(["add", "--user", "alice", "--id", funko_id] + (extra or ITEM_ARGS))


def test_add_then_show(capsys, data_dir):
    """add stores the Funko and show prints every field."""
    assert _add() == 0
    assert "New Funko added to the collection." in capsys.readouterr().out
    assert (data_dir / "alice" / "1.json").exists()

    assert funko_cli.main(["show", "--user", "alice", "--id", "1"]) == 0
    out = capsys.readouterr().out
    assert "Name: Sonic" in out
    assert "Genre: Videojuegos" in out
    assert "Exclusive: false" in out
    assert "15.00" in out


def test_add_duplicate_fails(capsys):
    """Adding the same id twice reports an error."""
    assert _add() == 0
    capsys.readouterr()
    assert _add() == 1
    assert "already exists" in capsys.readouterr().out


def test_add_invalid_type_fails(capsys):
    """An unknown Funko type is reported without a traceback."""
    args = list(ITEM_ARGS)
    args[args.index("Pop!")] = "Plush"
    assert _add(extra=args) == 1
    assert "Invalid FunkoType" in capsys.readouterr().out


def test_add_invalid_exclusive_flag_exits():
    """A non-boolean --exclusive value is an argparse error."""
    args = list(ITEM_ARGS)
    args[args.index("false")] = "maybe"
    with pytest.raises(SystemExit) as exc_info:
        _add(extra=args)
    assert exc_info.value.code == 2


def test_update(capsys):
    """update rewrites an existing Funko and fails for unknown ids."""
    _add()
    capsys.readouterr()
    args = list(ITEM_ARGS)
    args[args.index("15")] = "150"
    assert funko_cli.main(["update", "--user", "alice", "--id", "1"] + args) == 0
    assert "Funko updated in the collection." in capsys.readouterr().out

    assert funko_cli.main(["update", "--user", "alice", "--id", "2"] + args) == 1
    assert "not found" in capsys.readouterr().out


def test_delete(capsys, data_dir):
    """delete removes the file and fails the second time."""
    _add()
    capsys.readouterr()
    assert funko_cli.main(["delete", "--user", "alice", "--id", "1"]) == 0
    assert "Funko removed from the collection." in capsys.readouterr().out
    assert not (data_dir / "alice" / "1.json").exists()

    assert funko_cli.main(["delete", "--user", "alice", "--id", "1"]) == 1
    assert "not found" in capsys.readouterr().out


def test_list(capsys):
    """list prints a header and each Funko summary."""
    _add("2")
    _add("1")
    capsys.readouterr()
    assert funko_cli.main(["list", "--user", "alice"]) == 0
    out = capsys.readouterr().out
    assert "alice - Funko collection" in out
    assert out.index("ID: 1") < out.index("ID: 2")
    assert "Type: Pop!" in out


def test_list_empty(capsys):
    """An empty collection prints a notice."""
    assert funko_cli.main(["list", "--user", "nobody"]) == 0
    assert "No Funkos in the collection." in capsys.readouterr().out


def test_show_missing(capsys):
    """show reports a missing id."""
    assert funko_cli.main(["show", "--user", "alice", "--id", "9"]) == 1
    assert "not found" in capsys.readouterr().out


def test_missing_subcommand_exits():
    """A subcommand is required."""
    with pytest.raises(SystemExit) as exc_info:
        funko_cli.main([])
    assert exc_info.value.code == 2


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("YES", True), ("1", True), ("false", False), ("n", False)],
)
def test_parse_bool(raw, expected):
    """CLI booleans accept common spellings."""
    assert funko_cli.parse_bool(raw) is expected


def test_format_details_colors_value():
    """format_details includes the formatted market value."""
    from filetasks.funko import Funko

    funko = Funko(1, "Sonic", "d", "Pop!", "Videojuegos", "f", 1, True, "s", 120)
    text = funko_cli.format_details(funko)
    assert "Market value:" in text
    assert "120.00" in text
    assert "Exclusive: true" in text
