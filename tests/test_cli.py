# Area: Tools Tests
"""Tests for the hexwire command-line interface."""

import pytest

from hexwire.cli import main


class TestTypesCommand:
    def test_lists_kinds(self, capsys):
        assert main(["types"]) == 0
        out = capsys.readouterr().out
        assert "1033" in out
        assert "Discard" in out
        assert "game,clay,ore,sheep,wheat,wood,unknown" in out


class TestDecodeCommand:
    def test_valid_line(self, capsys):
        assert main(["decode", "1033|game42,1,0,2,0,1,0"]) == 0
        out = capsys.readouterr().out
        assert "Discard:game=game42|resources=clay=1|ore=0|sheep=2" in out

    def test_garbled_line(self, capsys):
        assert main(["decode", "1033|game42,x,0,2,0,1,0"]) == 1
        err = capsys.readouterr().err
        assert "error: clay" in err


class TestReplayCommand:
    def test_replay_file(self, tmp_path, capsys):
        log = tmp_path / "server.log"
        log.write_text(
            "Discard:game=game42|resources=clay=1|ore=0|sheep=2|wheat=0|wood=1|unknown=0\n"
            "GameState:game=game42|state=50\n",
            encoding="utf-8",
        )
        assert main(["replay", str(log)]) == 0
        out = capsys.readouterr().out
        assert "1033|game42,1,0,2,0,1,0" in out
        assert "1025|game42,50" in out

    def test_replay_with_bad_line(self, tmp_path, capsys):
        log = tmp_path / "server.log"
        log.write_text("GameState:game=game42|state=x\n", encoding="utf-8")
        assert main(["replay", str(log)]) == 1
        assert "error:" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["replay", str(tmp_path / "nope.log")]) == 2


class TestGateCommand:
    def test_old_peer(self, capsys):
        assert main(["gate", "--peer-version", "2499"]) == 0
        assert "2.4.99 (2499): GameState after discard suppressed" in capsys.readouterr().out

    def test_threshold_peer(self, capsys):
        assert main(["gate", "--peer-version", "2500"]) == 0
        assert "sent" in capsys.readouterr().out

    def test_peer_version_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("HEXWIRE_PEER_VERSION", "2000")
        assert main(["gate"]) == 0
        assert "(2000)" in capsys.readouterr().out


class TestConfigErrors:
    def test_bad_log_level(self, capsys):
        assert main(["--log-level", "LOUD", "types"]) == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_missing_command(self):
        with pytest.raises(SystemExit):
            main([])
