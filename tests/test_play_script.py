"""
Tests for the play script's argument handling.
"""
import pytest


class TestArguments:
    """Tests for command line parsing and overrides."""

    def test_defaults_produce_no_overrides(self):
        """Test no flags leave the config file in charge."""
        from play import build_overrides, parse_args

        assert build_overrides(parse_args([])) == {}

    def test_flags_map_to_sections(self):
        """Test each flag lands in its config section."""
        from play import build_overrides, parse_args

        args = parse_args([
            "--width", "30", "--height", "12", "-d", "hard", "--seed", "7",
            "--ascii", "--record-file", "rec.json", "--log-level", "DEBUG",
        ])

        assert build_overrides(args) == {
            'game': {'width': 30, 'height': 12, 'difficulty': 'hard', 'seed': 7},
            'display': {'use_emoji': False},
            'records': {'path': 'rec.json'},
            'logging': {'level': 'DEBUG'},
        }

    def test_no_records(self):
        """Test --no-records disables the record store."""
        from play import build_overrides, create_game, parse_args
        from termsnake.utils.config_loader import config_from_dict

        overrides = build_overrides(parse_args(["--no-records"]))
        game = create_game(config_from_dict(overrides))

        assert overrides == {'records': {'enabled': False}}
        assert game.record_store is None

    def test_record_file_store(self, record_file):
        """Test the record path from the config is used."""
        from play import create_game
        from termsnake.persistence import FileRecordStore
        from termsnake.utils.config_loader import config_from_dict

        game = create_game(config_from_dict({'records': {'path': str(record_file)}}))

        assert isinstance(game.record_store, FileRecordStore)
        assert game.record_store.path == record_file

    @pytest.fixture
    def package_logger(self, monkeypatch):
        """Keep handlers main() installs off the real package logger."""
        import logging

        logger = logging.getLogger("termsnake")
        old_level = logger.level
        monkeypatch.setattr(logger, "handlers", [])
        yield logger
        for handler in logger.handlers:
            handler.close()
        logger.setLevel(old_level)

    def test_invalid_board_exits_with_error(self, tmp_path, capsys, package_logger):
        """Test a bad board size is reported instead of raising."""
        from play import main

        config = tmp_path / "config.yaml"
        config.write_text("logging:\n  log_file: ''\n")

        code = main(["--config", str(config), "--width", "3", "--no-records"])

        assert code == 2
        assert "at least" in capsys.readouterr().err

    def test_null_width_exits_with_error(self, tmp_path, capsys, package_logger):
        """Test a non-numeric board size from YAML is reported, not raised."""
        from play import main

        config = tmp_path / "config.yaml"
        config.write_text("game:\n  width: null\nlogging:\n  log_file: ''\n")

        code = main(["--config", str(config), "--no-records"])

        assert code == 2
        assert "width must be an integer" in capsys.readouterr().err
