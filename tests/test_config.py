"""Tests for configuration loading."""

from pathlib import Path

from md5check.cli.config import Config, load_config, validate_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, workdir: Path):
        """Test defaults when no config file exists."""
        config = load_config()

        assert config.check.quiet is False
        assert config.check.strict is False
        assert config.output.binary is False
        assert config.logging.level == "WARNING"
        assert config.logging.audit_log is None

    def test_default_path_discovered(self, workdir: Path):
        """Test md5check.yaml in the working directory is picked up."""
        (workdir / "md5check.yaml").write_text("check:\n  quiet: true\n", encoding="utf-8")

        config = load_config()

        assert config.check.quiet is True
        assert config.check.strict is False

    def test_explicit_path(self, tmp_path: Path):
        """Test every section of an explicit config file."""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(
            "check:\n"
            "  strict: true\n"
            "output:\n"
            "  binary: true\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  log_file: logs/md5check.log\n"
            "  audit_log: logs/audit.jsonl\n",
            encoding="utf-8",
        )

        config = load_config(config_path)

        assert config.check.strict is True
        assert config.output.binary is True
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == Path("logs/md5check.log")
        assert config.logging.audit_log == Path("logs/audit.jsonl")

    def test_empty_file(self, tmp_path: Path):
        """Test an empty YAML file yields defaults."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("", encoding="utf-8")

        assert load_config(config_path) == Config()


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_defaults(self):
        """Test default config has no issues."""
        assert validate_config(Config()) == []

    def test_invalid_level(self):
        """Test unknown logging levels are reported."""
        config = Config()
        config.logging.level = "LOUD"

        issues = validate_config(config)

        assert issues == ["Invalid logging level: LOUD"]

    def test_audit_log_directory_created(self, tmp_path: Path):
        """Test the audit log directory is created during validation."""
        config = Config()
        config.logging.audit_log = tmp_path / "logs" / "audit.jsonl"

        assert validate_config(config) == []
        assert (tmp_path / "logs").is_dir()
