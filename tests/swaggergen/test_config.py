"""
Tests for the configuration module.

Tests the Config class functionality including:
- YAML loading and parsing
- Variable substitution (${var} syntax)
- Environment variable overrides
- File size validation
"""

from pathlib import Path

import pytest
import yaml

from swaggergen.config import MAX_CONFIG_SIZE_BYTES, Config, _check_file_size
from swaggergen.dot_dict import DotDict, DotDictPathNotFoundError

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def config_file(tmp_path):
    """Create a configuration file with every recognized section."""
    path = tmp_path / "swaggergen.yaml"
    path.write_text(
        """
logging:
  level: info
  micros: false

paths:
  data: /var/lib/shop

dbs:
  db:
    url: sqlite:///${paths.data}/app.db

schema:
  connection: db
  type_aliases:
    money: decimal
  models:
    app.models.Product: products
  tables:
    products:
      - {name: id, type: int, nullable: false}
      - {name: photo, type: blob}
"""
    )
    return path


# =============================================================================
# Loading
# =============================================================================


@pytest.mark.unit
class TestConfigLoading:
    """Test loading YAML files."""

    def test_sections(self, config_file):
        """Test attribute and dot-path access."""
        config = Config(str(config_file), enable_env_overrides=False)

        assert config.logging.level == "info"
        assert config.get("schema.connection") == "db"
        assert config.get("schema.type_aliases.money") == "decimal"
        assert isinstance(config.schema, DotDict)

    def test_dotted_keys_kept(self, config_file):
        """Test keys containing dots stay single keys."""
        config = Config(str(config_file), enable_env_overrides=False)

        assert list(config.get("schema.models").keys()) == ["app.models.Product"]

    def test_list_entries_converted(self, config_file):
        """Test mappings inside lists become DotDicts."""
        config = Config(str(config_file), enable_env_overrides=False)
        columns = config.get("schema.tables.products")

        assert columns[0].name == "id"
        assert columns[0].nullable is False
        assert columns[1].get("nullable") is None

    def test_variable_substitution(self, config_file):
        """Test ${a.b} references are resolved."""
        config = Config(str(config_file), enable_env_overrides=False)

        assert config.dbs.db.url == "sqlite:////var/lib/shop/app.db"

    def test_undefined_variable(self, tmp_path):
        """Test references to missing keys fail."""
        path = tmp_path / "bad.yaml"
        path.write_text("dbs:\n  db:\n    url: ${nowhere.url}\n")

        with pytest.raises(DotDictPathNotFoundError):
            Config(str(path), enable_env_overrides=False)

    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "absent.yaml"))

    def test_empty_file(self, tmp_path):
        """Test an empty file is an empty configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert len(Config(str(path), enable_env_overrides=False)) == 0

    def test_not_a_mapping(self, tmp_path):
        """Test a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            Config(str(path))

    def test_invalid_yaml(self, tmp_path):
        """Test syntax errors surface from the YAML parser."""
        path = tmp_path / "broken.yaml"
        path.write_text("logging: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            Config(str(path))

    def test_path(self, config_file):
        """Test the resolved file path is exposed."""
        config = Config(str(config_file), enable_env_overrides=False)

        assert config.path == Path(config_file).resolve()

    def test_private_state_not_in_keys(self, config_file):
        """Test loader state does not appear as configuration."""
        config = Config(str(config_file), enable_env_overrides=False)

        assert set(config.keys()) == {"logging", "paths", "dbs", "schema"}
        assert "_env_prefix" not in config.to_dict()


@pytest.mark.unit
class TestFileSize:
    """Test the size limit."""

    def test_too_large(self, tmp_path, monkeypatch):
        """Test files above the limit are refused."""
        path = tmp_path / "big.yaml"
        path.write_text("a: 1\n")
        monkeypatch.setattr(
            "swaggergen.config.os.path.getsize", lambda _: MAX_CONFIG_SIZE_BYTES + 1
        )

        with pytest.raises(ValueError, match="exceeding maximum size"):
            _check_file_size(path)


# =============================================================================
# Environment Overrides
# =============================================================================


@pytest.mark.unit
class TestEnvOverrides:
    """Test SWAGGERGEN_* environment variables."""

    def test_override(self, config_file, monkeypatch):
        """Test a variable replaces a file value."""
        monkeypatch.setenv("SWAGGERGEN_LOGGING_LEVEL", "debug")

        assert Config(str(config_file)).logging.level == "debug"

    def test_new_section(self, config_file, monkeypatch):
        """Test a variable can add values the file does not have."""
        monkeypatch.setenv("SWAGGERGEN_OUTPUT_DIR", "docs")

        assert Config(str(config_file)).get("output.dir") == "docs"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("true", True),
            ("FALSE", False),
            ("42", 42),
            ("1.5", 1.5),
            ("null", None),
            ("a, b", ["a", "b"]),
            ("text", "text"),
        ],
    )
    def test_value_conversion(self, config_file, monkeypatch, raw, expected):
        """Test scalar conversion of variable values."""
        monkeypatch.setenv("SWAGGERGEN_LOGGING_MICROS", raw)

        assert Config(str(config_file)).logging.micros == expected

    def test_disabled(self, config_file, monkeypatch):
        """Test overrides can be switched off."""
        monkeypatch.setenv("SWAGGERGEN_LOGGING_LEVEL", "debug")
        config = Config(str(config_file), enable_env_overrides=False)

        assert config.logging.level == "info"

    def test_custom_prefix(self, config_file, monkeypatch):
        """Test a different prefix."""
        monkeypatch.setenv("DOCS_SCHEMA_CONNECTION", "reporting")
        config = Config(str(config_file), env_prefix="DOCS_")

        assert config.schema.connection == "reporting"


# =============================================================================
# DotDict
# =============================================================================


@pytest.mark.unit
class TestDotDict:
    """Test DotDict access helpers."""

    def test_nested_conversion(self):
        """Test nested dictionaries become DotDicts."""
        d = DotDict(dbs={"db": {"url": "sqlite://"}})

        assert d.dbs.db.url == "sqlite://"
        assert d.dict() == {"dbs": {"db": {"url": "sqlite://"}}}

    def test_has_and_get(self):
        """Test dot-path lookups."""
        d = DotDict(schema={"connection": "db"})

        assert d.has("schema.connection")
        assert not d.has("schema.tables")
        assert d.get("schema.tables") is None
        assert d.get("schema.tables", "none") == "none"
        assert d.get("") is None

    def test_item_access(self):
        """Test dictionary-style access."""
        d = DotDict()
        d["level"] = "info"
        d["level"] = "debug"

        assert d["level"] == "debug"
        assert d["missing"] is None
        assert "level" in d

    @pytest.mark.parametrize("key", ["get", "has", "items", "keys"])
    def test_reserved_attribute_assignment(self, key):
        """Test attributes that would shadow methods are refused."""
        d = DotDict()
        with pytest.raises(ValueError, match="reserved"):
            setattr(d, key, 1)

    @pytest.mark.parametrize("key", ["get", "has", "items", "keys", "set", "dict"])
    def test_method_named_keys_as_data(self, key):
        """Test keys named like methods are stored and reachable by lookup."""
        d = DotDict(tables={key: [{"name": "id"}]})

        assert d.get(f"tables.{key}")[0].name == "id"
        assert d.tables[key][0].name == "id"
        assert callable(getattr(d.tables, key))
        assert d.to_dict() == {"tables": {key: [{"name": "id"}]}}

    def test_self_key(self):
        """Test a key named self does not clash with the method argument."""
        assert DotDict(self=1).get("self") == 1

    def test_method_named_top_level_key(self, tmp_path):
        """Test a configuration file may use method names as section keys."""
        path = tmp_path / "items.yaml"
        path.write_text("items:\n  a: 1\n")

        assert Config(str(path), enable_env_overrides=False).get("items.a") == 1

    def test_to_dict_lists(self):
        """Test lists of DotDicts are converted back."""
        d = DotDict(tables={"products": [{"name": "id"}]})

        assert d.to_dict() == {"tables": {"products": [{"name": "id"}]}}
        assert isinstance(d.to_dict()["tables"]["products"][0], dict)

    def test_path_not_found_error(self):
        """Test the error carries object and path."""
        d = DotDict()
        error = DotDictPathNotFoundError(d, "a.b")

        assert error.obj is d
        assert error.path == "a.b"
        assert str(error) == "Path not found: a.b"
