"""
Tests for configuration parameters and config readers.
"""

import json

import pytest

from compkit.config import (
    ConfigParams, MemoryConfigReader, JsonConfigReader, YamlConfigReader,
    DefaultConfigReaderFactory, expand_template
)
from compkit.errors import ConfigError, FileError


class TestConfigParams:
    """Test ConfigParams maps and sections."""

    def test_values_are_stored_as_strings(self):
        """Test that values are converted to strings and back on read."""
        config = ConfigParams.from_tuples(
            "port", 8080,
            "enabled", True,
            "ratio", 0.5
        )

        assert config["port"] == "8080"
        assert config["enabled"] == "true"
        assert config.get_as_integer("port") == 8080
        assert config.get_as_boolean("enabled") is True
        assert config.get_as_float("ratio") == 0.5
        assert config.get_as_integer_with_default("missing", 7) == 7
        assert config.get_as_nullable_string("missing") is None

    def test_sections(self):
        """Test reading dotted sections."""
        config = ConfigParams.from_tuples(
            "connection.host", "localhost",
            "connection.port", "8080",
            "options.timeout", "100",
            "name", "test"
        )

        assert config.get_section_names() == ["connection", "options", "name"]

        connection = config.get_section("connection")
        assert dict(connection) == {"host": "localhost", "port": "8080"}

        assert len(config.get_section("missing")) == 0

    def test_add_section_and_override(self):
        """Test adding sections and overriding values."""
        config = ConfigParams.from_tuples("a", "1")
        config.add_section("sub", ConfigParams.from_tuples("b", "2"))

        assert config["sub.b"] == "2"

        overridden = config.override(ConfigParams.from_tuples("a", "3"))
        assert overridden["a"] == "3"
        assert config["a"] == "1"

        defaulted = config.set_defaults(ConfigParams.from_tuples("a", "9", "c", "4"))
        assert defaulted["a"] == "1"
        assert defaulted["c"] == "4"

    def test_unconvertible_integers_use_default(self):
        """Test that infinite and overflowing numbers fall back to the default."""
        config = ConfigParams.from_tuples("x", "inf", "y", "-inf", "z", "1e400", "w", "abc")

        assert config.get_as_integer_with_default("x", 5) == 5
        assert config.get_as_nullable_integer("y") is None
        assert config.get_as_integer("z") == 0
        assert config.get_as_integer_with_default("w", 5) == 5

    def test_update_and_setdefault_convert_values(self):
        """Test that bulk updates store values as strings."""
        config = ConfigParams()
        config.update({"port": 8080}, enabled=True)
        config.setdefault("timeout", 100)
        config |= {"ratio": 0.5}

        assert config["port"] == "8080"
        assert config["enabled"] == "true"
        assert config["timeout"] == "100"
        assert config.setdefault("timeout", 200) == "100"
        assert config["ratio"] == "0.5"
        assert isinstance(config, ConfigParams)

    def test_from_string(self):
        """Test parsing key=value strings."""
        config = ConfigParams.from_string("host=10.1.1.100; port=8080;flag")

        assert config["host"] == "10.1.1.100"
        assert config["port"] == "8080"
        assert "flag" in config
        assert config["flag"] is None

    def test_from_value_flattens_nested_structures(self):
        """Test flattening nested dicts and lists."""
        config = ConfigParams.from_value({
            "connections": [
                {"host": "a", "port": 1},
                {"host": "b", "port": 2}
            ],
            "name": "svc"
        })

        assert config["connections.0.host"] == "a"
        assert config["connections.1.port"] == "2"
        assert config["name"] == "svc"

    def test_from_env(self):
        """Test loading configuration from environment variables."""
        environ = {
            "COMPKIT_CONNECTION__HOST": "localhost",
            "COMPKIT_NAME": "svc",
            "OTHER_VALUE": "x"
        }

        config = ConfigParams.from_env("COMPKIT_", environ)

        assert config["connection.host"] == "localhost"
        assert config["name"] == "svc"
        assert "other_value" not in config

    def test_from_env_reads_process_environment(self, monkeypatch):
        """Test loading configuration from os.environ."""
        monkeypatch.setenv("COMPKIT_CACHE__TIMEOUT", "500")

        config = ConfigParams.from_env()

        assert config.get_as_integer("cache.timeout") == 500

    def test_expand_template(self):
        """Test rendering template placeholders."""
        result = expand_template("host={{ host }};port={{port}};x={{ missing }}", {"host": "h", "port": 1})

        assert result == "host=h;port=1;x="


class TestMemoryConfigReader:
    """Test the in-memory config reader."""

    @pytest.mark.asyncio
    async def test_read_config_returns_copy(self):
        """Test that reading returns a copy of the configuration."""
        reader = MemoryConfigReader(ConfigParams.from_tuples("a", "1"))

        config = await reader.read_config("123")
        config["a"] = "2"

        again = await reader.read_config("123")
        assert again["a"] == "1"

    @pytest.mark.asyncio
    async def test_read_config_with_parameters(self):
        """Test rendering templates with parameters."""
        reader = MemoryConfigReader(ConfigParams.from_tuples(
            "connection.host", "{{ host }}",
            "connection.port", "8080"
        ))

        config = await reader.read_config("123", ConfigParams.from_tuples("host", "localhost"))

        assert config["connection.host"] == "localhost"
        assert config["connection.port"] == "8080"


class TestFileConfigReaders:
    """Test JSON and YAML config readers."""

    @pytest.mark.asyncio
    async def test_read_json(self, tmp_path):
        """Test reading a JSON file with template parameters."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "connection": {"host": "{{ host }}", "port": 8080}
        }), encoding="utf-8")

        config = await JsonConfigReader.read_config_file(
            "123", str(path), ConfigParams.from_tuples("host", "10.0.0.1")
        )

        assert config["connection.host"] == "10.0.0.1"
        assert config.get_as_integer("connection.port") == 8080

    @pytest.mark.asyncio
    async def test_read_yaml(self, tmp_path):
        """Test reading a YAML file."""
        path = tmp_path / "config.yml"
        path.write_text(
            "connections:\n"
            "  - host: a\n"
            "    port: 1\n"
            "  - host: b\n"
            "    port: 2\n"
            "enabled: true\n",
            encoding="utf-8"
        )

        reader = YamlConfigReader()
        reader.configure(ConfigParams.from_tuples("path", str(path)))
        config = await reader.read_config("123")

        assert config["connections.0.host"] == "a"
        assert config["connections.1.host"] == "b"
        assert config.get_as_boolean("enabled") is True

    @pytest.mark.asyncio
    async def test_default_parameters_from_configuration(self, tmp_path):
        """Test template defaults taken from the parameters section."""
        path = tmp_path / "config.yml"
        path.write_text("host: \"{{ host }}\"\n", encoding="utf-8")

        reader = YamlConfigReader()
        reader.configure(ConfigParams.from_tuples(
            "path", str(path),
            "parameters.host", "default-host"
        ))

        config = await reader.read_config("123")
        assert config["host"] == "default-host"

        config = await reader.read_config("123", ConfigParams.from_tuples("host", "other"))
        assert config["host"] == "other"

    @pytest.mark.asyncio
    async def test_missing_path(self):
        """Test that a reader without a path fails."""
        reader = JsonConfigReader()

        with pytest.raises(ConfigError) as exc_info:
            await reader.read_config("123")

        assert exc_info.value.code == "NO_PATH"
        assert exc_info.value.correlation_id == "123"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        """Test that an unreadable file fails with READ_FAILED."""
        path = str(tmp_path / "missing.json")

        with pytest.raises(FileError) as exc_info:
            await JsonConfigReader(path).read_config("123")

        assert exc_info.value.code == "READ_FAILED"
        assert exc_info.value.details["path"] == path
        assert exc_info.value.cause is not None

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path):
        """Test that malformed content fails with READ_FAILED."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(FileError) as exc_info:
            await JsonConfigReader(str(path)).read_config(None)

        assert exc_info.value.code == "READ_FAILED"


class TestConfigReaderFactory:
    """Test the config reader factory."""

    def test_create_readers(self):
        """Test creating readers by descriptor."""
        factory = DefaultConfigReaderFactory()

        assert isinstance(factory.create(factory.JSON_CONFIG_READER_DESCRIPTOR), JsonConfigReader)
        assert isinstance(factory.create(factory.YAML_CONFIG_READER_DESCRIPTOR), YamlConfigReader)
        assert isinstance(factory.create(factory.MEMORY_CONFIG_READER_DESCRIPTOR), MemoryConfigReader)
