import pytest

from linkedin_groups.core.config import ClientConfig
from linkedin_groups.core.constants import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from linkedin_groups.core.exceptions import ConfigurationError


class TestDefaults:
    def test_defaults(self):
        config = ClientConfig()

        assert config.access_token is None
        assert config.api_base_url == API_BASE_URL
        assert config.timeout == REQUEST_TIMEOUT_SECONDS
        assert config.log_level == "INFO"

    def test_trailing_slash_is_stripped(self):
        assert ClientConfig(api_base_url="https://api.example.com/v1/").api_base_url == "https://api.example.com/v1"

    def test_empty_base_url_is_rejected(self):
        with pytest.raises(ConfigurationError):
            ClientConfig(api_base_url="")

    def test_non_positive_timeout_is_rejected(self):
        with pytest.raises(ConfigurationError):
            ClientConfig(timeout=0)

    def test_log_level_is_normalized(self):
        assert ClientConfig(log_level="warning").log_level == "WARNING"

    @pytest.mark.parametrize("log_level", [None, "", "VERBOSE", 10])
    def test_invalid_log_level_is_rejected(self, log_level):
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            ClientConfig(log_level=log_level)


class TestFromEnv:
    def test_reads_environment(self, clean_env, tmp_path):
        clean_env.setenv("LINKEDIN_ACCESS_TOKEN", "env-token")
        clean_env.setenv("LINKEDIN_API_BASE_URL", "https://api.example.com/v1")
        clean_env.setenv("LINKEDIN_TIMEOUT", "12")
        clean_env.setenv("LINKEDIN_LOG_LEVEL", "DEBUG")

        config = ClientConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))

        assert config.access_token == "env-token"
        assert config.api_base_url == "https://api.example.com/v1"
        assert config.timeout == 12
        assert config.log_level == "DEBUG"

    def test_defaults_when_unset(self, clean_env, tmp_path):
        config = ClientConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))

        assert config.access_token is None
        assert config.credentials_file is None
        assert config.timeout == REQUEST_TIMEOUT_SECONDS

    def test_loads_dotenv_file(self, clean_env, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("LINKEDIN_ACCESS_TOKEN=dotenv-token\nLINKEDIN_TIMEOUT=45\n")

        config = ClientConfig.from_env(dotenv_path=str(dotenv))

        assert config.access_token == "dotenv-token"
        assert config.timeout == 45

    def test_environment_wins_over_dotenv(self, clean_env, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("LINKEDIN_ACCESS_TOKEN=dotenv-token\n")
        clean_env.setenv("LINKEDIN_ACCESS_TOKEN", "env-token")

        assert ClientConfig.from_env(dotenv_path=str(dotenv)).access_token == "env-token"

    def test_invalid_timeout(self, clean_env, tmp_path):
        clean_env.setenv("LINKEDIN_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="Invalid timeout"):
            ClientConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))


class TestFromYaml:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "linkedin.yml"
        path.write_text(
            "access_token: yaml-token\n"
            "api_base_url: https://api.example.com/v1\n"
            "timeout: 20\n"
        )

        config = ClientConfig.from_yaml(str(path))

        assert config.access_token == "yaml-token"
        assert config.api_base_url == "https://api.example.com/v1"
        assert config.timeout == 20

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "linkedin.yml"
        path.write_text("access_token: yaml-token\nretries: 5\n")

        assert ClientConfig.from_yaml(str(path)).access_token == "yaml-token"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "linkedin.yml"
        path.write_text("")

        assert ClientConfig.from_yaml(str(path)) == ClientConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ClientConfig.from_yaml(str(tmp_path / "nope.yml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "linkedin.yml"
        path.write_text("access_token: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ClientConfig.from_yaml(str(path))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "linkedin.yml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            ClientConfig.from_yaml(str(path))

    def test_null_log_level(self, tmp_path):
        path = tmp_path / "linkedin.yml"
        path.write_text("access_token: yaml-token\nlog_level: null\n")

        with pytest.raises(ConfigurationError, match="Invalid log level"):
            ClientConfig.from_yaml(str(path))

    def test_invalid_timeout(self, tmp_path):
        path = tmp_path / "linkedin.yml"
        path.write_text("timeout: later\n")

        with pytest.raises(ConfigurationError, match="Invalid timeout"):
            ClientConfig.from_yaml(str(path))
