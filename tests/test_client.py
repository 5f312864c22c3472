from unittest.mock import MagicMock

import pytest

from linkedin_groups.api.groups import GroupsClient
from linkedin_groups.client import LinkedInClient
from linkedin_groups.core.config import ClientConfig
from linkedin_groups.core.exceptions import AuthenticationError, ConfigurationError
from linkedin_groups.infrastructure.http_client import LinkedInHTTPClient
from linkedin_groups.infrastructure.token_provider import FileBasedTokenProvider, StaticTokenProvider


class TestTokenProviders:
    def test_static_token(self):
        assert StaticTokenProvider("abc").get_access_token() == "abc"

    def test_static_token_cannot_be_empty(self):
        with pytest.raises(AuthenticationError):
            StaticTokenProvider("")

    def test_file_based_token(self, tmp_path):
        path = tmp_path / "credentials.yml"
        path.write_text("linkedin:\n  access_token: file-token\n")

        assert FileBasedTokenProvider(str(path)).get_access_token() == "file-token"

    def test_platform_is_case_insensitive(self, tmp_path):
        path = tmp_path / "credentials.yml"
        path.write_text("linkedin:\n  access_token: file-token\n")

        assert FileBasedTokenProvider(str(path), platform="LinkedIn").get_access_token() == "file-token"

    def test_missing_file(self, tmp_path):
        with pytest.raises(AuthenticationError, match="not found"):
            FileBasedTokenProvider(str(tmp_path / "missing.yml"))

    def test_missing_platform(self, tmp_path):
        path = tmp_path / "credentials.yml"
        path.write_text("facebook:\n  access_token: fb-token\n")

        with pytest.raises(AuthenticationError, match="Platform 'linkedin' not found"):
            FileBasedTokenProvider(str(path))

    def test_missing_token(self, tmp_path):
        path = tmp_path / "credentials.yml"
        path.write_text("linkedin:\n  client_id: abc\n")

        with pytest.raises(AuthenticationError, match="No access_token"):
            FileBasedTokenProvider(str(path))

    def test_scalar_platform_section(self, tmp_path):
        path = tmp_path / "credentials.yml"
        path.write_text("linkedin: sometoken\n")

        with pytest.raises(AuthenticationError, match="must be a mapping"):
            FileBasedTokenProvider(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "credentials.yml"
        path.write_text("linkedin: {access_token: [\n")

        with pytest.raises(AuthenticationError, match="Invalid YAML"):
            FileBasedTokenProvider(str(path))


class TestLinkedInClient:
    def test_from_config_with_token(self):
        client = LinkedInClient.from_config(ClientConfig(access_token="abc", timeout=9))

        assert isinstance(client.transport, LinkedInHTTPClient)
        assert isinstance(client.groups, GroupsClient)
        assert client.groups.transport is client.transport
        assert client.transport.timeout == 9
        assert client.transport.token_provider.get_access_token() == "abc"
        client.close()

    def test_from_config_with_credentials_file(self, tmp_path):
        path = tmp_path / "credentials.yml"
        path.write_text("linkedin:\n  access_token: file-token\n")

        with LinkedInClient.from_config(ClientConfig(credentials_file=str(path))) as client:
            assert client.transport.token_provider.get_access_token() == "file-token"

    def test_token_wins_over_credentials_file(self, tmp_path):
        config = ClientConfig(access_token="abc", credentials_file=str(tmp_path / "unused.yml"))

        with LinkedInClient.from_config(config) as client:
            assert isinstance(client.transport.token_provider, StaticTokenProvider)

    def test_from_config_without_credentials(self):
        with pytest.raises(ConfigurationError, match="No LinkedIn credentials"):
            LinkedInClient.from_config(ClientConfig())

    def test_close_closes_transport(self):
        transport = MagicMock()

        with LinkedInClient(transport):
            pass

        transport.close.assert_called_once()

    def test_close_tolerates_transport_without_close(self):
        class Bare:
            pass

        LinkedInClient(Bare()).close()
