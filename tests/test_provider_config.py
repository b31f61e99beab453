import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from sonarqube_provider.config import (
    HTTP_TIMEOUT_DEFAULT,
    SONAR_HOST_DEFAULT,
    load_provider_configuration,
)
from sonarqube_provider.errors import SonarQubeConfigError


class TestLoadProviderConfiguration(unittest.TestCase):
    def test_token_auth_and_defaults(self) -> None:
        cfg = load_provider_configuration({"SONAR_TOKEN": "squ_abc"})
        self.assertEqual(SONAR_HOST_DEFAULT, cfg.base_url)
        self.assertEqual(("squ_abc", ""), cfg.session.auth)
        self.assertTrue(cfg.session.verify)
        self.assertEqual(HTTP_TIMEOUT_DEFAULT, cfg.timeout)

    def test_user_password_auth(self) -> None:
        cfg = load_provider_configuration(
            {"SONAR_HOST": "https://sonar.example/", "SONAR_USER": "admin", "SONAR_PASS": "pw"}
        )
        self.assertEqual("https://sonar.example", cfg.base_url)
        self.assertEqual(("admin", "pw"), cfg.session.auth)

    def test_token_wins_over_user_password(self) -> None:
        cfg = load_provider_configuration(
            {"SONAR_TOKEN": "t", "SONAR_USER": "admin", "SONAR_PASS": "pw"}
        )
        self.assertEqual(("t", ""), cfg.session.auth)

    def test_missing_credentials(self) -> None:
        with self.assertRaises(SonarQubeConfigError):
            load_provider_configuration({"SONAR_USER": "admin"})

    def test_rejects_non_http_host(self) -> None:
        for host in ("sonar.example", "ftp://sonar.example"):
            with self.subTest(host=host):
                with self.assertRaises(SonarQubeConfigError):
                    load_provider_configuration({"SONAR_HOST": host, "SONAR_TOKEN": "t"})

    def test_insecure_flag_and_timeout(self) -> None:
        with self.assertLogs("sonarqube_provider.config", level="WARNING"):
            cfg = load_provider_configuration(
                {
                    "SONAR_TOKEN": "t",
                    "SONAR_TLS_INSECURE_SKIP_VERIFY": "true",
                    "SONAR_HTTP_TIMEOUT": "5",
                }
            )
        self.assertFalse(cfg.session.verify)
        self.assertEqual(5.0, cfg.timeout)

    def test_bad_timeout(self) -> None:
        for raw in ("soon", "0", "-1"):
            with self.subTest(raw=raw):
                with self.assertRaises(SonarQubeConfigError):
                    load_provider_configuration({"SONAR_TOKEN": "t", "SONAR_HTTP_TIMEOUT": raw})

    def test_reads_dotenv_without_overriding_exported_values(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            env_path = Path(td) / ".env"
            env_path.write_text(
                "SONAR_HOST=https://from-dotenv.example\nSONAR_TOKEN=dotenv-token\n",
                encoding="utf-8",
            )
            with patch.dict(os.environ, {"SONAR_TOKEN": "shell-token"}, clear=True):
                cfg = load_provider_configuration(dotenv_path=env_path)

        self.assertEqual("https://from-dotenv.example", cfg.base_url)
        self.assertEqual(("shell-token", ""), cfg.session.auth)


if __name__ == "__main__":
    unittest.main()
