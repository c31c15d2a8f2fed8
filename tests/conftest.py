import os
from unittest.mock import patch

import pytest

CREDENTIAL_ENV_VARS = ("FREEMOBILE_USER", "FREEMOBILE_PASS", "DEBUG")


@pytest.fixture(autouse=True)
def mock_settings_env_vars(tmp_path):
    """Automatically mock HOME and credential variables to ensure test isolation."""
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    clean_env = {k: v for k, v in os.environ.items() if k not in CREDENTIAL_ENV_VARS}
    clean_env["HOME"] = str(fake_home)

    with patch("pathlib.Path.home", return_value=fake_home):
        with patch.dict(os.environ, clean_env, clear=True):
            yield
