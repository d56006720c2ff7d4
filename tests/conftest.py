"""
Pytest configuration for sentex tests.
"""
import sys
import os

import pytest

# Make `import sentex` work without installing the package
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture(autouse=True)
def clean_config(tmp_path, monkeypatch):
	"""Every test starts from default config, isolated from the user's files."""
	from sentex.config import config

	monkeypatch.setenv("SENTEX_CONFIG", str(tmp_path / "no-such-config.json"))
	for name in ("SENTEX_DEBUG", "SENTEX_LOG_LEVEL", "SENTEX_MAX_INPUT_LENGTH"):
		monkeypatch.delenv(name, raising=False)
	config.reset()
	yield config
	config.reset()
