"""
Shared fixtures for the ZIP diff backend tests
"""

import io
import warnings
import zipfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from services.config_manager import ConfigManager


def build_zip(files: dict) -> bytes:
    """Build an in-memory ZIP from a dict or (name, content) pairs

    str/bytes values become files, None becomes a directory marker.
    """
    buffer = io.BytesIO()
    with warnings.catch_warnings():
        # Tests deliberately write duplicate names
        warnings.simplefilter("ignore", UserWarning)
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            for name, content in files.items() if isinstance(files, dict) else files:
                if content is None:
                    archive.writestr(name if name.endswith("/") else name + "/", "")
                else:
                    archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point the config manager at a fresh directory for every test"""
    directory = tmp_path / "config"
    monkeypatch.setenv("ZIPDIFF_CONFIG_DIR", str(directory))
    ConfigManager.reset_instance()
    yield directory
    ConfigManager.reset_instance()


@pytest_asyncio.fixture
async def client():
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
