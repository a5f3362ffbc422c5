"""
Test configuration and fixtures for the Fale proxy.

Outbound HTTP is intercepted per test by patching httpx.get inside the rewrite
service; each fixture installs its own patch and removes it when the test ends.
"""

from typing import Generator
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient


SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <meta name="description" content="Yale University official page">
</head>
<body>
  <header>
    <h1>Welcome to Yale University</h1>
    <nav>
      <ul>
        <li><a href="https://www.yale.edu/about">About Yale</a></li>
        <li><a href="https://www.yale.edu/admissions">Yale Admissions</a></li>
        <li><a href="https://www.yale.edu/research">Research at yale</a></li>
      </ul>
    </nav>
  </header>
  <main>
    <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
    <p>Founded in 1701, YALE is the third-oldest institution of higher education in the United States.</p>
    <img src="https://www.yale.edu/images/logo.png" alt="Yale Logo">
    <!-- Yale comment -->
  </main>
  <footer>
    <p>&copy; 2023 Yale University. All rights reserved.</p>
  </footer>
</body>
</html>
"""


@pytest.fixture
def fake_response():
    """Build the httpx.Response a patched fetch hands back."""
    def _build(url: str, html: str, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, text=html, request=httpx.Request("GET", url))

    return _build


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML_WITH_YALE


@pytest.fixture
def mock_get():
    """Patch the outbound fetch; tests set return_value or side_effect."""
    with patch("app.services.rewrite_service.httpx.get") as mocked:
        yield mocked
