"""
Shared test fixtures and configuration.
"""

import json
import textwrap
from pathlib import Path

import pytest

from redux_scaffold.adapters.mock import MockAdapter
from redux_scaffold.core.models.scaffold import SetupConfig


@pytest.fixture
def next_app(tmp_path: Path) -> Path:
    """A bare Next.js project directory (package.json only)."""
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "demo-app", "private": True}, indent=2)
    )
    return tmp_path


@pytest.fixture
def layout_file(next_app: Path) -> Path:
    """Path of src/app/layout.js inside ``next_app`` (not created)."""
    path = next_app / "src" / "app" / "layout.js"
    path.parent.mkdir(parents=True)
    return path


@pytest.fixture
def default_layout() -> str:
    """The root layout create-next-app generates."""
    return textwrap.dedent("""\
        import "./globals.css";

        export const metadata = {
          title: "Create Next App",
          description: "Generated by create next app",
        };

        export default function RootLayout({ children }) {
          return (
            <html lang="en">
              <body>{children}</body>
            </html>
          );
        }
    """)


@pytest.fixture
def config(next_app: Path) -> SetupConfig:
    return SetupConfig(project_dir=next_app)


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()
