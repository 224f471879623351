"""
Root layout templates — the fresh ``layout.js`` and the splice pieces.
"""

from __future__ import annotations

from redux_scaffold.core.models.template import GeneratedFile

LAYOUT_PATH = "src/app/layout.js"

PROVIDER_NAME = "ReduxProvider"
IMPORT_STATEMENT = "import { ReduxProvider } from './redux/provider';"

OPEN_TAG = f"<{PROVIDER_NAME}>"
CLOSE_TAG = f"</{PROVIDER_NAME}>"

# One JSX nesting level
INDENT = "  "

_LAYOUT_TEMPLATE = f"""\
{IMPORT_STATEMENT}

export default function RootLayout({{ children }}) {{
  return (
    {OPEN_TAG}
      <html lang="en">
        <body>{{children}}</body>
      </html>
    {CLOSE_TAG}
  );
}}
"""


def generate_layout() -> GeneratedFile:
    """Fresh root layout with the provider already applied."""
    return GeneratedFile(
        path=LAYOUT_PATH,
        content=_LAYOUT_TEMPLATE,
        overwrite=False,
        reason="Root layout wrapped in ReduxProvider",
    )
