"""
Root layout patching — wrap the app in ``<ReduxProvider>``.

Three outcomes for ``src/app/layout.js``:

    absent                      → write a fresh layout       (created)
    mentions ReduxProvider      → leave it alone             (unchanged)
    otherwise                   → add import, wrap return    (patched | failed)

The splice is lexical, not a parse. To stay unambiguous it requires
exactly one ``return (`` outside comments and string literals, and finds
its closing parenthesis by balancing. Anything else is reported as a
``failed`` result with the file untouched; it never aborts the run.
"""

from __future__ import annotations

import logging
import re
import textwrap
from pathlib import Path

from redux_scaffold.core.models.scaffold import LayoutPatchResult
from redux_scaffold.core.services.generators.layout import (
    CLOSE_TAG,
    IMPORT_STATEMENT,
    INDENT,
    LAYOUT_PATH,
    OPEN_TAG,
    PROVIDER_NAME,
    generate_layout,
)
from redux_scaffold.core.services.scaffold_writer import write_generated_file

logger = logging.getLogger(__name__)

_RETURN_RE = re.compile(r"\breturn\s*\(")

# 'use client'; / "use strict" — must stay the first statement
_DIRECTIVE_RE = re.compile(r"""^\s*(['"])use [a-z ]+\1;?[ \t]*$""")


class LayoutPatchError(Exception):
    """The layout source does not meet the single-return-block precondition."""


# ── Lexical helpers ─────────────────────────────────────────────


def _mask(source: str) -> tuple[str, list[int]]:
    """Masked text plus the offsets of quotes that never close."""
    out = list(source)
    dangling: list[int] = []
    i, n = 0, len(source)

    def blank(start: int, end: int) -> None:
        for k in range(start, end):
            if out[k] != "\n":
                out[k] = " "

    while i < n:
        ch = source[i]
        nxt = source[i + 1] if i + 1 < n else ""

        if ch == "/" and nxt == "/":
            end = source.find("\n", i)
            end = n if end == -1 else end
            blank(i, end)
            i = end
        elif ch == "/" and nxt == "*":
            end = source.find("*/", i + 2)
            end = n if end == -1 else end + 2
            blank(i, end)
            i = end
        elif ch in ("'", '"', "`"):
            j = i + 1
            while j < n:
                if source[j] == "\\":
                    j += 2
                    continue
                if source[j] == ch:
                    j += 1
                    break
                if source[j] == "\n" and ch != "`":
                    dangling.append(i)
                    break
                j += 1
            else:
                dangling.append(i)
            blank(i, min(j, n))
            i = j
        else:
            i += 1

    return "".join(out), dangling


def mask_comments_and_strings(source: str) -> str:
    """Blank out comments and string literals, keeping offsets and newlines.

    Single- and double-quoted strings end at the line end if unterminated,
    so a stray apostrophe in JSX text only masks the rest of its line.
    """
    return _mask(source)[0]


def _find_closing_paren(masked: str, open_idx: int) -> int:
    depth = 0
    for idx in range(open_idx, len(masked)):
        c = masked[idx]
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return idx
    return -1


def _line_indent(source: str, idx: int) -> str:
    line_start = source.rfind("\n", 0, idx) + 1
    line = source[line_start:idx]
    return line[: len(line) - len(line.lstrip())]


def _normalize_markup(inner: str) -> list[str]:
    """Trim blank edges and shared indentation from the returned markup."""
    lines = inner.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return []

    if inner.split("\n")[0].strip():
        # Markup starts on the `return (` line: its indent is meaningless
        head = lines[0].strip()
        rest = textwrap.dedent("\n".join(lines[1:])).split("\n") if len(lines) > 1 else []
        lines = [head, *rest]
    else:
        lines = textwrap.dedent("\n".join(lines)).split("\n")

    return [line.rstrip() for line in lines]


# ── Text transforms ─────────────────────────────────────────────


def wrap_return_block(source: str) -> str:
    """Nest the single ``return ( ... )`` body inside the provider tags.

    Raises:
        LayoutPatchError: No return block, more than one, an unbalanced
            one, an empty one, or one holding an unclosed quote.
    """
    masked, dangling = _mask(source)
    matches = list(_RETURN_RE.finditer(masked))

    if not matches:
        raise LayoutPatchError("no `return (` block found")
    if len(matches) > 1:
        raise LayoutPatchError(
            f"{len(matches)} `return (` blocks found, expected exactly one"
        )

    match = matches[0]
    open_idx = match.end() - 1
    close_idx = _find_closing_paren(masked, open_idx)
    if close_idx == -1:
        raise LayoutPatchError("unbalanced parentheses after `return (`")
    if any(open_idx < q < close_idx for q in dangling):
        raise LayoutPatchError("ambiguous quote in returned markup")

    markup = _normalize_markup(source[open_idx + 1:close_idx])
    if not markup:
        raise LayoutPatchError("`return (` block is empty")

    base = _line_indent(source, match.start())
    wrapper = base + INDENT
    body = [f"{wrapper}{INDENT}{line}" if line else "" for line in markup]

    block = "\n".join([
        "return (",
        f"{wrapper}{OPEN_TAG}",
        *body,
        f"{wrapper}{CLOSE_TAG}",
        f"{base})",
    ])
    return source[:match.start()] + block + source[close_idx + 1:]


def add_import(source: str) -> str:
    """Insert the provider import at the top, after a leading directive."""
    if IMPORT_STATEMENT in source:
        return source

    lines = source.split("\n")
    first = next((i for i, line in enumerate(lines) if line.strip()), None)
    if first is not None and _DIRECTIVE_RE.match(lines[first]):
        head = lines[: first + 1]
        tail = lines[first + 1:]
        while tail and not tail[0].strip():
            tail.pop(0)
        return "\n".join([*head, "", IMPORT_STATEMENT, "", *tail])

    return f"{IMPORT_STATEMENT}\n\n{source}"


# ── File operation ──────────────────────────────────────────────


def patch_layout(project_dir: Path) -> LayoutPatchResult:
    """Create or patch ``src/app/layout.js`` under ``project_dir``."""
    target = project_dir / LAYOUT_PATH

    if target.exists() and not target.is_file():
        logger.warning("%s exists but is not a regular file", LAYOUT_PATH)
        return LayoutPatchResult(
            status="failed",
            path=LAYOUT_PATH,
            message=f"Could not patch {LAYOUT_PATH} (not a regular file). "
                    f"Please add {PROVIDER_NAME} manually.",
        )

    if not target.exists():
        logger.info("%s not found, creating it", LAYOUT_PATH)
        write_generated_file(project_dir, generate_layout())
        return LayoutPatchResult(
            status="created",
            path=LAYOUT_PATH,
            message=f"Created {LAYOUT_PATH} with {PROVIDER_NAME}",
        )

    with open(target, encoding="utf-8", newline="") as f:
        source = f.read()
    crlf = "\r\n" in source

    if PROVIDER_NAME in source:
        logger.info("%s already references %s, skipping", LAYOUT_PATH, PROVIDER_NAME)
        return LayoutPatchResult(
            status="unchanged",
            path=LAYOUT_PATH,
            message=f"{PROVIDER_NAME} already present in {LAYOUT_PATH}",
        )

    try:
        patched = add_import(wrap_return_block(source.replace("\r\n", "\n")))
    except LayoutPatchError as e:
        logger.warning("Cannot patch %s: %s", LAYOUT_PATH, e)
        return LayoutPatchResult(
            status="failed",
            path=LAYOUT_PATH,
            message=f"Could not patch {LAYOUT_PATH} ({e}). "
                    f"Please add {PROVIDER_NAME} manually.",
        )

    if crlf:
        patched = patched.replace("\n", "\r\n")
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(patched)
    logger.info("Patched %s", LAYOUT_PATH)
    return LayoutPatchResult(
        status="patched",
        path=LAYOUT_PATH,
        message=f"Modified {LAYOUT_PATH} to include {PROVIDER_NAME}",
    )
