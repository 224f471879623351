"""
Tests for the Redux boilerplate generators and the scaffold writer.

Generators are pure; writer tests use tmp_path.
"""

from pathlib import Path

import pytest

from redux_scaffold.core.models.template import GeneratedFile
from redux_scaffold.core.services.generators.layout import (
    IMPORT_STATEMENT,
    LAYOUT_PATH,
    generate_layout,
)
from redux_scaffold.core.services.generators.redux import (
    PROVIDER_PATH,
    SLICE_PATH,
    STORE_PATH,
    generate_redux_files,
)
from redux_scaffold.core.services.scaffold_writer import (
    FileExistsSkip,
    write_all,
    write_generated_file,
)


# ═══════════════════════════════════════════════════════════════════
#  Generators
# ═══════════════════════════════════════════════════════════════════


class TestGenerateReduxFiles:
    def test_paths_in_write_order(self):
        paths = [f.path for f in generate_redux_files()]
        assert paths == [SLICE_PATH, STORE_PATH, PROVIDER_PATH]
        assert paths == [
            "src/app/redux/features/demo/demoSlice.js",
            "src/app/redux/store.js",
            "src/app/redux/provider.jsx",
        ]

    def test_all_overwrite(self):
        assert all(f.overwrite for f in generate_redux_files())

    def test_slice_exports_actions_and_reducer(self):
        slice_file = generate_redux_files()[0]
        assert "createSlice" in slice_file.content
        assert "export const { increment, decrement }" in slice_file.content
        assert "export default demoSlice.reducer;" in slice_file.content

    def test_store_wires_demo_reducer(self):
        store = generate_redux_files()[1]
        assert "configureStore" in store.content
        assert "./features/demo/demoSlice" in store.content
        assert "demo: demoReducer" in store.content

    def test_provider_is_client_component(self):
        provider = generate_redux_files()[2]
        assert provider.content.startswith('"use client";')
        assert "export function ReduxProvider" in provider.content
        assert 'from "./store"' in provider.content

    def test_provider_keeps_variant_exports(self):
        content = generate_redux_files()[2].content
        assert "export const SimpleReduxProvider = ReduxProvider;" in content
        assert "export const OptimizedReduxProvider = ReduxProvider;" in content
        assert content.rstrip().endswith("export default OptimizedReduxProvider;")


class TestGenerateLayout:
    def test_fresh_layout(self):
        layout = generate_layout()
        assert layout.path == LAYOUT_PATH
        assert layout.content.startswith(IMPORT_STATEMENT)
        assert "<ReduxProvider>" in layout.content
        assert "</ReduxProvider>" in layout.content
        assert layout.content.index("<ReduxProvider>") < layout.content.index("<html")


# ═══════════════════════════════════════════════════════════════════
#  Writer
# ═══════════════════════════════════════════════════════════════════


class TestWriteGeneratedFile:
    def test_creates_parent_directories(self, tmp_path: Path):
        target = write_generated_file(
            tmp_path, GeneratedFile(path="a/b/c/file.js", content="x;\n"),
        )
        assert target == tmp_path / "a" / "b" / "c" / "file.js"
        assert target.read_text() == "x;\n"

    def test_overwrite_false_refuses(self, tmp_path: Path):
        (tmp_path / "keep.js").write_text("mine")
        with pytest.raises(FileExistsSkip):
            write_generated_file(
                tmp_path, GeneratedFile(path="keep.js", content="theirs", overwrite=False),
            )
        assert (tmp_path / "keep.js").read_text() == "mine"

    def test_filesystem_errors_propagate(self, tmp_path: Path):
        # A file where a directory is needed
        (tmp_path / "src").write_text("not a directory")
        with pytest.raises(OSError):
            write_generated_file(tmp_path, generate_redux_files()[0])


class TestWriteAll:
    def test_idempotent(self, tmp_path: Path):
        write_all(tmp_path, generate_redux_files())
        first = {f.path: (tmp_path / f.path).read_bytes() for f in generate_redux_files()}

        write_all(tmp_path, generate_redux_files())
        second = {f.path: (tmp_path / f.path).read_bytes() for f in generate_redux_files()}

        assert first == second

    def test_destructive_overwrite(self, tmp_path: Path):
        slice_path = tmp_path / SLICE_PATH
        slice_path.parent.mkdir(parents=True)
        slice_path.write_text("// my hand-written reducer\nexport default 42;\n")

        write_all(tmp_path, generate_redux_files())

        assert slice_path.read_text() == generate_redux_files()[0].content

    def test_returns_written_paths(self, tmp_path: Path):
        paths = write_all(tmp_path, generate_redux_files())
        assert [p.relative_to(tmp_path).as_posix() for p in paths] == [
            SLICE_PATH, STORE_PATH, PROVIDER_PATH,
        ]
