"""Module path inference from a file's location under a source root.

Used only when the syntax tree has no enclosing module declaration:
the file itself is the module.

Rules (Rust conventions shown; each pack supplies its own):
    src/lib.rs, src/main.rs   -> None (crate root)
    src/foo/mod.rs            -> "foo"
    src/foo/bar.rs            -> "foo::bar"
"""

from __future__ import annotations

from pathlib import PurePath

from codecopy.context.packs import ContextPack


def infer_module_from_path(file_path: str | PurePath, pack: ContextPack) -> str | None:
    """Module path for ``file_path`` relative to the last source-root segment."""
    normalized = str(file_path).replace("\\", "/")

    marker = f"/{pack.source_root}/"
    if normalized.startswith(marker[1:]):
        normalized = "/" + normalized
    root_index = normalized.rfind(marker)
    if root_index < 0:
        return None

    rel = normalized[root_index + len(marker) :]
    for ext in pack.source_extensions:
        if rel.endswith(ext):
            rel = rel[: -len(ext)]
            break

    if rel in pack.root_filenames:
        return None

    if pack.index_filename:
        index_suffix = f"/{pack.index_filename}"
        if rel.endswith(index_suffix):
            rel = rel[: -len(index_suffix)]

    if not rel:
        return None
    return pack.separator.join(rel.split("/"))
