"""Header line rendering.

Each header is a provider keyed by id; the configured id lists pick which
ones render and in which order. A provider whose value is empty renders
nothing, so unavailable git or context fields simply disappear.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from codecopy.context.models import ContextInfo
from codecopy.git.models import GitInfo
from codecopy.snippet.models import EditorContext, HeaderOpt

Formatter = Callable[[str, str], str]

# Labels whose values render as inline code in Markdown mode
_CODE_LABELS = frozenset({"Source", "Path"})


def make_formatter(plain_text: bool) -> Formatter:
    """``Label: value`` in plain mode, ``**Label:** value`` otherwise."""

    def fmt(label: str, value: str) -> str:
        v = "" if value is None else str(value)
        if not v.strip():
            return ""
        if plain_text:
            return f"{label}: {v}"
        md_value = f"`{v}`" if label in _CODE_LABELS else v
        return f"**{label}:** {md_value}"

    return fmt


def file_path_header_providers(
    ctx: EditorContext,
    git: GitInfo,
    fmt: Formatter,
    *,
    now: datetime | None = None,
) -> list[HeaderOpt]:
    timestamp = (now or datetime.now(UTC)).isoformat()
    return [
        HeaderOpt("source", lambda: fmt("Source", ctx.relative_path)),
        HeaderOpt("lines", lambda: fmt("Lines", f"{ctx.start_line}-{ctx.end_line}")),
        HeaderOpt("language", lambda: fmt("Language", ctx.lang)),
        HeaderOpt("workspace", lambda: fmt("Workspace", ctx.workspace_name)),
        HeaderOpt("file", lambda: fmt("File", ctx.file_name)),
        HeaderOpt("path", lambda: fmt("Path", ctx.file_path)),
        HeaderOpt("time", lambda: fmt("Time", timestamp)),
        HeaderOpt("repoLink", lambda: fmt("Repo", git.repo_url)),
        HeaderOpt("gitBranch", lambda: fmt("Branch", git.branch)),
        HeaderOpt("gitShortSha", lambda: fmt("SHA", git.short_sha)),
        HeaderOpt("gitLastCommitTime", lambda: fmt("Last Commit", git.commit_time)),
    ]


def code_structure_header_providers(info: ContextInfo, fmt: Formatter) -> list[HeaderOpt]:
    return [
        HeaderOpt("function", lambda: fmt("Function", info.function_name or "")),
        HeaderOpt("class", lambda: fmt("Class", info.class_name or "")),
        HeaderOpt("module", lambda: fmt("Module", info.module_name or "")),
    ]


def render_selected(ids: Sequence[str], providers: Sequence[HeaderOpt]) -> list[str]:
    """Render providers in ``ids`` order, skipping unknown ids and empty lines."""
    index = {p.id: p for p in providers}
    lines: list[str] = []
    for header_id in ids:
        opt = index.get(header_id)
        if opt is None:
            continue
        line = opt.render()
        if line:
            lines.append(line)
    return lines


def build_output(header_lines: Sequence[str], plain_text: bool, lang: str, body: str) -> str:
    """Headers separated by blank lines, then the body (fenced unless plain)."""
    header_block = "\n\n".join(header_lines) + "\n\n" if header_lines else ""
    body_block = body if plain_text else f"```{lang}\n{body}\n```\n"
    return header_block + body_block
