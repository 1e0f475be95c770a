"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
For configurable values, see models.py.
"""

# =============================================================================
# Header Identifiers
# =============================================================================
# Ids accepted in ``headers.file_path_headers`` and
# ``headers.code_structure_headers``. Order here is documentation order only;
# rendering follows the order configured by the user.

FILE_PATH_HEADER_IDS: tuple[str, ...] = (
    "source",
    "lines",
    "language",
    "workspace",
    "file",
    "path",
    "time",
    "repoLink",
    "gitBranch",
    "gitShortSha",
    "gitLastCommitTime",
)
"""Headers describing where the snippet came from."""

CODE_STRUCTURE_HEADER_IDS: tuple[str, ...] = ("function", "class", "module")
"""Headers describing what encloses the snippet."""

DEFAULT_FILE_PATH_HEADERS: tuple[str, ...] = ("source", "lines")

# =============================================================================
# Paths
# =============================================================================

CONFIG_DIR_NAME = ".codecopy"
"""Per-repository config directory."""

CONFIG_FILE_NAME = "config.yaml"
