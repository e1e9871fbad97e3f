from pathlib import PurePosixPath
from urllib.parse import urlsplit

NO_HIGHLIGHT = "ansi"

_EXTENSION_LANGUAGE_MAP = {
    ".bash": "bash",
    ".c": "c",
    ".cc": "cpp",
    ".cjs": "js",
    ".clj": "clojure",
    ".cpp": "cpp",
    ".cs": "cs",
    ".css": "css",
    ".cxx": "cpp",
    ".dart": "dart",
    ".diff": "diff",
    ".ex": "elixir",
    ".exs": "elixir",
    ".go": "go",
    ".h": "c",
    ".hh": "cpp",
    ".hpp": "cpp",
    ".hs": "haskell",
    ".htm": "html",
    ".html": "html",
    ".ini": "ini",
    ".java": "java",
    ".js": "js",
    ".json": "json",
    ".jsx": "jsx",
    ".kt": "kotlin",
    ".lua": "lua",
    ".markdown": "md",
    ".md": "md",
    ".mjs": "js",
    ".patch": "diff",
    ".php": "php",
    ".pl": "perl",
    ".ps1": "powershell",
    ".py": "py",
    ".r": "r",
    ".rb": "rb",
    ".rs": "rs",
    ".scala": "scala",
    ".scss": "scss",
    ".sh": "sh",
    ".sql": "sql",
    ".swift": "swift",
    ".toml": "toml",
    ".ts": "ts",
    ".tsx": "tsx",
    ".vue": "vue",
    ".xml": "xml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".zig": "zig",
    ".zsh": "zsh",
}

_FILENAME_LANGUAGE_MAP = {
    "dockerfile": "dockerfile",
    "makefile": "makefile",
    "cmakelists.txt": "cmake",
}


def resolve_file_language(path: str) -> str:
    """Return the code-block language tag for a file path or URL.

    Unknown or missing extensions resolve to ``"ansi"`` so the block is
    rendered without syntax highlighting.
    """
    if "://" in path:
        path = urlsplit(path).path
    file_path = PurePosixPath(path)
    name = file_path.name.lower()
    if name in _FILENAME_LANGUAGE_MAP:
        return _FILENAME_LANGUAGE_MAP[name]
    return _EXTENSION_LANGUAGE_MAP.get(file_path.suffix.lower(), NO_HIGHLIGHT)
