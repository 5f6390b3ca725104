"""
Extension-to-category classification.

The category table is fixed for the lifetime of the process. Each entry maps
a destination folder name to the set of lowercase extensions (without the
leading dot) that belong to it. Lookup scans the table in order and the first
match wins, so an extension listed twice resolves to the earlier category.
"""

from pathlib import PurePath

# Fallback category for extensions no table entry claims
OTHERS = "others"

CATEGORIES: tuple[tuple[str, frozenset[str]], ...] = (
    ("images", frozenset({
        "jpg", "jpeg", "png", "gif", "bmp", "tiff", "tif", "webp", "svg",
        "ico", "heic", "raw",
    })),
    ("documents", frozenset({
        "txt", "pdf", "doc", "docx", "odt", "rtf", "md", "xls", "xlsx",
        "ods", "csv", "ppt", "pptx", "odp", "epub",
    })),
    ("audio", frozenset({
        "mp3", "wav", "flac", "aac", "ogg", "m4a", "wma", "aiff",
    })),
    ("video", frozenset({
        "mp4", "mkv", "avi", "mov", "wmv", "flv", "webm", "m4v", "mpeg", "mpg",
    })),
    ("code", frozenset({
        "py", "js", "ts", "java", "c", "cpp", "h", "hpp", "cs", "go", "rs",
        "rb", "php", "html", "css", "json", "xml", "yaml", "yml", "toml",
        "sh", "sql",
    })),
    ("archives", frozenset({
        "zip", "tar", "gz", "bz2", "xz", "7z", "rar", "tgz",
    })),
)


def get_extension(path: PurePath | str) -> str | None:
    """
    Return the extension of a file name, without the dot.

    Follows ``PurePath.suffix``: ``"a."`` and ``".bashrc"`` have no extension.

    Args:
        path: A file path or bare file name.

    Returns:
        The text after the last '.', or None if the name has no extension.
    """
    suffix = PurePath(path).suffix
    if not suffix:
        return None
    return suffix[1:]


def classify(
    path: PurePath | str,
    table: tuple[tuple[str, frozenset[str]], ...] = CATEGORIES
) -> str | None:
    """
    Map a file to the name of its category folder.

    Args:
        path: The file to classify. Only its name is inspected.
        table: Ordered (category, extensions) pairs.

    Returns:
        The first category whose extension set contains the file's
        lowercased extension, OTHERS if none does, or None when the file
        has no extension and should be left alone.
    """
    ext = get_extension(path)
    if ext is None:
        return None

    ext = ext.lower()
    for name, extensions in table:
        if ext in extensions:
            return name
    return OTHERS

