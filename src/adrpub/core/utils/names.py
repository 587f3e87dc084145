"""Document name helpers for source/output extensions"""


def strip_ext(name: str, ext: str) -> str:
    """Drop a trailing extension: 'a.md' -> 'a'. Other names are returned as-is."""
    return name[:-len(ext)] if ext and name.endswith(ext) else name


def swap_ext(name: str, source_ext: str, output_ext: str) -> str:
    """Replace the source extension with the output extension ('a.md' -> 'a.html')."""
    return strip_ext(name, source_ext) + output_ext
