import os

_SEPARATORS = os.sep + (os.altsep or "")


def join_path(parent: str, name: str) -> str:
    # A leading separator on name never escapes parent.
    return os.path.normpath(os.path.join(parent, name.lstrip(_SEPARATORS)))


def base_name(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip(_SEPARATORS)
    if not stripped:
        # a run of separators is the filesystem root itself
        return os.sep
    return os.path.basename(stripped)


def extension(name: str) -> str:
    # Suffix from the last dot of the final component, dot included.
    # Unlike os.path.splitext, a leading dot counts: ".bashrc" -> ".bashrc".
    idx = name.rfind(".")
    if idx < 0 or any(sep in name[idx:] for sep in _SEPARATORS):
        return ""
    return name[idx:]


def is_single_component(name: str) -> bool:
    if not name.strip() or name in (".", ".."):
        return False
    return not any(sep in name for sep in _SEPARATORS)
