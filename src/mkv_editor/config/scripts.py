"""Script selection parsing.

Turns the ``--scripts`` command line value into a set of EditorScript.
Accepted forms: "all", "default", or a comma separated list of script
identifiers.
"""

from mkv_editor.config.exceptions import ConfigError
from mkv_editor.domain.enums import DEFAULT_SCRIPTS, EditorScript

ALL_SELECTION = "all"
DEFAULT_SELECTION = "default"


def parse_script_selection(selection: str | None) -> frozenset[EditorScript]:
    """Resolve a script selection string.

    Args:
        selection: "all", "default", a comma separated list of identifiers,
            or None (same as "default").

    Returns:
        The selected scripts.

    Raises:
        ConfigError: If an identifier is unknown or the list is empty.
    """
    raw = (selection or DEFAULT_SELECTION).strip()

    if raw == ALL_SELECTION:
        return frozenset(EditorScript)
    if raw == DEFAULT_SELECTION:
        return DEFAULT_SCRIPTS

    known = {script.value: script for script in EditorScript}
    selected: set[EditorScript] = set()
    unknown: list[str] = []
    for name in raw.split(","):
        name = name.strip()
        if not name:
            continue
        if name in known:
            selected.add(known[name])
        else:
            unknown.append(name)

    if unknown:
        raise ConfigError(
            f"Unknown script(s): {', '.join(unknown)}. "
            f"Valid scripts: {', '.join(s.value for s in EditorScript)}"
        )
    if not selected:
        raise ConfigError("No script selected")

    return frozenset(selected)
