import shutil

from ..errors import ConfigError


def require_program(name: str) -> str:
    """Return `name` if it is an executable on PATH, else raise ConfigError."""
    if shutil.which(name) is None:
        raise ConfigError(f"Program ({name}) was not found in the PATH.")
    return name


def require_programs(*names: str) -> None:
    # Keep it simple: confirm the collaborator executables exist.
    for name in names:
        require_program(name)
