"""
Version information for cmdhelp.

``cmdhelp --version`` and ``cmdhelp.__version__`` derive from the
constants below; the version in setup.py is PIP_VERSION of a main build.
A release build stamps BUILD as ``<branch>.<count>.<commit>``; a plain
source checkout leaves it empty.

    0.3.0-beta                    base version (PHASE set)
    0.3.0-beta+main.7.5e1f0a2     full version (BUILD set)
    0.3.0b0                       pip version from a main build
    0.3.0b0.dev7                  pip version from any other branch
"""

MAJOR = 0
MINOR = 3
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", ...
BUILD = "main.7.5e1f0a2"

__app_name__ = "cmdhelp"

_PEP440_TAGS = (("alpha", "a"), ("beta", "b"), ("rc", "rc"))


def get_base_version():
    """Return MAJOR.MINOR.PATCH, with -PHASE when a phase is set."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    return f"{base}-{PHASE}" if PHASE else base


def get_version():
    """Return the base version plus build metadata, if any."""
    base = get_base_version()
    return f"{base}+{BUILD}" if BUILD else base


def _pep440_phase():
    if not PHASE:
        return ""
    for name, tag in _PEP440_TAGS:
        if PHASE.startswith(name):
            return tag + (PHASE[len(name):] or "0")
    return PHASE


def get_pip_version():
    """
    Return a PEP 440 compliant version for pip/setuptools.

    Builds from a branch other than main become ``.devN`` pre-releases,
    N being the build count.
    """
    version = f"{MAJOR}.{MINOR}.{PATCH}{_pep440_phase()}"
    if not BUILD:
        return version
    branch, _, rest = BUILD.partition(".")
    if branch == "main":
        return version
    count = rest.split(".")[0]
    return f"{version}.dev{count if count.isdigit() else 0}"


__version__ = get_version()
VERSION = __version__
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
