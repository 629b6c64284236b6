"""Top-level package for the dictation question toolkit.

Provides subpackages:
- dictation_toolkit.core – immutable models, payload schemas and codec
- dictation_toolkit.extractor – gap extraction from bracketed transcripts
- dictation_toolkit.scoring – similarity scoring, aggregation and feedback
- dictation_toolkit.question – question definition and response helpers
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("dictation-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
