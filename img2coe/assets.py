from importlib import resources

from . import __version__


def render_template(name: str) -> str:
    """Read a file from the templates directory with {VERSION} filled in"""
    path = resources.files(__package__) / "templates" / name
    text = path.read_text(encoding="utf-8")
    return text.replace("{VERSION}", __version__)
