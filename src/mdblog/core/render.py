"""Default rendering collaborator: markdown body -> HTML, dates -> display text"""

from markdown_it import MarkdownIt

from mdblog.core.utils.dates import parse_instant


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_html(body: str, preset: str = 'commonmark') -> str:
    """Render a post body to HTML. The body is passed through untouched otherwise."""
    return _make_parser(preset).render(body)


def format_date(value: str) -> str:
    """'2024-01-01' -> 'January 1, 2024'."""
    dt = parse_instant(value)
    return f"{dt:%B} {dt.day}, {dt.year}"
