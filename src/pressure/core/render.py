"""Markdown-to-HTML rendering via markdown-it"""

from typing import Callable

from markdown_it import MarkdownIt


Renderer = Callable[[str], str]

DEFAULT_PRESET = "gfm-like"


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def make_renderer(preset: str = DEFAULT_PRESET) -> Renderer:
    """Return a renderer bound to a preset; a fresh parser is built per call."""
    def render(text: str) -> str:
        return _make_parser(preset).render(text)
    return render


def render_markdown(text: str) -> str:
    return _make_parser(DEFAULT_PRESET).render(text)
