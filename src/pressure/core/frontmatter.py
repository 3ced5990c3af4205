"""Front matter extraction: split a file into a YAML header and a markdown body"""

from dataclasses import dataclass

import yaml

from pressure.core.value import Value
from pressure.errors import FrontMatterTypeError, ParseError


DELIMITER = "---"


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that leaves unquoted timestamps as the text written."""
    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


@dataclass(frozen=True)
class ParsedMarkdown:
    frontmatter: Value
    body: str


def parse_frontmatter(markdown_text: str) -> ParsedMarkdown:
    """Return the front matter mapping and the remaining body.

    The header exists only when the first line is exactly '---' and a later
    line is exactly '---'; otherwise the whole text is the body.
    """
    lines = markdown_text.splitlines()
    if not lines or lines[0] != DELIMITER:
        return ParsedMarkdown(frontmatter=Value.mapping(), body="\n".join(lines))

    try:
        end_idx = lines.index(DELIMITER, 1)
    except ValueError:
        return ParsedMarkdown(frontmatter=Value.mapping(), body="\n".join(lines))

    fm_text = "\n".join(lines[1:end_idx])
    try:
        fm = yaml.load(fm_text, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML frontmatter: {e}") from e
    if fm is None:
        fm = {}
    if not isinstance(fm, dict):
        raise FrontMatterTypeError(f"Frontmatter must be a YAML mapping, got {type(fm).__name__}")

    return ParsedMarkdown(frontmatter=Value.from_python(fm), body="\n".join(lines[end_idx + 1:]))
