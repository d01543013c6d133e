"""Assembling the final HTML page from a template and a converted post."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import Config
from .timefmt import format_time, parse_time

log = logging.getLogger(__name__)

DISPLAY_LAYOUT = "02 Jan, 2006 at 15:04"
_MAX_DEPTH = 200


@dataclass
class FrontMatter:
    """Metadata gathered from the block at the top of a note."""

    tags: list[str] = field(default_factory=list)
    created: str = ""
    uploaded: str = ""
    updated: str = ""


@dataclass
class Post:
    """A converted note ready to be rendered."""

    front_matter: FrontMatter = field(default_factory=FrontMatter)
    title: str = ""
    body: str = ""
    preview: str = ""


class TemplateError(Exception):
    """Raised when a page template cannot be parsed or executed."""


def change_time_format(value: str, layout: str) -> str:
    """Reformat a time stamp written in ``layout`` for display."""
    return format_time(parse_time(value, layout), DISPLAY_LAYOUT)


def build_front_matter(front_matter: FrontMatter, layout: str) -> str:
    """Return the ``frontmatter`` template definition for a post."""
    uploaded = change_time_format(front_matter.uploaded, layout)
    updated = change_time_format(front_matter.updated, layout)
    tags = "".join(f'<div id="tag">{tag}</div>' for tag in front_matter.tags)
    return (
        '{{ define "frontmatter" }}<div id="times">'
        f'<p id="uploaded">uploaded: {uploaded}</p><p id="updated">updated: {updated}</p>'
        f'</div><br><div id="tagcontainer">tags:{tags}</div>{{{{ end }}}}'
    )


_ACTION = re.compile(r"\{\{(-\s)?(.*?)(\s-)?\}\}", re.S)
_DEFINE = re.compile(r'define\s+"([^"]*)"')
_CALL = re.compile(r'template\s+"([^"]*)"(?:\s+(\.))?')
_FIELD_PATH = re.compile(r"\.|(?:\.[A-Za-z_][A-Za-z0-9_]*)+")
_GO_FIELDS = {
    "FrontMatter": "front_matter", "Title": "title", "Body": "body", "Preview": "preview",
    "Tags": "tags", "Created": "created", "Uploaded": "uploaded", "Updated": "updated",
}

# Nodes are ("text", str), ("field", path) or ("call", name, pass_dot).
_Nodes = list[tuple]


def _parse(source: str) -> tuple[_Nodes, dict[str, _Nodes]]:
    """Parse source into its top-level nodes and its named definitions."""
    main: _Nodes = []
    definitions: dict[str, _Nodes] = {}
    current, defining = main, None
    position, trim_next = 0, False

    def add_text(text: str) -> None:
        if text:
            current.append(("text", text))

    for match in _ACTION.finditer(source):
        text = source[position:match.start()]
        text = text.lstrip() if trim_next else text
        add_text(text.rstrip() if match.group(1) else text)
        trim_next, position = bool(match.group(3)), match.end()
        action = match.group(2).strip()
        if action.startswith("/*") and action.endswith("*/"):
            continue
        if define := _DEFINE.fullmatch(action):
            if defining is not None:
                raise TemplateError("unexpected define inside define")
            defining, current = define.group(1), []
        elif action == "end":
            if defining is None:
                raise TemplateError("unexpected {{end}}")
            definitions[defining], defining, current = current, None, main
        elif call := _CALL.fullmatch(action):
            current.append(("call", call.group(1), bool(call.group(2))))
        elif _FIELD_PATH.fullmatch(action):
            current.append(("field", action))
        else:
            raise TemplateError(f"unsupported action: {{{{{action}}}}}")
    tail = source[position:]
    if "{{" in tail:
        raise TemplateError("unclosed action")
    add_text(tail.lstrip() if trim_next else tail)
    if defining is not None:
        raise TemplateError(f'unexpected end of input in define "{defining}"')
    return main, definitions


def _resolve(path: str, data: Any) -> Any:
    for name in path.split(".")[1:] if path != "." else []:
        attribute = _GO_FIELDS.get(name)
        if data is None or attribute is None or not hasattr(data, attribute):
            raise TemplateError(f"can't evaluate field {name}")
        data = getattr(data, attribute)
    return data


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(map(_stringify, value)) + "]"
    return str(value)


def _execute(nodes: _Nodes, data: Any, templates: dict[str, _Nodes], depth: int = 0) -> Any:
    if depth > _MAX_DEPTH:
        raise TemplateError("exceeded maximum template depth")
    for kind, *args in nodes:
        if kind == "text":
            yield args[0]
        elif kind == "field":
            yield html.escape(_stringify(_resolve(args[0], data)))
        else:
            name, pass_dot = args
            if name not in templates:
                raise TemplateError(f'no such template "{name}"')
            yield from _execute(templates[name], data if pass_dot else None, templates, depth + 1)


def render_page(template_text: str, post: Post, front_matter_block: str) -> str:
    """Render the page template with the post body and front matter definitions.

    Later sources replace earlier named definitions, and a later source with
    non-blank top-level content replaces the page itself.
    """
    main: _Nodes | None = None
    templates: dict[str, _Nodes] = {}
    for source in (template_text, post.body, front_matter_block):
        top, definitions = _parse(source)
        templates.update(definitions)
        blank = all(node[0] == "text" and not node[1].strip() for node in top)
        if main is None or not blank:
            main = top
    return "".join(_execute(main or [], post, templates))


def build(post: Post, config: Config) -> Path:
    """Render ``post`` into the site's posts directory and return the page path."""
    template_text = Path(config.template_file).read_text(encoding="utf-8")
    front_matter_block = build_front_matter(post.front_matter, config.date_time_format)
    page = render_page(template_text, post, front_matter_block)
    path = Path(config.site_dir + config.posts_dir + post.title.strip() + ".html")
    log.info("page path: %s", path)
    path.write_text(page, encoding="utf-8")
    return path