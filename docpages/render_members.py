"""Shared helpers for member listings (properties, methods, enum members...)."""

from dataclasses import dataclass
from html import escape

from docpages.anchor_slug import anchor_slug
from docpages.doc_node import JsDoc
from docpages.html_codeblock import html_codeblock
from docpages.render_js_doc import is_deprecated, render_js_doc, render_tag


@dataclass(frozen=True)
class Member:
    """One entry in a member listing."""

    group: str  # e.g. "Properties"
    name: str
    signature: str
    js_doc: JsDoc | None = None
    flags: tuple[str, ...] = ()  # static/readonly/abstract/optional

    @property
    def anchor(self) -> str:
        return anchor_slug(self.group, self.name)


def group_members(members: list[Member]) -> list[tuple[str, list[Member]]]:
    """Group members by their group label, keeping first-seen order."""
    groups: dict[str, list[Member]] = {}
    for m in members:
        groups.setdefault(m.group, []).append(m)
    return list(groups.items())


def render_member(m: Member) -> list[str]:
    """Render a single member: anchor heading, flags, signature and doc."""
    badges = [render_tag(f, "gray") for f in m.flags]
    if is_deprecated(m.js_doc):
        badges.append(render_tag("deprecated", "gray"))
    parts = [
        f'<div class="member" id="{m.anchor}">',
        f'<h3><a href="#{m.anchor}">{escape(m.name)}</a>{" ".join(badges)}</h3>',
        html_codeblock("typescript", m.signature),
    ]
    doc = render_js_doc(m.js_doc, tags=["deprecated"], tags_with_doc=True)
    if doc:
        parts.append(doc)
    parts.append("</div>")
    return parts


def render_member_sections(members: list[Member]) -> str:
    """Render member groups as titled sections."""
    parts: list[str] = []
    for group, items in group_members(members):
        parts.append(f'<section id="{anchor_slug(group)}">')
        parts.append(f'<h2 class="section">{escape(group)}</h2>')
        for m in items:
            parts.extend(render_member(m))
        parts.append("</section>")
    return "\n".join(parts)


def render_member_toc(title: str, members: list[Member]) -> str:
    """Render a sidebar TOC linking every member, grouped."""
    if not members:
        return ""
    parts = ['<div class="toc">', f'<h3 class="toc-header">{escape(title)}</h3>']
    for group, items in group_members(members):
        parts.append(f'<h4><a href="#{anchor_slug(group)}">{escape(group)}</a></h4>')
        parts.append("<ul>")
        parts.extend(
            f'<li><a href="#{m.anchor}">{escape(m.name)}</a></li>' for m in items
        )
        parts.append("</ul>")
    parts.append("</div>")
    return "\n".join(parts)
