"""
apps.rate_tables.templatetags.rate_tables
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Template access to the public rate tables.

Usage::

    {% load rate_tables %}
    {% rate_table type="certificates" %}
    {{ page.body|expand_rate_tables }}
"""
from django import template
from django.utils.html import conditional_escape, escape
from django.utils.safestring import SafeData, mark_safe

from apps.rate_tables.domain import SELECT_ALL
from apps.rate_tables.services import get_store, load_rate_tables
from apps.rate_tables.services.embed import expand_rate_table_embeds, has_rate_table_embed
from apps.rate_tables.services.renderer import render_public

register = template.Library()


@register.simple_tag
def rate_table(**options):
    """Render the tables picked by ``type`` (``"all"`` when omitted)."""
    selector = str(options.get("type", SELECT_ALL))
    return mark_safe(render_public(load_rate_tables(get_store()), selector))


@register.filter(needs_autoescape=True)
def expand_rate_tables(content, autoescape=True):
    """Replace ``[rate_table ...]`` directives in *content* with tables."""
    if not has_rate_table_embed(str(content)):
        return conditional_escape(content) if autoescape else content

    escape_text = escape if autoescape and not isinstance(content, SafeData) else None
    return mark_safe(
        expand_rate_table_embeds(str(content), load_rate_tables(get_store()), escape_text)
    )
