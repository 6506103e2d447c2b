"""
Jinja2 rendering of the go-import metadata page.

Field values are inserted verbatim (autoescape off): `body` is configured HTML,
and the meta contents are consumed by `go get`, which reads them literally.
"""
from __future__ import annotations

from jinja2 import Environment, StrictUndefined, TemplateError

from vanity.app.domain.errors import RenderError
from vanity.app.domain.models import MetadataRecord

META_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
<meta name="go-import" content="{{ record.pkg }} {{ record.vcs }} {{ record.repo }}"/>
{%- if record.source %}
<meta name="go-source" content="{{ record.pkg }} {{ record.source }} {{ record.source_dir }} {{ record.source_line }}"/>
{%- endif %}
{%- if record.doc %}
<meta http-equiv="refresh" content="0; url={{ record.doc }}"/>
{%- endif %}
</head>
<body>
{%- if record.body and not record.doc %}
{{ record.body }}
{%- endif %}
</body>
</html>
"""


class JinjaPageRenderer:
    def __init__(self, source: str = META_TEMPLATE) -> None:
        env = Environment(autoescape=False, keep_trailing_newline=True, undefined=StrictUndefined)
        self._template = env.from_string(source)

    def render(self, record: MetadataRecord) -> str:
        try:
            return self._template.render(record=record)
        except TemplateError as e:
            raise RenderError(f"failed to render metadata page for {record.pkg!r}: {e}") from e
