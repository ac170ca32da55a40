from html import escape
from typing import Optional

import markdown

markdown_extensions = ['extra', 'sane_lists', 'nl2br']

email_template = """\
<!doctype html>
<html>
<head><meta charset="utf-8" /></head>
<body style="margin: 0; padding: 24px; font-family: Helvetica, Arial, sans-serif; color: #1f2328;">
<table role="presentation" width="100%" style="max-width: 680px; margin: 0 auto;">
<tr><td>{heading}</td></tr>
<tr><td style="font-size: 14px; line-height: 1.6;">{body}</td></tr>
<tr><td style="padding-top: 16px; border-top: 1px solid #e5e7eb; font-size: 12px; color: #6b7280;">{footer}</td></tr>
</table>
</body>
</html>
"""

footer = 'Shared with Meeting Recap.'


def render_summary_html(summary: str, title: Optional[str] = None) -> str:
    """Renders a markdown summary as the HTML body of the share email."""

    body = markdown.markdown((summary or '').strip(), extensions=markdown_extensions, output_format='html5')
    heading = f'<h2 style="margin: 0 0 12px; font-size: 18px;">{escape(title)}</h2>' if title else ''

    return email_template.format(heading=heading, body=body, footer=footer)


__all__ = ['render_summary_html']
