"""
ptf_publisher.mail.templates

Jinja2 rendering for the broadcast email body.
"""

from __future__ import annotations

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

DEFAULT_UPDATE_TEXT = (
    "A new monthly update has been posted. "
    "View the latest news and prayer requests using the link below."
)

_BROADCAST_HTML = """\
<div style="font-family: 'Outfit', sans-serif; max-width: 600px; margin: 0 auto; color: #2C3E50;">
    <h1 style="color: #D35400;">{{ site_name }}</h1>
    <h2>{{ title }}</h2>
    <div style="margin: 20px 0; line-height: 1.6;">
        {{ content or default_text }}
    </div>
    <a href="{{ post_url }}" style="background-color: #D35400; color: white; padding: 12px 24px; text-decoration: none; border-radius: 8px; display: inline-block;">View Monthly Update</a>
    <hr style="margin-top: 40px; border: none; border-top: 1px solid #eee;">
    <p style="font-size: 12px; color: #7F8C8D;">You are receiving this because you subscribed to {{ short_name }} updates.</p>
</div>
"""

_env = Environment(
    loader=DictLoader({"broadcast.html": _BROADCAST_HTML}),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
)


def post_url(origin: str, post_id: str) -> str:
    return f"{origin.rstrip('/')}/#post/{post_id}"


def render_broadcast(
    *,
    site_name: str,
    title: str,
    content: str | None,
    url: str,
) -> str:
    # "Project Timothy Fund Uganda" -> "Project Timothy Fund" in the footer.
    short_name = site_name.removesuffix(" Uganda")
    return _env.get_template("broadcast.html").render(
        site_name=site_name,
        short_name=short_name,
        title=title,
        content=content,
        default_text=DEFAULT_UPDATE_TEXT,
        post_url=url,
    )
