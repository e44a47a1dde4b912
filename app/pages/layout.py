"""Shared page shell: head metadata, navigation bar, footer."""

from html import escape

from app.schemas.content import Navigation, SiteMetadata

_STYLE = """
    * { box-sizing: border-box; }
    body { font-family: system-ui, sans-serif; margin: 0; background: #0b1e3a; color: #f4efe6; }
    a { color: #ffb347; }
    header { display: flex; flex-wrap: wrap; gap: 1rem; align-items: center; justify-content: space-between;
             padding: 1rem 1.5rem; background: #07152a; }
    header .brand { font-weight: 700; letter-spacing: 0.08em; text-decoration: none; color: #fff; }
    header nav a { margin-right: 1rem; text-decoration: none; }
    header .event-info { font-size: 0.8rem; color: #b8c4d6; }
    .cta { display: inline-block; padding: 0.5rem 1rem; background: #ff6b35; color: #fff; border-radius: 4px;
           text-decoration: none; }
    main { max-width: 880px; margin: 0 auto; padding: 2rem 1.5rem; }
    h1 { font-size: clamp(1.75rem, 5vw, 2.5rem); margin: 0 0 0.5rem; }
    .subtitle { color: #b8c4d6; margin-top: 0; }
    .card { background: #13294b; border-radius: 8px; padding: 1rem 1.25rem; margin: 0.75rem 0; }
    .muted { color: #b8c4d6; font-size: 0.9rem; }
    .notice { padding: 0.75rem 1rem; border-radius: 6px; background: #1f5132; margin: 1rem 0; }
    .notice.error { background: #6b1f1f; }
    form label { display: block; margin-top: 0.75rem; }
    form input { width: 100%; padding: 0.5rem; border-radius: 4px; border: 1px solid #38507a; }
    form button { margin-top: 1rem; padding: 0.75rem 1.25rem; border: 0; border-radius: 4px;
                  background: #ff6b35; color: #fff; font-weight: 700; }
    .popular { border: 2px solid #ffb347; }
    footer { text-align: center; padding: 2rem; color: #6f819c; font-size: 0.8rem; }
"""


def _nav_bar(navigation: Navigation) -> str:
    links = "".join(
        f'<a href="{escape(item.href, quote=True)}">{escape(item.label)}</a>'
        for item in navigation.active_items
    )
    info = navigation.event_info
    return f"""
<header>
    <a class="brand" href="/">{escape(navigation.title)}</a>
    <nav>{links}</nav>
    <span class="event-info">{escape(info.date)} · {escape(info.venue)}</span>
    <a class="cta" href="{escape(navigation.cta_button.href, quote=True)}">{escape(navigation.cta_button.label)}</a>
</header>"""


def render_layout(
    metadata: SiteMetadata,
    navigation: Navigation,
    body: str,
    page_title: str | None = None,
) -> str:
    """Wrap a page body with head metadata and navigation."""
    title = f"{page_title} | {metadata.title}" if page_title else metadata.title
    og_image = (
        f'\n    <meta property="og:image" content="{escape(metadata.og_image, quote=True)}">'
        if metadata.og_image
        else ""
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <meta name="description" content="{escape(metadata.description, quote=True)}">
    <meta name="keywords" content="{escape(", ".join(metadata.keywords), quote=True)}">
    <meta property="og:title" content="{escape(metadata.title, quote=True)}">{og_image}
    <style>{_STYLE}</style>
</head>
<body>
{_nav_bar(navigation)}
<main>
{body}
</main>
<footer>{escape(navigation.title)}</footer>
</body>
</html>
"""
