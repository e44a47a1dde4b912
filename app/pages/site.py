"""Public page renderers.

Pure functions from content documents to HTML. Every piece of document
text is HTML-escaped; documents may come from the store, the fallback set,
or an unsaved admin preview.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from app.domain.enums import ArtistCategory, ContentId
from app.pages.layout import render_layout
from app.schemas.content import (
    Artist,
    ContentDocument,
    HomePage,
    LineupPage,
    Navigation,
    SchedulePage,
    SiteMetadata,
    TicketsPage,
)

_CATEGORY_HEADINGS: dict[ArtistCategory, str] = {
    ArtistCategory.HEADLINER: "Headliners",
    ArtistCategory.FEATURED: "Featured",
    ArtistCategory.OPENER: "Openers",
}


@dataclass(frozen=True)
class FormNotice:
    """Feedback shown above the registration form after a submit."""

    title: str
    message: str
    error: bool = False


@dataclass(frozen=True)
class FormValues:
    """Values echoed back into the form after a failed submit."""

    name: str = ""
    email: str = ""
    phone: str = ""


def _list_items(values: list[str]) -> str:
    return "".join(f"<li>{escape(v)}</li>" for v in values)


def _notice_html(notice: FormNotice | None) -> str:
    if notice is None:
        return ""
    css = "notice error" if notice.error else "notice"
    return (
        f'<div class="{css}" role="status"><strong>{escape(notice.title)}</strong>'
        f"<p>{escape(notice.message)}</p></div>"
    )


def render_home(
    home: HomePage,
    navigation: Navigation,
    metadata: SiteMetadata,
    notice: FormNotice | None = None,
    values: FormValues | None = None,
) -> str:
    """Landing page with the registration form."""
    values = values or FormValues()
    labels, placeholders = home.form_labels, home.form_placeholders
    details = home.event_details
    form_title = f"<h2>{escape(home.form_title)}</h2>" if home.form_title else ""
    body = f"""
<section>
    <h1>{escape(home.headline)}</h1>
    <p class="subtitle">{escape(home.subheadline)}</p>
    <p>{escape(home.description)}</p>
</section>
<section class="card">
    <strong>{escape(details.date)}</strong> · {escape(details.time)}<br>
    {escape(details.venue)}<br>
    <span class="muted">{escape(details.address)}</span>
</section>
<section class="card">
    {form_title}
    {_notice_html(notice)}
    <form method="post" action="/">
        <label for="name">{escape(labels.name)}</label>
        <input id="name" name="name" required value="{escape(values.name, quote=True)}"
               placeholder="{escape(placeholders.name, quote=True)}">
        <label for="email">{escape(labels.email)}</label>
        <input id="email" name="email" type="email" required value="{escape(values.email, quote=True)}"
               placeholder="{escape(placeholders.email, quote=True)}">
        <label for="phone">{escape(labels.phone)}</label>
        <input id="phone" name="phone" type="tel" value="{escape(values.phone, quote=True)}"
               placeholder="{escape(placeholders.phone, quote=True)}">
        <button type="submit">{escape(home.submit_button)}</button>
    </form>
    <ul class="muted">{_list_items(home.trust_builders)}</ul>
</section>"""
    return render_layout(metadata, navigation, body)


def _artist_card(artist: Artist) -> str:
    image = (
        f'<img src="{escape(artist.image, quote=True)}" alt="{escape(artist.name, quote=True)}" width="120">'
        if artist.image
        else ""
    )
    description = f"<p>{escape(artist.description)}</p>" if artist.description else ""
    return (
        f'<div class="card">{image}<h3>{escape(artist.name)}</h3>'
        f'<span class="muted">{escape(artist.time)}</span>{description}</div>'
    )


def render_lineup(lineup: LineupPage, navigation: Navigation, metadata: SiteMetadata) -> str:
    """Artists grouped by category, each group in list order."""
    sections = []
    for category, heading in _CATEGORY_HEADINGS.items():
        artists = [a for a in lineup.artists if a.category == category]
        if not artists:
            continue
        cards = "".join(_artist_card(a) for a in artists)
        sections.append(f"<section><h2>{heading}</h2>{cards}</section>")
    if not sections:
        sections.append('<p class="muted">Lineup coming soon.</p>')
    body = f"""
<h1>{escape(lineup.title)}</h1>
<p class="subtitle">{escape(lineup.subtitle)}</p>
{"".join(sections)}
<p class="muted">{escape(lineup.footer_text)}</p>"""
    return render_layout(metadata, navigation, body, page_title="Lineup")


def render_schedule(schedule: SchedulePage, navigation: Navigation, metadata: SiteMetadata) -> str:
    rows = "".join(
        f'<div class="card"><strong>{escape(e.time)}</strong> '
        f'{escape(e.icon or "")} {escape(e.title)}'
        f'<p class="muted">{escape(e.description)}</p></div>'
        for e in schedule.events
    )
    if not rows:
        rows = '<p class="muted">Schedule coming soon.</p>'
    notes = f'<ul class="muted">{_list_items(schedule.notes)}</ul>' if schedule.notes else ""
    body = f"""
<h1>{escape(schedule.title)}</h1>
<p class="subtitle">{escape(schedule.date)}</p>
{rows}
{notes}"""
    return render_layout(metadata, navigation, body, page_title="Schedule")


def _price(value: float) -> str:
    return f"${value:,.0f}" if float(value).is_integer() else f"${value:,.2f}"


def render_tickets(tickets: TicketsPage, navigation: Navigation, metadata: SiteMetadata) -> str:
    """Tiers in order, or a coming-soon note while sales are closed."""
    if tickets.tickets_enabled and tickets.tiers:
        tiers = []
        for tier in tickets.tiers:
            css = "card popular" if tier.popular else "card"
            badge = " <em>Most popular</em>" if tier.popular else ""
            status = ' <strong class="muted">Sold out</strong>' if tier.sold_out else ""
            tiers.append(
                f'<div class="{css}"><h3>{escape(tier.name)}{badge}</h3>'
                f"<p>{_price(tier.price)}{status}</p>"
                f"<ul>{_list_items(tier.features)}</ul></div>"
            )
        offer = "".join(tiers)
    else:
        offer = (
            '<div class="card"><h3>Tickets coming soon</h3>'
            '<p>Join the list on the <a href="/">home page</a> to hear first.</p></div>'
        )
    info = tickets.info_section
    contact = (
        f'<p class="muted">Questions? <a href="mailto:{escape(tickets.contact_email, quote=True)}">'
        f"{escape(tickets.contact_email)}</a></p>"
        if tickets.contact_email
        else ""
    )
    body = f"""
<h1>{escape(tickets.title)}</h1>
<p class="subtitle">{escape(tickets.subtitle)}</p>
{offer}
<section class="card"><h2>{escape(info.title)}</h2><ul>{_list_items(info.items)}</ul></section>
{contact}"""
    return render_layout(metadata, navigation, body, page_title="Tickets")


def render_preview(
    document: ContentDocument,
    documents: dict[ContentId, ContentDocument],
) -> str:
    """Render the page an (unsaved) document appears on.

    documents supplies the other documents; document replaces its own
    kind. Metadata and navigation previews show the home page.
    """
    docs = {**documents, document.content_id: document}
    metadata = docs[ContentId.SITE_METADATA]
    navigation = docs[ContentId.NAVIGATION]
    if document.content_id == ContentId.LINEUP:
        return render_lineup(docs[ContentId.LINEUP], navigation, metadata)
    if document.content_id == ContentId.SCHEDULE:
        return render_schedule(docs[ContentId.SCHEDULE], navigation, metadata)
    if document.content_id == ContentId.TICKETS:
        return render_tickets(docs[ContentId.TICKETS], navigation, metadata)
    return render_home(docs[ContentId.HOME], navigation, metadata)
