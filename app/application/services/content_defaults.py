"""Default and fallback content for the six singleton documents.

default_content() seeds a fresh installation. fallback_content() is the
static copy the public site renders when Firestore is unreachable or a
document has not been created yet.
"""

from app.domain.enums import ArtistCategory, ContentId
from app.schemas.content import (
    Artist,
    ContentDocument,
    EventDetails,
    FormFields,
    HomePage,
    InfoSection,
    LineupPage,
    LinkButton,
    NavEventInfo,
    Navigation,
    NavigationItem,
    ScheduleEvent,
    SchedulePage,
    SiteMetadata,
    SuccessMessage,
    TicketsPage,
    TicketTier,
)


def default_content() -> dict[ContentId, ContentDocument]:
    """Seed documents written by initialize_default_content."""
    metadata = SiteMetadata(
        title="San Diego Yacht Rock Festival 2025 | Liberty Station",
        description=(
            "San Diego's Premier Yacht Rock Festival - October 11, 2025 at Liberty "
            "Station. Featuring Yacht Rock Revue, Christopher Cross, and more smooth "
            "sailing sounds!"
        ),
        keywords=[
            "yacht rock",
            "festival",
            "san diego",
            "liberty station",
            "music festival",
            "2025",
            "christopher cross",
            "yacht rock revue",
            "smooth music",
        ],
    )
    home = HomePage(
        headline="Get Priority Access to San Diego Yacht Rock Festival Tickets",
        subheadline="Get On Board for San Diego's Smoothest Summer Festival",
        description=(
            "First access to tickets, lineup drops, and VIP upgrades, "
            "straight to your inbox."
        ),
        form_labels=FormFields(name="Name", email="Email ✅", phone="Cell Number 📱"),
        form_placeholders=FormFields(
            name="Captain Smooth",
            email="smooth@sailing.com",
            phone="(619) 555-YACHT",
        ),
        submit_button="🚢 Join the Captain's List",
        success_message=SuccessMessage(
            title="Welcome Aboard, Captain! ⛵",
            description="You're on the list! Check your inbox for exclusive updates.",
        ),
        trust_builders=[
            "✨ No spam. Just smooth sailing.",
            "🎯 You'll hear from us before the general public.",
        ],
        event_details=EventDetails(
            date="SAT OCT 11 • 2025",
            time="5PM - 10PM",
            venue="LIBERTY STATION : INGRAM PLAZA",
            address="2751 DEWEY RD SAN DIEGO CA 92106",
        ),
    )
    lineup = LineupPage(
        title="2025 LINEUP",
        subtitle="Smooth sounds all day long",
        artists=[
            Artist(id="1", name="Yacht Rock Revue", time="9:00 PM", category=ArtistCategory.HEADLINER, order=1),
            Artist(id="2", name="Christopher Cross", time="7:30 PM", category=ArtistCategory.HEADLINER, order=2),
            Artist(id="3", name="Player", time="6:30 PM", category=ArtistCategory.FEATURED, order=3),
            Artist(id="4", name="Ambrosia", time="5:45 PM", category=ArtistCategory.FEATURED, order=4),
            Artist(id="5", name="The Doobie Brothers Tribute", time="5:00 PM", category=ArtistCategory.OPENER, order=5),
        ],
        footer_text="More artists to be announced!",
    )
    schedule = SchedulePage(
        title="EVENT SCHEDULE",
        date="Saturday, October 11, 2025",
        events=[
            ScheduleEvent(id="1", time="4:00 PM", title="Gates Open", description="Welcome aboard! Get your wristbands and explore the festival grounds", icon="🚪", order=1),
            ScheduleEvent(id="2", time="4:30 PM", title="Food & Drink Service Begins", description="Tropical cocktails, craft beer, and delicious food from local vendors", icon="🍹", order=2),
            ScheduleEvent(id="3", time="5:00 PM", title="The Doobie Brothers Tribute", description="Opening act takes the stage", icon="🎸", order=3),
            ScheduleEvent(id="4", time="5:45 PM", title="Ambrosia", description="Smooth sounds continue", icon="🎵", order=4),
            ScheduleEvent(id="5", time="6:30 PM", title="Player", description="Keep the party going", icon="🎤", order=5),
            ScheduleEvent(id="6", time="7:30 PM", title="Christopher Cross", description="Sailing into the sunset", icon="⛵", order=6),
            ScheduleEvent(id="7", time="9:00 PM", title="Yacht Rock Revue", description="Headliner performance", icon="🌟", order=7),
            ScheduleEvent(id="8", time="10:00 PM", title="Festival Ends", description="Until next year, smooth sailors!", icon="🌙", order=8),
        ],
        notes=[
            "Schedule subject to change",
            "Re-entry allowed with wristband",
            "VIP areas open all day",
            "Merch booth open until 9:30 PM",
        ],
    )
    tickets = TicketsPage(
        title="GET YOUR TICKETS",
        subtitle="Limited availability - Book now!",
        tickets_enabled=False,
        tiers=[
            TicketTier(
                id="1",
                name="General Admission",
                price=75,
                features=[
                    "Festival entry",
                    "Access to all performances",
                    "Food & drink vendors",
                    "Festival merchandise",
                ],
                order=1,
            ),
            TicketTier(
                id="2",
                name="VIP Experience",
                price=150,
                features=[
                    "Everything in General Admission",
                    "VIP viewing area",
                    "Premium bar access",
                    "VIP restrooms",
                    "Commemorative laminate",
                ],
                popular=True,
                order=2,
            ),
            TicketTier(
                id="3",
                name="Captain's Table",
                price=250,
                features=[
                    "Everything in VIP",
                    "Meet & greet opportunities",
                    "Complimentary drinks",
                    "Exclusive merch package",
                    "Premium parking",
                ],
                order=3,
            ),
        ],
        info_section=InfoSection(
            title="Ticket Information",
            items=[
                "All sales are final",
                "Must be 21+ to purchase alcohol",
                "Children 12 and under free with adult ticket",
                "Group discounts available for 10+ tickets",
            ],
        ),
        contact_email="tickets@sdyachtrockfest.com",
    )
    navigation = Navigation(
        title="YACHT ROCK FESTIVAL",
        items=[
            NavigationItem(id="1", label="Lineup", href="/lineup", order=1),
            NavigationItem(id="2", label="Schedule", href="/schedule", order=2),
            NavigationItem(id="3", label="Tickets", href="/tickets", order=3),
        ],
        cta_button=LinkButton(label="Buy Tickets", href="/tickets"),
        event_info=NavEventInfo(
            date="SAT OCT 11, 2025 • 5PM - 10PM",
            venue="Liberty Station • Ingram Plaza",
        ),
    )
    docs: list[ContentDocument] = [metadata, home, lineup, schedule, tickets, navigation]
    return {doc.content_id: doc for doc in docs}


def fallback_content() -> dict[ContentId, ContentDocument]:
    """Static content for when the store is unreachable. Lists are left empty."""
    docs: list[ContentDocument] = [
        SiteMetadata(
            title="San Diego Yacht Rock Festival 2025 | Liberty Station",
            description="San Diego's Premier Yacht Rock Festival",
            keywords=["yacht rock", "festival", "san diego"],
        ),
        HomePage(
            headline="Get Priority Access to San Diego Yacht Rock Festival Tickets",
            subheadline="Get On Board for San Diego's Smoothest Summer Festival",
            description="First access to tickets, lineup drops, and VIP upgrades",
            form_labels=FormFields(name="Name", email="Email", phone="Phone"),
            form_placeholders=FormFields(
                name="Your name", email="your@email.com", phone="(619) 555-0000"
            ),
            submit_button="Join the Captain's List",
            success_message=SuccessMessage(
                title="Welcome Aboard!", description="You're on the list!"
            ),
            trust_builders=[
                "No spam. Just smooth sailing.",
                "You'll hear from us before the general public.",
            ],
            event_details=EventDetails(
                date="SAT OCT 11 • 2025",
                time="5PM - 10PM",
                venue="LIBERTY STATION",
                address="2751 DEWEY RD SAN DIEGO CA",
            ),
        ),
        LineupPage(
            title="2025 LINEUP",
            subtitle="Smooth sounds all day long",
            footer_text="More artists to be announced!",
        ),
        SchedulePage(title="EVENT SCHEDULE", date="Saturday, October 11, 2025"),
        TicketsPage(
            title="GET YOUR TICKETS",
            subtitle="Limited availability",
            info_section=InfoSection(title="Ticket Information"),
            contact_email="tickets@sdyachtrockfest.com",
        ),
        Navigation(
            title="YACHT ROCK FESTIVAL",
            cta_button=LinkButton(label="Buy Tickets", href="/tickets"),
            event_info=NavEventInfo(date="SAT OCT 11, 2025", venue="Liberty Station"),
        ),
    ]
    return {doc.content_id: doc for doc in docs}
