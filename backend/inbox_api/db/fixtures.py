"""
Built-in demo inbox served when no MAILS_SOURCE_PATH is configured.
Dates are offsets from process start, so the list is newest first for the lifetime of the process.
Month offsets are approximate: one month is a fixed 30 days (MONTH), not a calendar month.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from inbox_api.schemas.mail import Mail

AVATAR_URL = "https://i.pravatar.cc/128?u={}"

# Fixed-length month used for the older mails
MONTH = timedelta(days=30)


def to_iso_z(dt: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix (2024-01-01T00:00:00.000Z)."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _sender(name: str, avatar_id: int | None = None) -> dict:
    sender = {"name": name, "email": name.lower().replace(" ", ".") + "@example.com"}
    if avatar_id is not None:
        sender["avatar"] = {"src": AVATAR_URL.format(avatar_id)}
    return sender


# (id, sender, subject, body, age, unread)
_RAW_MAILS: list[tuple[int, dict, str, str, timedelta, bool]] = [
    (
        1,
        _sender("Alex Smith", 1),
        "Meeting Schedule: Q1 Marketing Strategy Review",
        "Dear Team,\n\nA reminder that the Q1 Marketing Strategy meeting is tomorrow at 10 AM EST "
        "in Conference Room A.\n\nAgenda:\n- Q4 Performance Review\n- New Campaign Proposals\n"
        "- Budget Allocation for Q2\n- Team Resource Planning\n\nBest regards,\nAlex Smith\n"
        "Senior Marketing Director",
        timedelta(0),
        False,
    ),
    (
        2,
        _sender("Jordan Brown", 2),
        "RE: Project Phoenix - Sprint 3 Update",
        "Hi team,\n\nSprint 3 status:\n- User authentication module completed\n"
        "- Payment integration at 80%\n- API documentation pending review\n\n"
        "Code coverage is at 94%. Let's discuss blockers in tomorrow's stand-up.\n\n"
        "Regards,\nJordan",
        timedelta(minutes=7),
        True,
    ),
    (
        3,
        _sender("Taylor Green", 3),
        "Lunch Plans",
        "Hi there!\n\nWould you like to grab lunch this Friday? There's a new Mexican place "
        'downtown called "La Casa" I have been wanting to try. Would 12:30 PM work?\n\n'
        "Best,\nTaylor",
        timedelta(hours=3),
        True,
    ),
    (
        4,
        _sender("Morgan White", 4),
        "New Proposal: Project Horizon",
        "Hi team,\n\nThe proposal for Project Horizon is on the shared drive. It covers objectives, "
        "team structure, timeline, budget and risk assessment.\n\nPlease send feedback by EOD "
        "Friday so I can present it to the steering committee next week.\n\nMorgan White\n"
        "Senior Project Manager",
        timedelta(days=1),
        False,
    ),
    (
        5,
        _sender("Casey Gray"),
        "Updated: San Francisco Conference Trip Itinerary",
        "Dear [Name],\n\nYour confirmed itinerary:\n\nFlight AA 1234, JFK 09:30 AM to SFO 12:45 PM, "
        "March 15\nHotel: Marriott San Francisco, March 15-18\n\nLet me know if you need any "
        "changes.\n\nBest regards,\nCasey Gray\nTravel Coordinator",
        timedelta(days=1),
        False,
    ),
    (
        6,
        _sender("Jamie Johnson"),
        "Q1 2024 Financial Performance Review",
        "Dear Leadership Team,\n\nQ1 highlights:\n- Revenue: $12.4M (+15% YoY)\n"
        "- Operating Expenses: $8.2M (-3% vs. budget)\n- Net Profit Margin: 18.5%\n\n"
        "Detailed review on Thursday at 2 PM EST.\n\nJamie Johnson\nChief Financial Officer",
        timedelta(days=2),
        False,
    ),
    (
        7,
        _sender("Riley Davis", 7),
        "[Mandatory] New DevOps Tools Training Session",
        "Hello Development Team,\n\nMandatory DevOps toolkit training next Tuesday, 10:00 AM - "
        "12:30 PM EST, on Zoom. We'll cover CI/CD pipeline improvements, container optimization "
        "and cluster management.\n\nPlease complete the pre-training survey beforehand.\n\n"
        "Riley Davis\nDevOps Lead",
        timedelta(days=2),
        False,
    ),
    (
        8,
        _sender("Kelly Wilson", 8),
        "🎉 Happy Birthday!",
        "Dear [Name],\n\nOn behalf of the entire team, happy birthday! Join us in the break room "
        "at 3 PM for cake.\n\nBest wishes,\nKelly & The HR Team",
        timedelta(days=2),
        True,
    ),
    (
        9,
        _sender("Drew Moore"),
        "Website Redesign Feedback Request - Phase 2",
        "Hi there,\n\nPhase 2 of the website redesign is on staging. Please review the product "
        "catalog, search, user dashboard and mobile navigation and send feedback by EOD "
        "Friday.\n\nThanks in advance,\nDrew Moore\nUX Design Lead",
        timedelta(days=5),
        False,
    ),
    (
        10,
        _sender("Jordan Taylor"),
        "Corporate Wellness Program - Membership Renewal",
        "Dear Valued Member,\n\nYour wellness program membership renews on April 1st. Renew early "
        "for a 15% discount and three complimentary personal training sessions.\n\n"
        "Stay healthy!\nJordan Taylor\nCorporate Wellness Coordinator",
        timedelta(days=5),
        False,
    ),
    (
        11,
        _sender("Morgan Anderson"),
        "Important: Updates to Your Corporate Insurance Policy",
        "Dear Employee,\n\nOur corporate insurance policy changes next quarter: lower deductibles, "
        "extended mental health coverage and a new telehealth option. Open enrollment starts "
        "next month.\n\nMorgan Anderson\nBenefits Specialist",
        timedelta(days=12),
        True,
    ),
    (
        12,
        _sender("Casey Thomas"),
        '📚 March Book Club Meeting: "The Great Gatsby"',
        "Hello Book Lovers,\n\nThis month we discuss \"The Great Gatsby\". We meet Thursday at "
        "6 PM in the library lounge. Snacks provided.\n\nHappy reading!\nCasey Thomas",
        MONTH,
        False,
    ),
    (
        13,
        _sender("Jamie Jackson"),
        "🍳 Company Cookbook Project - Recipe Submission Reminder",
        "Hi everyone,\n\nA reminder to submit your favourite recipe for the company cookbook by the "
        "end of the month. Photos are welcome!\n\nCheers,\nJamie Jackson",
        MONTH,
        False,
    ),
    (
        14,
        _sender("Riley White"),
        "🧘‍♀️ Updated Corporate Wellness Schedule - Spring 2024",
        "Hi team,\n\nThe spring wellness schedule is out: morning yoga on Mondays and Wednesdays, "
        "meditation on Fridays at lunch.\n\nRiley White\nWellness Program Coordinator",
        MONTH,
        False,
    ),
    (
        15,
        _sender("Kelly Harris"),
        '📚 Book Launch Event: "Digital Transformation in the Modern Age"',
        "Dear colleagues,\n\nYou're invited to the launch of \"Digital Transformation in the Modern "
        "Age\" next Thursday at 7 PM, with a Q&A and book signing.\n\nKelly Harris\n"
        "Events Coordinator",
        MONTH,
        False,
    ),
    (
        16,
        _sender("Drew Martin"),
        "🚀 TechCon 2024: Early Bird Registration Now Open",
        "Hello Tech Enthusiasts,\n\nEarly bird registration for TechCon 2024 is open, with 30% off "
        "until the end of the month. Talks cover AI, cloud architecture and security.\n\n"
        "Drew Martin\nTechCon Organizing Committee",
        MONTH + timedelta(days=4),
        False,
    ),
    (
        17,
        _sender("Alex Thompson"),
        "🎨 Modern Perspectives: Contemporary Art Exhibition",
        "Dear Art Enthusiasts,\n\nJoin us for the opening night of Modern Perspectives this Friday "
        "at 6 PM at the City Gallery.\n\nAlex Thompson\nGallery Curator",
        MONTH + timedelta(days=15),
        False,
    ),
    (
        18,
        _sender("Jordan Garcia"),
        '🤝 Industry Networking Event: "Connect & Innovate 2024"',
        "Dear Professional,\n\nConnect & Innovate 2024 brings together industry leaders for an "
        "evening of panels and networking. RSVP by next Friday.\n\nJordan Garcia\n"
        "Events Director",
        MONTH + timedelta(days=18),
        False,
    ),
    (
        19,
        _sender("Taylor Rodriguez"),
        "🌟 Community Service Day - Volunteer Opportunities",
        "Hi everyone,\n\nCommunity Service Day is coming up. Sign up for the food bank, park "
        "cleanup or the school reading program.\n\nThank you!\nTaylor Rodriguez\n"
        "Community Outreach Coordinator",
        MONTH + timedelta(days=25),
        False,
    ),
    (
        20,
        _sender("Morgan Lopez"),
        "🚗 Vehicle Maintenance Reminder: 30,000 Mile Service",
        "Dear Vehicle Owner,\n\nYour vehicle is due for its 30,000 mile service: oil change, tire "
        "rotation, brake inspection and fluid top-up. Book online or call us.\n\n"
        "Morgan Lopez\nService Advisor",
        2 * MONTH,
        False,
    ),
]


def build_default_mails(now: datetime | None = None) -> tuple[Mail, ...]:
    """Materialize the demo inbox relative to `now` (defaults to current UTC time)."""
    now = now or datetime.now(timezone.utc)
    mails = []
    for mail_id, sender, subject, body, age, unread in _RAW_MAILS:
        data = {"id": mail_id, "from": sender, "subject": subject, "body": body, "date": to_iso_z(now - age)}
        if unread:
            data["unread"] = True
        mails.append(Mail.model_validate(data))
    return tuple(mails)


DEFAULT_MAILS: tuple[Mail, ...] = build_default_mails()
