"""Texas non-judicial foreclosure timeline.

Milestones are fixed day offsets from the Notice of Default. Texas requires
at least 21 days' posted notice before the first-Tuesday auction; the
offsets below reflect a typical servicer schedule, not statutory minimums.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional

from homesaver.models.timeline import (
    ForeclosureTimeline,
    Milestone,
    MilestoneStatus,
    MilestoneUrgency,
    TimelineProgress,
)

CURRENT_WINDOW_DAYS = 3  # milestones this close count as "current"


class MilestoneTemplate(NamedTuple):
    id: str
    title: str
    days_from_notice: int
    description: str
    action_items: tuple[str, ...]
    urgency: MilestoneUrgency


MILESTONES: tuple[MilestoneTemplate, ...] = (
    MilestoneTemplate(
        id="notice-received",
        title="Notice of Default Received",
        days_from_notice=0,
        description="You received your first official notice that your mortgage is in default.",
        action_items=(
            "Read the entire notice carefully",
            "Note all important dates and deadlines",
            "Gather financial documents (pay stubs, bank statements, tax returns)",
            "Contact your mortgage servicer immediately",
        ),
        urgency=MilestoneUrgency.WARNING,
    ),
    MilestoneTemplate(
        id="contact-lender",
        title="Contact Your Lender (Days 1-7)",
        days_from_notice=7,
        description="Critical window to discuss options with your mortgage servicer.",
        action_items=(
            "Call your servicer's loss mitigation department",
            "Ask about forbearance and loan modification programs",
            "Request a repayment plan if you can catch up",
            "Document all conversations (date, time, representative name)",
        ),
        urgency=MilestoneUrgency.CRITICAL,
    ),
    MilestoneTemplate(
        id="seek-counseling",
        title="Seek Professional Help (Days 7-14)",
        days_from_notice=14,
        description="Get free advice from HUD-approved housing counselors.",
        action_items=(
            "Contact HUD-approved housing counselor (1-800-569-4287)",
            "Consult with a foreclosure attorney",
            "Review all your options (modification, short sale, cash sale)",
            "Create a hardship letter explaining your situation",
        ),
        urgency=MilestoneUrgency.WARNING,
    ),
    MilestoneTemplate(
        id="apply-assistance",
        title="Apply for Loss Mitigation (Days 14-30)",
        days_from_notice=30,
        description="Submit applications for loan modification or other assistance programs.",
        action_items=(
            "Complete loss mitigation application",
            "Submit all required financial documents",
            "Follow up weekly on application status",
            "Consider backup options if application is denied",
        ),
        urgency=MilestoneUrgency.WARNING,
    ),
    MilestoneTemplate(
        id="notice-acceleration",
        title="Notice of Acceleration (Days 60-90)",
        days_from_notice=75,
        description="Lender demands full loan balance be paid immediately.",
        action_items=(
            "Evaluate if you can pay off the loan or reinstate",
            "If not, seriously consider selling your home",
            "Request a fast cash offer",
            "Explore short sale with your lender's approval",
        ),
        urgency=MilestoneUrgency.CRITICAL,
    ),
    MilestoneTemplate(
        id="notice-sale-posted",
        title="Notice of Sale Posted (Day 90-120)",
        days_from_notice=105,
        description="Property is officially posted for foreclosure auction (21 days' notice required).",
        action_items=(
            "You still have time to sell or reinstate",
            "Request an immediate cash offer (close in 7-10 days)",
            "File for bankruptcy only as last resort (consult attorney)",
            "Start planning for relocation if necessary",
        ),
        urgency=MilestoneUrgency.CRITICAL,
    ),
    MilestoneTemplate(
        id="foreclosure-sale",
        title="Foreclosure Sale Date (Day 120+)",
        days_from_notice=126,
        description="Property will be sold at public auction at the county courthouse.",
        action_items=(
            "Last chance to reinstate by paying past-due amounts",
            "Property sold to highest bidder at auction",
            "You may still be able to negotiate with new owner",
            "Prepare to vacate the property",
        ),
        urgency=MilestoneUrgency.CRITICAL,
    ),
)


def milestone_status(milestone_date: date, today: date) -> MilestoneStatus:
    days_away = (milestone_date - today).days
    if days_away < 0:
        return MilestoneStatus.PAST
    if days_away <= CURRENT_WINDOW_DAYS:
        return MilestoneStatus.CURRENT
    return MilestoneStatus.UPCOMING


def build_timeline(notice_date: date, today: Optional[date] = None) -> ForeclosureTimeline:
    """Lay out every foreclosure milestone from the Notice of Default date.

    Args:
        notice_date: Date the homeowner received the Notice of Default.
        today: Reference date for milestone status (defaults to date.today()).
    """
    as_of = today or date.today()
    milestones = []
    for tpl in MILESTONES:
        when = notice_date + timedelta(days=tpl.days_from_notice)
        milestones.append(
            Milestone(
                id=tpl.id,
                title=tpl.title,
                date=when,
                days_from_notice=tpl.days_from_notice,
                description=tpl.description,
                action_items=tpl.action_items,
                urgency=tpl.urgency,
                status=milestone_status(when, as_of),
            )
        )
    return ForeclosureTimeline(notice_date=notice_date, as_of=as_of, milestones=tuple(milestones))


def compute_progress(
    timeline: ForeclosureTimeline,
    completed: Iterable[tuple[str, int]],
) -> TimelineProgress:
    """Count completed action items across the timeline.

    `completed` holds (milestone_id, action_index) pairs. Pairs that do not
    name an action on this timeline are ignored.
    """
    valid = {
        (m.id, idx)
        for m in timeline.milestones
        for idx in range(len(m.action_items))
    }
    done = valid & set(completed)
    total = len(valid)
    if total == 0:
        return TimelineProgress(total_actions=0, completed_actions=0, completion_pct=0)

    pct = (Decimal(len(done)) * 100 / total).quantize(Decimal("1"), ROUND_HALF_UP)
    return TimelineProgress(
        total_actions=total,
        completed_actions=len(done),
        completion_pct=int(pct),
    )
