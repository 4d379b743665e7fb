"""Foreclosure timeline routes."""

from datetime import date

from fastapi import APIRouter, Depends

from homesaver.api.deps import get_today
from homesaver.api.schemas import (
    MilestoneResponse,
    TimelineProgressResponse,
    TimelineRequest,
    TimelineResponse,
)
from homesaver.engine.timeline import build_timeline, compute_progress

router = APIRouter(prefix="/api/v1/timeline", tags=["timeline"])


@router.post("", response_model=TimelineResponse)
async def calculate_timeline(req: TimelineRequest, today: date = Depends(get_today)):
    """Notice of Default date → every milestone up to the auction, with progress."""
    timeline = build_timeline(req.notice_date, today=today)
    progress = compute_progress(
        timeline,
        ((a.milestone_id, a.action_index) for a in req.completed_actions),
    )

    return TimelineResponse(
        notice_date=timeline.notice_date,
        as_of=timeline.as_of,
        sale_date=timeline.sale_date,
        days_until_sale=timeline.days_until_sale,
        milestones=[
            MilestoneResponse(
                id=m.id,
                title=m.title,
                date=m.date,
                days_from_notice=m.days_from_notice,
                description=m.description,
                action_items=list(m.action_items),
                urgency=m.urgency,
                status=m.status,
            )
            for m in timeline.milestones
        ],
        progress=TimelineProgressResponse(
            total_actions=progress.total_actions,
            completed_actions=progress.completed_actions,
            completion_pct=progress.completion_pct,
        ),
    )
