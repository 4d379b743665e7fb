"""Foreclosure timeline data types."""

import datetime
from dataclasses import dataclass
from enum import Enum


class MilestoneUrgency(Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    SAFE = "safe"


class MilestoneStatus(Enum):
    PAST = "past"
    CURRENT = "current"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class Milestone:
    id: str
    title: str
    date: datetime.date
    days_from_notice: int
    description: str
    action_items: tuple[str, ...]
    urgency: MilestoneUrgency
    status: MilestoneStatus


@dataclass(frozen=True)
class ForeclosureTimeline:
    notice_date: datetime.date
    as_of: datetime.date
    milestones: tuple[Milestone, ...] = ()

    @property
    def sale_date(self) -> datetime.date:
        # The auction is always the last milestone
        return self.milestones[-1].date

    @property
    def days_until_sale(self) -> int:
        return (self.sale_date - self.as_of).days

    def get(self, milestone_id: str) -> Milestone | None:
        return next((m for m in self.milestones if m.id == milestone_id), None)


@dataclass(frozen=True)
class TimelineProgress:
    total_actions: int
    completed_actions: int
    completion_pct: int
