"""Erzeugung von Studienplänen: Builder (Neuaufbau) und Prototype (Klon)."""

from .builder import PlanValidationError, StudyPlanBuilder
from .prototype import (
    clone_group,
    clone_schedule,
    clone_study_plan,
    clone_subject,
    clone_teacher,
)

__all__ = [
    "PlanValidationError",
    "StudyPlanBuilder",
    "clone_group",
    "clone_schedule",
    "clone_study_plan",
    "clone_subject",
    "clone_teacher",
]
