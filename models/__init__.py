from models.subject import Modality, Subject
from models.teacher import Teacher
from models.schedule import Schedule, WeekDay
from models.group import CapacityError, Group
from models.study_plan import StudyPlan

__all__ = [
    "Modality",
    "Subject",
    "Teacher",
    "Schedule",
    "WeekDay",
    "CapacityError",
    "Group",
    "StudyPlan",
]
