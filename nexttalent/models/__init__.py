from nexttalent.models.profile import Profile
from nexttalent.models.job_posting import JobPosting
from nexttalent.models.application import Application
from nexttalent.models.interview_schedule import InterviewSchedule
from nexttalent.models.notification import Notification
from nexttalent.models.feedback import JobRejectionFeedback, RejectedSuggestion
from nexttalent.models.news_item import NewsItem
from nexttalent.models.saved_job import SavedJob
from nexttalent.models.review import Review

__all__ = [
    "Profile",
    "JobPosting",
    "Application",
    "InterviewSchedule",
    "Notification",
    "JobRejectionFeedback",
    "RejectedSuggestion",
    "NewsItem",
    "SavedJob",
    "Review",
]
