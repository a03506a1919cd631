from resume_learning.services.seeding import seed_chapters
from resume_learning.services.summary import pick_continue, progress_percentage, progress_status

__all__ = ["pick_continue", "progress_percentage", "progress_status", "seed_chapters"]
