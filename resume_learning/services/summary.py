"""Resume helpers: completion percentage, status label, and which chapter to continue."""

# Chapter completion: video is worth half, quiz the other half
VIDEO_WEIGHT = 50.0
QUIZ_WEIGHT = 50.0

STATUS_COMPLETED = "completed"
STATUS_QUIZ_IN_PROGRESS = "quiz_in_progress"
STATUS_VIDEO_IN_PROGRESS = "video_in_progress"
STATUS_NOT_STARTED = "not_started"


def progress_percentage(video_completed: bool, quiz_completed: bool) -> float:
    """Return 0, 50 or 100."""
    return (VIDEO_WEIGHT if video_completed else 0.0) + (QUIZ_WEIGHT if quiz_completed else 0.0)


def has_progress(progress) -> bool:
    return (
        progress.video_progress > 0
        or progress.quiz_progress > 0
        or progress.video_completed
        or progress.quiz_completed
    )


def progress_status(progress) -> str:
    """Status label; quiz activity wins over video activity."""
    if progress.chapter_completed:
        return STATUS_COMPLETED
    if progress.quiz_progress > 0 or progress.quiz_completed:
        return STATUS_QUIZ_IN_PROGRESS
    if has_progress(progress):
        return STATUS_VIDEO_IN_PROGRESS
    return STATUS_NOT_STARTED


def pick_continue(progress_list: list):
    """Most recently accessed record whose chapter is not completed, or None."""
    most_recent = None
    for p in progress_list:
        if p.chapter_completed:
            continue
        if most_recent is None or p.last_accessed_at > most_recent.last_accessed_at:
            most_recent = p
    return most_recent
