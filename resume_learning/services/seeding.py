"""Seed the built-in chapters when the catalog is empty."""
import json
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from resume_learning.models.chapter import Chapter

logger = logging.getLogger(__name__)

SEED_CHAPTERS = [
    {
        "chapter_id": "chapter_1",
        "title": "Introduction to Programming",
        "description": "Learn the fundamentals of programming and get started with your coding journey.",
        "video_url": "http://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4",
        "duration": 596,  # 9:56
        "order": 1,
        "questions": [
            {
                "id": "q1_1",
                "question_text": "What is a variable in programming?",
                "options": ["A storage container for data", "A type of loop", "A function", "An operator"],
                "correct_answer": 0,
            },
            {
                "id": "q1_2",
                "question_text": "Which of these is a programming language?",
                "options": ["HTML", "CSS", "Python", "JSON"],
                "correct_answer": 2,
            },
            {
                "id": "q1_3",
                "question_text": "What does IDE stand for?",
                "options": [
                    "Internet Development Environment",
                    "Integrated Development Environment",
                    "Internal Data Engine",
                    "Interactive Design Editor",
                ],
                "correct_answer": 1,
            },
            {
                "id": "q1_4",
                "question_text": "What is debugging?",
                "options": ["Writing new code", "Finding and fixing errors", "Deleting old code", "Compiling code"],
                "correct_answer": 1,
            },
            {
                "id": "q1_5",
                "question_text": "What is an algorithm?",
                "options": [
                    "A programming language",
                    "A step-by-step procedure to solve a problem",
                    "A type of data",
                    "A software tool",
                ],
                "correct_answer": 1,
            },
        ],
    },
    {
        "chapter_id": "chapter_2",
        "title": "Data Structures Basics",
        "description": "Understand essential data structures like arrays, lists, and how to use them effectively.",
        "video_url": "http://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ElephantsDream.mp4",
        "duration": 653,  # 10:53
        "order": 2,
        "questions": [
            {
                "id": "q2_1",
                "question_text": "What is an array?",
                "options": ["A collection of elements of the same type", "A single value", "A function", "A class"],
                "correct_answer": 0,
            },
            {
                "id": "q2_2",
                "question_text": "What is the time complexity of accessing an element in an array by index?",
                "options": ["O(n)", "O(log n)", "O(1)", "O(n^2)"],
                "correct_answer": 2,
            },
            {
                "id": "q2_3",
                "question_text": "What is a linked list?",
                "options": [
                    "An array of arrays",
                    "A sequence of nodes where each node contains data and a reference to the next node",
                    "A type of tree",
                    "A sorting algorithm",
                ],
                "correct_answer": 1,
            },
            {
                "id": "q2_4",
                "question_text": "Which data structure follows LIFO (Last In First Out)?",
                "options": ["Queue", "Stack", "Array", "Linked List"],
                "correct_answer": 1,
            },
            {
                "id": "q2_5",
                "question_text": "What is the main advantage of a linked list over an array?",
                "options": ["Faster access time", "Dynamic size", "Less memory usage", "Better cache performance"],
                "correct_answer": 1,
            },
        ],
    },
    {
        "chapter_id": "chapter_3",
        "title": "Advanced Algorithms",
        "description": "Dive deep into sorting, searching, and optimization algorithms used in real-world applications.",
        "video_url": "http://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerBlazes.mp4",
        "duration": 15,  # 0:15
        "order": 3,
        "questions": [
            {
                "id": "q3_1",
                "question_text": "What is the average time complexity of Quick Sort?",
                "options": ["O(n)", "O(n log n)", "O(n^2)", "O(log n)"],
                "correct_answer": 1,
            },
            {
                "id": "q3_2",
                "question_text": "Which algorithm is used for finding the shortest path in a graph?",
                "options": ["Binary Search", "Merge Sort", "Dijkstra's Algorithm", "Bubble Sort"],
                "correct_answer": 2,
            },
            {
                "id": "q3_3",
                "question_text": "What is dynamic programming?",
                "options": [
                    "A programming language",
                    "A method for solving complex problems by breaking them into simpler subproblems",
                    "A type of database",
                    "A web framework",
                ],
                "correct_answer": 1,
            },
            {
                "id": "q3_4",
                "question_text": "What does BFS stand for in graph traversal?",
                "options": ["Best First Search", "Breadth First Search", "Binary File System", "Backward Forward Search"],
                "correct_answer": 1,
            },
            {
                "id": "q3_5",
                "question_text": "Which sorting algorithm has the best worst-case time complexity?",
                "options": ["Quick Sort", "Bubble Sort", "Merge Sort", "Selection Sort"],
                "correct_answer": 2,
            },
        ],
    },
]


def build_chapter(data: dict) -> Chapter:
    """Chapter row from a seed entry; questions go to quiz_json."""
    return Chapter(
        chapter_id=data["chapter_id"],
        title=data["title"],
        description=data["description"],
        video_url=data["video_url"],
        duration=data["duration"],
        order=data["order"],
        quiz_json=json.dumps(data["questions"]),
    )


async def seed_chapters(db: AsyncSession, chapters: list[dict] | None = None) -> int:
    """Insert the built-in chapters if the catalog is empty. Returns how many were inserted."""
    count = await db.scalar(select(func.count(Chapter.id)))
    if count:
        logger.info("Chapters already exist (%d), skipping seed", count)
        return 0

    entries = SEED_CHAPTERS if chapters is None else chapters
    db.add_all([build_chapter(c) for c in entries])
    await db.commit()
    logger.info("Seeded %d chapters", len(entries))
    return len(entries)
