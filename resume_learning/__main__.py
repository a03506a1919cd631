from resume_learning.main import run

run()
