"""Allow ``python -m student_api`` to start the server."""

from student_api.main import run

run()
