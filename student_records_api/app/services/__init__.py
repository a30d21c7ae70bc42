"""
Service layer.

``merge`` and ``validation`` hold the update rules for student
records; ``student_service`` combines them with a record store.  API
handlers only talk to ``StudentService``.
"""
