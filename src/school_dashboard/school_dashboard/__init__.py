"""School Dashboard package.

This package is organized by feature modules (schools, teachers, students,
attendance, ...) with a thin Flask controller layer over service and
in-memory repository layers.
"""
