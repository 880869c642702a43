"""Class Attendance package.

Feature modules (timetable, attendance, stats, ...) keep the pure domain logic
apart from a thin Flask controller layer and the MySQL repository layer.
"""
