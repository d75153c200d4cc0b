"""Student Check-In System package.

Feature modules (students, attendance, reports, ...) sit behind a thin Flask
controller layer; the eligibility rules in ``attendance.eligibility`` are pure
and never touch the clock, the environment or the database.
"""
