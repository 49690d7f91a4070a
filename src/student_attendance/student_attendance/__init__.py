"""Student Attendance package.

Organized by feature modules (students, attendance, stats) with a thin Flask
controller layer over service/repository layers backed by MongoDB. The
``client`` subpackage is the consumer side: API client, cache and
client-side filtering.
"""
