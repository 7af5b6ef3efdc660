"""
Database models for the institution portal.

Every record is keyed by a caller-supplied string identifier; the
backend never generates surrogate keys.  ``is_active`` is a visibility
flag toggled by users and has nothing to do with deletion, which is
always a hard delete.
"""
from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Adds server-managed creation and modification timestamps."""
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Department(TimestampedModel):
    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Coordinator(TimestampedModel):
    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=32)
    department = models.CharField(max_length=255)
    position = models.CharField(max_length=255)
    # list endpoints filter on this flag
    is_active = models.BooleanField(default=True, db_index=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.position})"


class RegisteredStudent(TimestampedModel):
    """A student account.

    ``password_hash`` stays null until the student sets a password through
    the set-password flow (or an administrator supplies one on creation).
    It is never part of an API response.
    """
    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True)
    phone = models.CharField(max_length=32)
    department = models.CharField(max_length=255)
    year = models.CharField(max_length=32)
    enrollment_number = models.CharField(max_length=64, unique=True)
    password_hash = models.CharField(max_length=255, null=True, blank=True)
    is_active = models.BooleanField(default=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.enrollment_number})"


class OfficerCredential(TimestampedModel):
    """An officer account used by the administrative front-end.

    ``password_hash`` holds whatever credential value the front-end
    registered; officer login compares against it literally.
    """
    id = models.CharField(max_length=64, primary_key=True)
    username = models.CharField(max_length=150, unique=True)
    password_hash = models.CharField(max_length=255)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    role = models.CharField(max_length=32, default='officer')
    is_active = models.BooleanField(default=True, db_index=True)

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Program(TimestampedModel):
    id = models.CharField(max_length=64, primary_key=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    type = models.CharField(max_length=64, default='academic')
    start_date = models.DateTimeField(db_index=True)
    end_date = models.DateTimeField()
    max_participants = models.PositiveIntegerField()
    registration_open = models.BooleanField(default=True)
    department = models.CharField(max_length=255)
    coordinator = models.CharField(max_length=255)

    def __str__(self) -> str:
        return f"{self.title} ({self.id})"


class HomepageImage(TimestampedModel):
    TYPE_CHOICES = [
        ('left', 'Left'),
        ('right', 'Right'),
    ]
    id = models.CharField(max_length=64, primary_key=True)
    url = models.CharField(max_length=1024)
    type = models.CharField(max_length=5, choices=TYPE_CHOICES)
    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True, db_index=True)

    def __str__(self) -> str:
        return f"{self.type}#{self.order} ({self.id})"


class StudentReport(TimestampedModel):
    """Aggregated activity report for a single student.

    ``activities`` and ``coordinated_programs`` are ordered JSON arrays
    whose items are stored exactly as the front-end sends them.
    """
    id = models.CharField(max_length=64, primary_key=True)
    student_id = models.CharField(max_length=64, db_index=True)
    student_name = models.CharField(max_length=255)
    department = models.CharField(max_length=255)
    year = models.CharField(max_length=32)
    activities = models.JSONField(default=list, blank=True)
    coordinated_programs = models.JSONField(default=list, blank=True)

    def __str__(self) -> str:
        return f"Report {self.id} for {self.student_name}"
