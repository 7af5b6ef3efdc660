"""Portal application for the institution backend.

This package contains the models, serializers, services and views that
expose departments, students, coordinators, programs, homepage images,
student reports and officer accounts over a JSON API.
"""
