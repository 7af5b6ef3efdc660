"""
Password hasher used for student credentials.

Django's bcrypt hasher defaults to 12 rounds; the portal pins the cost
factor at 10.  Hashes are plain bcrypt, so a bare ``$2b$10$...`` value
written before the ``bcrypt$`` prefix existed still verifies once
``portal.services.credentials`` adds the prefix back.
"""
from django.contrib.auth.hashers import BCryptPasswordHasher


class PortalBCryptPasswordHasher(BCryptPasswordHasher):
    algorithm = "bcrypt"
    rounds = 10
