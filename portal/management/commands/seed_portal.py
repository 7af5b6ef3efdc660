"""
Management command to populate the database with sample portal data.

Safe to run repeatedly: existing records are left untouched.
"""
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from portal.models import (
    Coordinator,
    Department,
    HomepageImage,
    OfficerCredential,
    Program,
    RegisteredStudent,
    StudentReport,
)
from portal.services.credentials import hash_password

DEPARTMENTS = [
    ('CS', 'Computer Science'),
    ('EE', 'Electrical Engineering'),
    ('ME', 'Mechanical Engineering'),
]


class Command(BaseCommand):
    help = 'Populate the database with sample portal data (idempotent).'

    def add_arguments(self, parser):
        parser.add_argument('--student-password', default='student123',
                            help='Password given to the sample student when it is first created.')
        parser.add_argument('--officer-credential', default='officer123',
                            help='Credential value stored for the sample officer.')

    def handle(self, *args, **opts):
        for dept_id, name in DEPARTMENTS:
            self._ensure(Department, dept_id, name=name)

        self._ensure(Coordinator, 'coord1', name='Asha Rao', email='asha.rao@example.edu',
                     phone='9000000001', department='Computer Science', position='NSS Coordinator')
        self._ensure(Coordinator, 'coord2', name='Vikram Shah', email='vikram.shah@example.edu',
                     phone='9000000002', department='Electrical Engineering', position='Sports Coordinator')

        start = timezone.now() + timedelta(days=7)
        self._ensure(Program, 'prog1', title='Blood Donation Camp', description='Annual campus camp',
                     type='social', start_date=start, end_date=start + timedelta(days=1),
                     max_participants=100, department='Computer Science', coordinator='coord1')

        self._ensure(HomepageImage, 'img-left-1', url='/static/img/left-1.png', type='left', order=0)
        self._ensure(HomepageImage, 'img-right-1', url='/static/img/right-1.png', type='right', order=0)

        self._ensure(OfficerCredential, 'off1', username='officer', password_hash=opts['officer_credential'],
                     name='Program Officer', email='officer@example.edu')

        self._ensure(RegisteredStudent, 'stu1', name='Meera Iyer', email='meera.iyer@example.edu',
                     phone='9000000010', department='Computer Science', year='3',
                     enrollment_number='EN2024001', password_hash=hash_password(opts['student_password']))

        self._ensure(StudentReport, 'rep-stu1', student_id='stu1', student_name='Meera Iyer',
                     department='Computer Science', year='3',
                     activities=[{'program': 'prog1', 'hours': 4}], coordinated_programs=[])

        self.stdout.write(self.style.SUCCESS('Sample portal data ensured.'))

    def _ensure(self, model, pk, **fields):
        _, created = model.objects.get_or_create(id=pk, defaults=fields)
        label = model._meta.verbose_name
        self.stdout.write(f"{'created' if created else 'exists'}: {label} {pk}")
