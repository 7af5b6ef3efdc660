"""
Store operations shared by every resource.

Each helper performs a single ORM operation and translates store errors
into the API taxonomy: a uniqueness violation becomes
:class:`~portal.exceptions.AlreadyExists`, a missing row becomes
``NotFound`` and any other database failure becomes
:class:`~portal.exceptions.StoreFailure`.  Nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Type

from django.db import DatabaseError, IntegrityError, models, transaction
from rest_framework.exceptions import NotFound

from portal.exceptions import AlreadyExists, StoreFailure

logger = logging.getLogger(__name__)


def list_records(model: Type[models.Model], *, label: str, order_by: Iterable[str],
                 filters: Optional[Mapping[str, Any]] = None) -> list:
    """Return every matching row, ordered, without pagination."""
    qs = model.objects.filter(**(filters or {})).order_by(*order_by)
    try:
        return list(qs)
    except DatabaseError:
        logger.exception('Error fetching %s list', label)
        raise StoreFailure(f'Failed to fetch {label} records')


def get_record(model: Type[models.Model], pk: str, *, label: str) -> models.Model:
    try:
        obj = model.objects.filter(pk=pk).first()
    except DatabaseError:
        logger.exception('Error fetching %s %s', label, pk)
        raise StoreFailure(f'Failed to fetch {label}')
    if obj is None:
        raise NotFound(f'{label.capitalize()} not found')
    return obj


def find_first(model: Type[models.Model], *, label: str, **filters) -> Optional[models.Model]:
    try:
        return model.objects.filter(**filters).first()
    except DatabaseError:
        logger.exception('Error looking up %s', label)
        raise StoreFailure(f'Failed to fetch {label}')


def create_record(model: Type[models.Model], data: Mapping[str, Any], *, label: str,
                  conflict_message: Optional[str] = None) -> models.Model:
    """Insert a new row; an existing identifier is never overwritten."""
    try:
        # savepoint so a failed insert leaves any outer transaction usable
        with transaction.atomic():
            obj = model.objects.create(**data)
    except IntegrityError:
        logger.warning('Create %s %s rejected: unique constraint violated', label, data.get('id'))
        raise AlreadyExists(conflict_message or f'{label.capitalize()} with this ID already exists')
    except DatabaseError:
        logger.exception('Error creating %s %s', label, data.get('id'))
        raise StoreFailure(f'Failed to create {label}')
    logger.info('Created %s %s', label, obj.pk)
    return obj


def update_record(model: Type[models.Model], pk: str, changes: Mapping[str, Any], *,
                  label: str, conflict_message: Optional[str] = None) -> models.Model:
    """Apply ``changes`` to the row identified by ``pk``.

    The row is locked for the duration of the update so a concurrent
    delete cannot turn the save into an insert.
    """
    try:
        with transaction.atomic():
            obj = model.objects.select_for_update().filter(pk=pk).first()
            if obj is None:
                logger.info('Update %s %s: not found', label, pk)
                raise NotFound(f'{label.capitalize()} not found')
            for field, value in changes.items():
                setattr(obj, field, value)
            obj.save(force_update=True)
    except IntegrityError:
        logger.warning('Update %s %s rejected: unique constraint violated', label, pk)
        raise AlreadyExists(conflict_message or f'{label.capitalize()} with these values already exists')
    except DatabaseError:
        logger.exception('Error updating %s %s', label, pk)
        raise StoreFailure(f'Failed to update {label}')
    logger.info('Updated %s %s (%s)', label, pk, ', '.join(sorted(changes)) or 'no fields')
    return obj


def delete_record(model: Type[models.Model], pk: str, *, label: str) -> None:
    """Hard-delete the row identified by ``pk``."""
    try:
        deleted, _ = model.objects.filter(pk=pk).delete()
    except DatabaseError:
        logger.exception('Error deleting %s %s', label, pk)
        raise StoreFailure(f'Failed to delete {label}')
    if not deleted:
        logger.info('Delete %s %s: not found', label, pk)
        raise NotFound(f'{label.capitalize()} not found')
    logger.info('Deleted %s %s', label, pk)
