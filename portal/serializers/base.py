"""
Shared serializer building blocks.

Request bodies are validated into explicit records: unknown fields are
rejected, free text is sanitised and date-valued fields accept either a
full ISO-8601 timestamp or a bare ``YYYY-MM-DD`` date.
"""
import html
from collections.abc import Mapping

import bleach
from rest_framework import serializers
from rest_framework.settings import ISO_8601

DATE_INPUT_FORMATS = [ISO_8601, '%Y-%m-%d']

# Fields the generic update path never forwards to the store
PROTECTED_UPDATE_FIELDS = ('id', 'passwordHash')


class CleanCharField(serializers.CharField):
    """CharField that strips any markup from the submitted value.

    Tags are removed but the remaining text is stored as written, so
    ``&`` and friends are not turned into HTML entities.
    """

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        cleaned = html.unescape(bleach.clean(value, tags=set(), strip=True)).strip()
        if not cleaned and not self.allow_blank:
            self.fail('blank')
        return cleaned


class DateValueField(serializers.DateTimeField):
    def __init__(self, **kwargs):
        kwargs.setdefault('input_formats', DATE_INPUT_FORMATS)
        super().__init__(**kwargs)


class StrictSerializer(serializers.Serializer):
    """Serializer that refuses fields it does not declare."""

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            unknown = sorted(set(data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError({name: ['Unknown field.'] for name in unknown})
        return super().to_internal_value(data)


class TimestampFieldsMixin(serializers.Serializer):
    """Read-only timestamps a client may echo back; they are ignored."""
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)


def request_body(request, *, strip=()) -> dict:
    """Return the request body as a plain dict without the ``strip`` keys."""
    data = request.data
    if not isinstance(data, Mapping):
        raise serializers.ValidationError({'non_field_errors': ['Expected a JSON object.']})
    return {key: value for key, value in data.items() if key not in strip}


def validated(serializer_class, data, *, partial=False) -> dict:
    s = serializer_class(data=data, partial=partial)
    s.is_valid(raise_exception=True)
    return dict(s.validated_data)
