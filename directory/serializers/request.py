from datetime import datetime

import bleach
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

from directory.models import Request

REQUIRED_FIELDS = ('type', 'name', 'phone')


class RequestCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=32)
    name = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=50)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    language = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=16)
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=5000)
    preferredAt = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_name(self, v):
        v = bleach.clean((v or '').strip(), tags=[], strip=True)
        if not v:
            raise serializers.ValidationError('이름은 필수입니다')
        return v

    def validate_message(self, v):
        v = bleach.clean((v or '').strip(), tags=[], strip=True)
        return v or None

    def validate_preferredAt(self, v):
        v = (v or '').strip()
        if not v:
            return None
        try:
            value = parse_datetime(v)
            day = None if value else parse_date(v)
        except ValueError:
            value = day = None
        if value is None:
            if day is None:
                raise serializers.ValidationError('preferredAt 형식이 올바르지 않습니다')
            value = datetime(day.year, day.month, day.day)
        if timezone.is_naive(value):
            value = timezone.make_aware(value)
        return value


class RequestStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[c[0] for c in Request.STATUS_CHOICES])
