"""
Visit/contact requests filed against a hospital.

Both entry points (the JSON route and the form on the hospital page)
go through :func:`create_request`, so they share one required-field
rule: ``type``, ``name`` and ``phone``.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.db.models import Count

from directory.models import Hospital, Request
from directory.serializers.request import REQUIRED_FIELDS, RequestCreateSerializer
from directory.services.hospitals import format_hospital_summary

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = '필수값 누락'
INVALID_INPUT_MESSAGE = '입력값이 올바르지 않습니다'


class RequestValidationError(ValueError):
    """Raised when a request payload fails validation.  ``errors`` maps field to messages."""

    def __init__(self, message: str, errors: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}

    @property
    def missing_required(self) -> bool:
        return any(f in self.errors for f in REQUIRED_FIELDS)


def create_request(hospital_id: int, data) -> Request:
    """Validate ``data`` and insert one Request for the hospital.

    Raises :class:`RequestValidationError` for bad input and
    ``Hospital.DoesNotExist`` when the hospital is unknown.  Nothing is
    written in either case.
    """
    s = RequestCreateSerializer(data=data)
    if not s.is_valid():
        errors = {k: [str(m) for m in v] for k, v in s.errors.items()}
        missing = any(f in errors for f in REQUIRED_FIELDS)
        raise RequestValidationError(MISSING_FIELDS_MESSAGE if missing else INVALID_INPUT_MESSAGE, errors)
    vd = s.validated_data

    if not Hospital.objects.filter(id=hospital_id).exists():
        raise Hospital.DoesNotExist(f'hospital {hospital_id} not found')

    created = Request.objects.create(
        hospital_id=hospital_id,
        type=vd['type'],
        name=vd['name'],
        phone=vd['phone'],
        email=vd.get('email') or None,
        language=vd.get('language') or None,
        message=vd.get('message'),
        preferred_at=vd.get('preferredAt'),
    )
    logger.info("request %s (%s) filed for hospital %s", created.id, created.type, hospital_id)
    return created


def list_requests():
    return Request.objects.select_related('hospital').order_by('-created_at', '-id')


def get_request(request_id: int) -> Optional[Request]:
    return Request.objects.select_related('hospital').filter(id=request_id).first()


def update_request_status(request_id: int, status: str) -> Optional[Request]:
    """Set the status of a request; returns ``None`` if it does not exist."""
    updated = Request.objects.filter(id=request_id).update(status=status)
    if not updated:
        return None
    return get_request(request_id)


def status_counts() -> dict[str, int]:
    counts = {code: 0 for code, _ in Request.STATUS_CHOICES}
    for row in Request.objects.values('status').annotate(n=Count('id')):
        counts[row['status']] = row['n']
    counts['total'] = sum(counts.values())
    return counts


def format_request(req: Request, *, with_hospital: bool = True) -> dict:
    data = {
        'id': req.id,
        'hospitalId': req.hospital_id,
        'type': req.type,
        'name': req.name,
        'phone': req.phone,
        'email': req.email,
        'language': req.language,
        'message': req.message,
        'status': req.status,
        'preferredAt': req.preferred_at.isoformat() if req.preferred_at else None,
        'createdAt': req.created_at.isoformat(),
    }
    if with_hospital:
        data['hospital'] = format_hospital_summary(req.hospital)
    return data
