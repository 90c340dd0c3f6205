"""
Hospital creation, lookup and JSON shaping.

``create_hospital`` is the single creation operation behind both the
admin form and the JSON admin endpoint; it never raises for bad input
and instead reports the failed fields on the returned result.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Optional

from django.db.models import Prefetch, Q

from directory.models import Hospital, HospitalDepartment
from directory.services.text import clean_optional, clean_text

logger = logging.getLogger(__name__)


class HospitalFieldError(str, enum.Enum):
    NAME_REQUIRED = 'name_required'
    ADDRESS_REQUIRED = 'address_required'


FIELD_ERROR_MESSAGES = {
    HospitalFieldError.NAME_REQUIRED: '병원명은 필수입니다.',
    HospitalFieldError.ADDRESS_REQUIRED: '주소는 필수입니다.',
}

REQUIRED_FIELDS_MESSAGE = 'name, address는 필수입니다'


@dataclass
class HospitalCreateResult:
    hospital: Optional[Hospital] = None
    errors: list[HospitalFieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.hospital is not None and not self.errors

    def messages(self) -> list[str]:
        return [FIELD_ERROR_MESSAGES[e] for e in self.errors]


def validate_hospital_fields(name: str, address: str) -> list[HospitalFieldError]:
    errors: list[HospitalFieldError] = []
    if not name:
        errors.append(HospitalFieldError.NAME_REQUIRED)
    if not address:
        errors.append(HospitalFieldError.ADDRESS_REQUIRED)
    return errors


def create_hospital(*, name=None, address=None, phone=None) -> HospitalCreateResult:
    """Create a hospital when ``name`` and ``address`` are present.

    Values are coerced to strings first; a blank ``phone`` is stored as NULL.
    Database errors propagate to the caller.
    """
    name = clean_text(name)
    address = clean_text(address)
    errors = validate_hospital_fields(name, address)
    if errors:
        return HospitalCreateResult(errors=errors)
    hospital = Hospital.objects.create(name=name, address=address, phone=clean_optional(phone))
    logger.info("hospital %s created: %s", hospital.id, hospital.name)
    return HospitalCreateResult(hospital=hospital)


def get_hospital_with_departments(hospital_id: int) -> Optional[Hospital]:
    links = HospitalDepartment.objects.select_related('department').order_by('id')
    return (
        Hospital.objects.prefetch_related(Prefetch('hospital_departments', queryset=links))
        .filter(id=hospital_id)
        .first()
    )


def search_hospitals(q: str = ''):
    """Hospitals whose name, English name, address or city contain ``q``."""
    qs = Hospital.objects.all().order_by('name')
    q = (q or '').strip()
    if q:
        qs = qs.filter(
            Q(name__icontains=q) | Q(name_en__icontains=q) | Q(address__icontains=q) | Q(city__icontains=q)
        )
    return qs


def format_department(department) -> dict:
    return {
        'id': department.id,
        'name': department.name,
        'nameEn': department.name_en,
        'icon': department.icon,
        'description': department.description,
        'createdAt': department.created_at.isoformat(),
    }


def format_hospital_summary(hospital: Hospital, *, with_name_en: bool = True) -> dict:
    data = {'id': hospital.id, 'name': hospital.name}
    if with_name_en:
        data['nameEn'] = hospital.name_en
    return data


def format_hospital(hospital: Hospital, *, with_departments: bool = False) -> dict:
    data = {
        'id': hospital.id,
        'name': hospital.name,
        'nameEn': hospital.name_en,
        'address': hospital.address,
        'phone': hospital.phone,
        'city': hospital.city,
        'country': hospital.country,
        'website': hospital.website,
        'description': hospital.description,
        'imageUrl': hospital.image_url,
        'createdAt': hospital.created_at.isoformat(),
    }
    if with_departments:
        data['departments'] = [
            {
                'hospitalId': link.hospital_id,
                'departmentId': link.department_id,
                'department': format_department(link.department),
            }
            for link in hospital.hospital_departments.all()
        ]
    return data
