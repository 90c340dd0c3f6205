"""
Form-bound mutations used by the server-rendered pages.

Each action accepts the submitted form data (a ``QueryDict`` or any
mapping) and returns an explicit result; none of them raise for
invalid input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .models import Hospital, Request
from .services.hospitals import HospitalCreateResult, create_hospital
from .services.requests import RequestValidationError, create_request


def create_hospital_action(form_data) -> HospitalCreateResult:
    return create_hospital(
        name=form_data.get('name'),
        address=form_data.get('address'),
        phone=form_data.get('phone'),
    )


@dataclass
class RequestFormResult:
    request: Optional[Request] = None
    message: str = ''
    errors: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.request is not None


def create_request_action(hospital_id: int, form_data) -> RequestFormResult:
    try:
        created = create_request(hospital_id, form_data)
    except RequestValidationError as e:
        return RequestFormResult(message=e.message, errors=e.errors)
    except Hospital.DoesNotExist:
        return RequestFormResult(message='병원을 찾을 수 없습니다.')
    return RequestFormResult(request=created, message='문의가 접수되었습니다.')
