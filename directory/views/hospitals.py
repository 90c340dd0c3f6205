"""
Public hospital endpoints: hospital detail and visit/contact requests.
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from ..models import Hospital
from ..params import parse_numeric_id
from ..services.hospitals import format_hospital, get_hospital_with_departments
from ..services.requests import RequestValidationError, create_request, format_request

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def hospital_detail(request, id):
    """Return a hospital together with its departments."""
    hospital_id = parse_numeric_id(id)
    if hospital_id is None:
        return Response({'error': 'Invalid hospital ID'}, status=status.HTTP_400_BAD_REQUEST)
    try:
        hospital = get_hospital_with_departments(hospital_id)
        if not hospital:
            return Response({'error': '병원을 찾을 수 없습니다.'}, status=status.HTTP_404_NOT_FOUND)
        return Response({'hospital': format_hospital(hospital, with_departments=True)})
    except Exception as e:
        logger.exception("hospital %s lookup failed", hospital_id)
        return Response({'error': str(e) or '병원 조회에 실패했습니다.'}, status=500)


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([ScopedRateThrottle])
def create_hospital_request(request, id):
    """File a visit/contact request for a hospital.

    ``type``, ``name`` and ``phone`` are required; ``email``, ``language``,
    ``message`` and ``preferredAt`` are optional.  Unexpected failures are
    logged and reported as a bare ``{"success": false}``.
    """
    hospital_id = parse_numeric_id(id)
    if hospital_id is None:
        return Response({'message': 'Invalid hospital id'}, status=status.HTTP_400_BAD_REQUEST)
    try:
        created = create_request(hospital_id, request.data)
        return Response({'success': True, 'request': format_request(created, with_hospital=False)})
    except RequestValidationError as e:
        body = {'message': e.message}
        if not e.missing_required:
            body['errors'] = e.errors
        return Response(body, status=status.HTTP_400_BAD_REQUEST)
    except Hospital.DoesNotExist:
        return Response({'message': '병원을 찾을 수 없습니다.'}, status=status.HTTP_404_NOT_FOUND)
    except Exception:
        logger.exception("request creation for hospital %s failed", hospital_id)
        return Response({'success': False}, status=500)

# ScopedRateThrottle reads the scope from the wrapped APIView class
create_hospital_request.cls.throttle_scope = 'request_write'
