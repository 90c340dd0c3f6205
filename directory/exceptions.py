import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Render every API error as ``{"error": <message>}``."""
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error("unhandled API error: %s", exc, exc_info=exc)
        return Response({'error': str(exc) or 'server error'}, status=500)
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    return Response({'error': detail}, status=resp.status_code, headers=dict(resp.items()))
