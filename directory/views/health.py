import logging

from django.db import DatabaseError, connections
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    """Liveness probe: the default database must answer ``SELECT 1``."""
    conn = connections['default']
    try:
        with conn.cursor() as c:
            c.execute('SELECT 1')
            alive = c.fetchone() == (1,)
    except DatabaseError as e:
        logger.error("health check failed: %s", e)
        return JsonResponse({'ok': False, 'error': str(e)}, status=503)
    return JsonResponse({'ok': alive, 'db': conn.vendor})
