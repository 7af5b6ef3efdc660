"""
Liveness/readiness probes and the JSON fallbacks for unmatched routes
and unhandled errors outside the API views.
"""
import logging

from django.conf import settings
from django.db import connections
from django.http import JsonResponse
from django.utils import timezone

from ..exceptions import GENERIC_SERVER_MESSAGE

logger = logging.getLogger(__name__)


def _now() -> str:
    return timezone.now().isoformat().replace('+00:00', 'Z')


def health(request):
    return JsonResponse({'status': 'OK', 'timestamp': _now()})


def api_health(request):
    return JsonResponse({
        'status': 'OK',
        'message': 'Server is running',
        'timestamp': _now(),
        'success': True,
    })


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1)})
    except Exception as e:
        logger.exception('Database probe failed')
        message = str(e) if settings.DEBUG else GENERIC_SERVER_MESSAGE
        return JsonResponse({'ok': False, 'db': False, 'error': message}, status=500)


def route_not_found(request, *args, **kwargs):
    return JsonResponse({'ok': False, 'error': {'code': 'not_found', 'message': 'Route not found'}}, status=404)


def server_error(request, *args, **kwargs):
    return JsonResponse(
        {'ok': False, 'error': {'code': 'server_error', 'message': GENERIC_SERVER_MESSAGE}}, status=500
    )
