import logging
import time

logger = logging.getLogger('apiserver.http')


class RequestLoggingMiddleware:
    """
    Logs one line per request with method, path, status and timing.
    Responses with status >= 400 are logged as warnings.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start = time.monotonic()
        response = self.get_response(request)
        duration_ms = (time.monotonic() - start) * 1000

        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"{request.method} {request.get_full_path()} {response.status_code} {duration_ms:.1f}ms",
            extra={
                'method': request.method,
                'path': request.path,
                'status': response.status_code,
                'duration_ms': duration_ms,
                'remote_addr': request.META.get('REMOTE_ADDR'),
            }
        )
        return response


class NoClientCacheMiddleware:
    """
    Replaces the max-age/Expires headers added by the cache middleware.
    Responses stay cached server side, clients revalidate on every request.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        if 'Expires' in response:
            del response['Expires']
        response['Cache-Control'] = 'no-cache'
        return response
