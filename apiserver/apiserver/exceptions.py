from rest_framework.views import exception_handler


def json_error_handler(exc, context):
    """Framework errors (405, 415, ...) use the same {'error': ...} body as the views"""
    response = exception_handler(exc, context)
    if response is not None and isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'error': response.data['detail']}
    return response
