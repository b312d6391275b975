import logging
import re
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView
from .models import Employee
from .repositories import DuplicateFirstname
from .serializers import EmployeeSerializer, FirstnameUpdateSerializer

logger = logging.getLogger(__name__)

DUPLICATE_FIRSTNAME_MESSAGE = (
    '(error) that firstname has been duplicated in database, '
    'please try again and use other firstname'
)
INPUT_ERRORS = (ParseError, UnsupportedMediaType, ValidationError)

# ASCII digits only, optional leading minus
ID_PATTERN = re.compile(r'-?[0-9]+')
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def parse_id(raw):
    """Convert a path id to a signed 64-bit integer, ParseError for anything else"""
    if not isinstance(raw, str) or not ID_PATTERN.fullmatch(raw):
        raise ParseError(f"id must be an integer, got '{raw}'")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(f"id out of range: {raw}")
    return value


def error_response(detail, status_code):
    return Response({'error': detail}, status=status_code)


class EmployeeAPIView(APIView):
    """Base view - the repository is injected with as_view(repository=...)"""
    repository = None

    def initial(self, request, *args, **kwargs):
        if self.repository is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} needs a repository, pass one to as_view()"
            )
        super().initial(request, *args, **kwargs)


class EmployeeCreateView(EmployeeAPIView):

    def post(self, request):
        try:
            serializer = EmployeeSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
        except INPUT_ERRORS as e:
            return error_response(e.detail, status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        try:
            if self.repository.firstname_taken(data['firstname']):
                return Response(
                    {'message': DUPLICATE_FIRSTNAME_MESSAGE},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR
                )
            employee = self.repository.create(**data)
        except DuplicateFirstname:
            logger.warning(f"Concurrent create lost the race for firstname: {data['firstname']}")
            return Response(
                {'message': DUPLICATE_FIRSTNAME_MESSAGE},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        except DatabaseError as e:
            logger.error(f"Employee creation failed: {str(e)}", exc_info=True)
            return error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Employee created successfully: {employee.pk} {employee.firstname}")
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)


class EmployeeListView(EmployeeAPIView):

    def get(self, request):
        try:
            employees = self.repository.list_active()
        except DatabaseError as e:
            logger.error(f"Employee listing failed: {str(e)}", exc_info=True)
            return error_response(str(e), status.HTTP_404_NOT_FOUND)

        return Response(EmployeeSerializer(employees, many=True).data)


class EmployeeDetailView(EmployeeAPIView):

    def get(self, request, pk):
        try:
            employee_id = parse_id(pk)
        except ParseError as e:
            return error_response(e.detail, status.HTTP_400_BAD_REQUEST)

        try:
            employee = self.repository.get_active(employee_id)
        except Employee.DoesNotExist:
            return error_response('record not found', status.HTTP_404_NOT_FOUND)
        except DatabaseError as e:
            logger.error(f"Employee lookup failed: {str(e)}", exc_info=True)
            return error_response(str(e), status.HTTP_404_NOT_FOUND)

        return Response(EmployeeSerializer(employee).data)


class EmployeeUpdateView(EmployeeAPIView):
    """Only the firstname can be changed"""

    def put(self, request, pk):
        try:
            employee_id = parse_id(pk)
            serializer = FirstnameUpdateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
        except INPUT_ERRORS as e:
            return error_response(e.detail, status.HTTP_400_BAD_REQUEST)

        firstname = serializer.validated_data['firstname']
        try:
            rows = self.repository.update_firstname(employee_id, firstname)
        except DatabaseError as e:
            logger.error(f"Employee update failed: {str(e)}", exc_info=True)
            return error_response(str(e), status.HTTP_404_NOT_FOUND)

        if not rows:
            logger.warning(f"Firstname update matched no active employee: {employee_id}")
        return Response({'message': '(changed) firstname column has been changed.'})


class EmployeeSoftDeleteView(EmployeeAPIView):

    def delete(self, request, pk):
        try:
            employee_id = parse_id(pk)
        except ParseError as e:
            return error_response(e.detail, status.HTTP_400_BAD_REQUEST)

        try:
            rows = self.repository.soft_delete(employee_id)
        except DatabaseError as e:
            logger.error(f"Employee soft delete failed: {str(e)}", exc_info=True)
            return error_response(str(e), status.HTTP_404_NOT_FOUND)

        if rows:
            logger.info(f"Employee soft deleted: {employee_id}")
        else:
            logger.warning(f"Soft delete matched no active employee: {employee_id}")
        return Response({
            'message': '(success) the employee data has been soft removed from database'
        })


class EmployeeHardDeleteView(EmployeeAPIView):

    def delete(self, request, pk):
        try:
            employee_id = parse_id(pk)
        except ParseError as e:
            return error_response(e.detail, status.HTTP_400_BAD_REQUEST)

        try:
            rows = self.repository.hard_delete(employee_id)
        except DatabaseError as e:
            logger.error(f"Employee hard delete failed: {str(e)}", exc_info=True)
            return error_response(str(e), status.HTTP_404_NOT_FOUND)

        if rows:
            logger.info(f"Employee permanently deleted: {employee_id}")
        else:
            logger.warning(f"Hard delete matched no employee: {employee_id}")
        return Response(status=status.HTTP_204_NO_CONTENT)
