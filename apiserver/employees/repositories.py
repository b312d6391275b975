import logging
from django.conf import settings
from django.core.cache import caches
from django.db import IntegrityError, transaction
from django.utils import timezone
from .models import Employee

logger = logging.getLogger(__name__)


class DuplicateFirstname(Exception):
    """An active employee already uses this firstname"""


class EmployeeRepository:
    """
    Data access for the employees table.

    Every method issues a single statement that commits on its own. The
    repository is bound to one database alias and is handed to the views
    through ``as_view(repository=...)`` instead of living in a global.
    Successful writes clear the response cache so cached GETs never
    outlive the row state they were rendered from.
    """

    def __init__(self, using='default', cache_alias=None):
        self.using = using
        self.cache_alias = cache_alias or settings.CACHE_MIDDLEWARE_ALIAS

    def _active(self):
        return Employee.objects.using(self.using)

    def _unscoped(self):
        return Employee.all_objects.using(self.using)

    def _invalidate(self):
        caches[self.cache_alias].clear()

    def list_active(self):
        return list(self._active().all())

    def get_active(self, pk):
        """Raises Employee.DoesNotExist when no active row has this id"""
        return self._active().get(pk=pk)

    def firstname_taken(self, firstname):
        return self._active().filter(firstname=firstname).exists()

    def create(self, **fields):
        """
        Insert a new row. The partial unique index on active firstnames
        turns a lost race against a concurrent create into DuplicateFirstname.
        """
        try:
            # Savepoint so a constraint violation leaves the connection usable
            with transaction.atomic(using=self.using):
                employee = Employee.all_objects.db_manager(self.using).create(**fields)
        except IntegrityError as e:
            raise DuplicateFirstname(fields.get('firstname')) from e

        self._invalidate()
        return employee

    def update_firstname(self, pk, firstname):
        with transaction.atomic(using=self.using):
            rows = self._active().filter(pk=pk).update(
                firstname=firstname,
                updated_at=timezone.now(),
            )
        self._invalidate()
        return rows

    def soft_delete(self, pk):
        rows = self._active().filter(pk=pk).update(deleted_at=timezone.now())
        self._invalidate()
        return rows

    def hard_delete(self, pk):
        rows, _ = self._unscoped().filter(pk=pk).delete()
        self._invalidate()
        return rows
