from django.db import models
from django.db.models import Q


class ActiveEmployeeManager(models.Manager):
    """Default manager - hides soft deleted rows"""

    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class Employee(models.Model):
    firstname = models.CharField(max_length=100)
    lastname = models.CharField(max_length=100)
    salary = models.PositiveBigIntegerField()
    role = models.CharField(max_length=100)
    age = models.PositiveSmallIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    # NULL while the row is active
    deleted_at = models.DateTimeField(blank=True, null=True, db_index=True)

    objects = ActiveEmployeeManager()
    # Unscoped access, soft deleted rows included
    all_objects = models.Manager()

    class Meta:
        db_table = 'employees'
        ordering = ['id']
        default_manager_name = 'objects'
        base_manager_name = 'all_objects'
        constraints = [
            models.UniqueConstraint(
                fields=['firstname'],
                condition=Q(deleted_at__isnull=True),
                name='unique_active_firstname',
            ),
        ]

    def __str__(self):
        return f"{self.pk} - {self.firstname} {self.lastname}"
