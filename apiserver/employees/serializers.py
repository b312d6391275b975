from rest_framework import serializers
from .models import Employee

UINT32_MAX = 2 ** 32 - 1
UINT8_MAX = 2 ** 8 - 1


class LowercaseCharField(serializers.CharField):
    """CharField that stores its value lowercased, whitespace kept as sent"""

    def __init__(self, **kwargs):
        kwargs.setdefault('trim_whitespace', False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        return super().to_internal_value(data).lower()


class EmployeeSerializer(serializers.ModelSerializer):
    """Create payload and response body for an employee"""
    firstname = LowercaseCharField(max_length=100, allow_blank=True)
    lastname = LowercaseCharField(max_length=100, allow_blank=True)
    role = LowercaseCharField(max_length=100, allow_blank=True)
    salary = serializers.IntegerField(min_value=0, max_value=UINT32_MAX)
    age = serializers.IntegerField(min_value=0, max_value=UINT8_MAX)

    class Meta:
        model = Employee
        fields = [
            'id', 'firstname', 'lastname', 'salary', 'role', 'age',
            'created_at', 'updated_at', 'deleted_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at', 'deleted_at']
        # Firstname uniqueness is checked by the create view and the partial index
        validators = []


class FirstnameUpdateSerializer(serializers.Serializer):
    firstname = LowercaseCharField(max_length=100, allow_blank=True)
