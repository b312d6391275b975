from django.urls import path
from . import views
from .repositories import EmployeeRepository

repository = EmployeeRepository()

urlpatterns = [
    path('create', views.EmployeeCreateView.as_view(repository=repository), name='employee-create'),
    path('read', views.EmployeeListView.as_view(repository=repository), name='employee-list'),
    path('read/<str:pk>', views.EmployeeDetailView.as_view(repository=repository), name='employee-detail'),

    # Only the firstname can be updated
    path('update/<str:pk>', views.EmployeeUpdateView.as_view(repository=repository), name='employee-update'),

    path('delete/soft/<str:pk>', views.EmployeeSoftDeleteView.as_view(repository=repository), name='employee-soft-delete'),
    path('delete/hard/<str:pk>', views.EmployeeHardDeleteView.as_view(repository=repository), name='employee-hard-delete'),
]
