from django.urls import path

from . import views

app_name = "customer"

urlpatterns = [
    path("", views.CustomerListView.as_view(), name="customer_list"),
    path("<str:telefone>/", views.CustomerDetailView.as_view(), name="customer_detail"),
]
