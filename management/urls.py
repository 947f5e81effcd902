from django.urls import path

from .views import ConfigVariableDetailView, ConfigVariableListView, SecretCheckView

app_name = "management"

urlpatterns = [
    path("variaveis/", ConfigVariableListView.as_view(), name="variable_list"),
    path("variaveis/<str:nome>/", ConfigVariableDetailView.as_view(), name="variable_detail"),
    path("auth/verificar-senha/", SecretCheckView.as_view(), name="check_secret"),
]
