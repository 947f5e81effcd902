from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import CustomerCreateSerializer, CustomerUpdateSerializer, customer_to_dict
from .utils import create_customer, delete_customer, get_customer, list_customers, update_customer


class CustomerListView(APIView):
    def get(self, request):
        return Response([customer_to_dict(customer) for customer in list_customers()])

    def post(self, request):
        serializer = CustomerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = create_customer(**serializer.validated_data)
        return Response(customer_to_dict(customer), status=status.HTTP_201_CREATED)


class CustomerDetailView(APIView):
    """
    Lookup by phone. A 404 with error code ``not_found`` tells the order
    screen to send the user to the registration form.
    """

    def get(self, request, telefone):
        return Response(customer_to_dict(get_customer(telefone)))

    def patch(self, request, telefone):
        serializer = CustomerUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = update_customer(telefone, **serializer.validated_data)
        return Response(customer_to_dict(customer))

    def delete(self, request, telefone):
        return Response(delete_customer(telefone))
