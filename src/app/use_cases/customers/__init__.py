"""Customer directory use cases"""
from .create_customer import CreateCustomer
from .list_customers import ListCustomers
from .get_customer import GetCustomer
from .update_customer import UpdateCustomer
from .delete_customer import DeleteCustomer
from .toggle_customer_status import ToggleCustomerStatus
from .dtos import (
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    ListCustomersQueryDTO,
    CustomerDTO,
    ListCustomersResponseDTO,
)

__all__ = [
    "CreateCustomer",
    "ListCustomers",
    "GetCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "ToggleCustomerStatus",
    "CreateCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "ListCustomersQueryDTO",
    "CustomerDTO",
    "ListCustomersResponseDTO",
]
