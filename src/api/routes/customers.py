"""Customer API Routes"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.customer_request import CreateCustomerRequestSchema, UpdateCustomerRequestSchema
from src.app.use_cases.customers import (
    CreateCustomer,
    CreateCustomerCommandDTO,
    CustomerDTO,
    DeleteCustomer,
    GetCustomer,
    ListCustomers,
    ListCustomersQueryDTO,
    ListCustomersResponseDTO,
    ToggleCustomerStatus,
    UpdateCustomer,
    UpdateCustomerCommandDTO,
)
from src.adapter.repositories import SqlAlchemyCustomerRepository, SqlAlchemyInvoiceRepository
from src.adapter.services import SqlAlchemyUnitOfWork
from src.depends import get_config, get_session
from src.api.error import ClientError
from src.api.identity import get_current_owner_id

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post(
    "",
    response_model=CustomerDTO,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Customer with this email already exists"}},
)
async def create_customer(
    request: CreateCustomerRequestSchema,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = CreateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(owner_id, CreateCustomerCommandDTO(**request.model_dump()))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListCustomersResponseDTO)
async def list_customers(
    search: Optional[str] = None,
    is_active: Optional[bool] = None,
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    List customers, newest first.

    `search` matches name, email or company, case-insensitively.
    """
    query = ListCustomersQueryDTO(
        search=search,
        is_active=is_active,
        page=page,
        limit=limit or config.DEFAULT_PAGE_SIZE,
    )
    result = await ListCustomers(SqlAlchemyCustomerRepository(session)).execute(owner_id, query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{customer_id}", response_model=CustomerDTO)
async def get_customer(
    customer_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    result = await GetCustomer(SqlAlchemyCustomerRepository(session)).execute(owner_id, customer_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{customer_id}", response_model=CustomerDTO)
async def update_customer(
    customer_id: str,
    request: UpdateCustomerRequestSchema,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    command = UpdateCustomerCommandDTO(**request.model_dump(exclude_unset=True))

    use_case = UpdateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(owner_id, customer_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"description": "Customer has invoices; deactivate instead"}},
)
async def delete_customer(
    customer_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteCustomer(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(owner_id, customer_id)

    if result.is_err():
        raise ClientError(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{customer_id}/toggle-status", response_model=CustomerDTO)
async def toggle_customer_status(
    customer_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = ToggleCustomerStatus(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(owner_id, customer_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
