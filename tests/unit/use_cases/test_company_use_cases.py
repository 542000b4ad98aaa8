import logging

import pytest

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.use_cases.companies import (
    ActivateCompanyUseCase,
    CreateCompanyCommand,
    CreateCompanyUseCase,
    DeleteCompanyUseCase,
    ListCompaniesQuery,
    ListCompaniesUseCase,
    SuspendCompanyUseCase,
    UpdateCompanyCommand,
    UpdateCompanyUseCase,
)
from fleetadmin.domain.entities import AdminRole, CompanyStatus
from .factories import make_admin, make_company


def _command(**overrides) -> CreateCompanyCommand:
    values = dict(
        name="Acme Logistics",
        email="hello@acme.com",
        owner_name="Olive Owner",
        owner_email="owner@acme.com",
        owner_password="SecurePass123",
    )
    values.update(overrides)
    return CreateCompanyCommand(**values)


async def _same(entity):
    return entity


def _echo(entity_id):
    async def create(entity):
        entity.id = entity_id
        return entity

    return create


@pytest.mark.asyncio
async def test_create_company_with_owner(mock_uow, hasher):
    """
    Given no admin uses the owner email
    When a company is created
    Then the company is active, the owner has role=owner and the transaction commits
    """
    mock_uow.admins.get_by_email.return_value = None
    mock_uow.companies.create.side_effect = _echo(1)
    mock_uow.admins.create.side_effect = _echo(10)

    result = await CreateCompanyUseCase(mock_uow, hasher).execute(_command())

    assert result.is_ok()
    assert result.value.company.id == 1
    assert result.value.company.status == CompanyStatus.active
    assert result.value.owner.role == AdminRole.owner
    assert result.value.owner.company_id == 1
    assert result.value.owner.is_active is True

    created_owner = mock_uow.admins.create.call_args.args[0]
    assert created_owner.password_hash != "SecurePass123"
    assert hasher.verify_sync("SecurePass123", created_owner.password_hash)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_company_duplicate_owner_email(mock_uow, hasher):
    mock_uow.admins.get_by_email.return_value = make_admin()

    result = await CreateCompanyUseCase(mock_uow, hasher).execute(_command())

    assert result.is_err()
    assert result.error.code == "DUPLICATE_OWNER_EMAIL"
    mock_uow.companies.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_owner_insert_failure_rolls_back_company(mock_uow, hasher):
    """
    Given the owner email is claimed between the check and the insert
    When the owner insert hits the unique constraint
    Then the transaction is rolled back and nothing is committed
    """
    mock_uow.admins.get_by_email.return_value = None
    mock_uow.companies.create.side_effect = _echo(1)
    mock_uow.admins.create.side_effect = DuplicateEntityError("taken")

    result = await CreateCompanyUseCase(mock_uow, hasher).execute(_command())

    assert result.error.code == "DUPLICATE_OWNER_EMAIL"
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_failed_rollback_is_logged_and_original_error_returned(mock_uow, hasher, caplog):
    mock_uow.admins.get_by_email.return_value = None
    mock_uow.companies.create.side_effect = _echo(1)
    mock_uow.admins.create.side_effect = DuplicateEntityError("taken")
    mock_uow.rollback.side_effect = RuntimeError("connection lost")
    logger = logging.getLogger("test.create_company")

    with caplog.at_level(logging.ERROR, logger="test.create_company"):
        result = await CreateCompanyUseCase(mock_uow, hasher, logger=logger).execute(
            _command()
        )

    assert result.error.code == "DUPLICATE_OWNER_EMAIL"
    assert "Rollback failed" in caplog.text
    assert "company 1" in caplog.text
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_suspend_is_idempotent(mock_uow):
    company = make_company(status=CompanyStatus.active)
    mock_uow.companies.get_by_id.return_value = company
    mock_uow.companies.update.side_effect = _same

    first = await SuspendCompanyUseCase(mock_uow).execute(1)
    second = await SuspendCompanyUseCase(mock_uow).execute(1)

    assert first.value.status == CompanyStatus.suspended
    assert second.value.status == CompanyStatus.suspended
    mock_uow.companies.update.assert_awaited_once()


@pytest.mark.asyncio
async def test_activate_unknown_company(mock_uow):
    mock_uow.companies.get_by_id.return_value = None

    result = await ActivateCompanyUseCase(mock_uow).execute(99)

    assert result.error.code == "COMPANY_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_only_writes_supplied_fields(mock_uow):
    company = make_company(phone="+100", currency="USD")
    mock_uow.companies.get_by_id.return_value = company
    mock_uow.companies.update.side_effect = _same

    result = await UpdateCompanyUseCase(mock_uow).execute(
        1, UpdateCompanyCommand(currency="EUR", max_allowed_drivers=25)
    )

    assert result.value.currency == "EUR"
    assert result.value.max_allowed_drivers == 25
    assert result.value.phone == "+100"
    assert result.value.name == "Acme Logistics"


@pytest.mark.asyncio
async def test_delete_refused_while_drivers_exist(mock_uow):
    mock_uow.companies.get_by_id.return_value = make_company()
    mock_uow.drivers.count_by_company.return_value = 2

    result = await DeleteCompanyUseCase(mock_uow).execute(1)

    assert result.error.code == "COMPANY_HAS_DRIVERS"
    mock_uow.companies.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_company(mock_uow):
    company = make_company()
    mock_uow.companies.get_by_id.return_value = company
    mock_uow.drivers.count_by_company.return_value = 0

    result = await DeleteCompanyUseCase(mock_uow).execute(1)

    assert result.is_ok()
    mock_uow.companies.delete.assert_awaited_once_with(company)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_list_companies_pagination(mock_uow):
    mock_uow.companies.list.return_value = ([make_company(id=i) for i in (3, 2)], 21)

    result = await ListCompaniesUseCase(mock_uow).execute(ListCompaniesQuery(page=2, limit=10))

    assert result.value.total_count == 21
    assert result.value.total_pages == 3
    assert [c.id for c in result.value.companies] == [3, 2]
    mock_uow.companies.list.assert_awaited_once_with(page=2, limit=10, status=None, search=None)


def test_list_query_rejects_limit_over_100():
    with pytest.raises(ValueError):
        ListCompaniesQuery(limit=101)
