from unittest.mock import patch

import pytest

from fleetadmin.app.use_cases.admins import (
    AdminLoginCommand,
    CreateCompanyAdminCommand,
    CreateCompanyAdminUseCase,
    ListCompanyAdminsUseCase,
    LoginAdminUseCase,
    SetAdminActiveUseCase,
)
from fleetadmin.domain.entities import AdminRole
from .factories import expire_on_exit, make_admin, make_company

PASSWORD = "SecurePass123"

async def _same(entity):
    return entity

def _with_id(entity_id):
    async def create(entity):
        entity.id = entity_id
        return entity

    return create

@pytest.fixture
def owner(hasher):
    return make_admin(password_hash=hasher.hash_sync(PASSWORD))

@pytest.mark.asyncio
async def test_login_success_issues_admin_token(mock_uow, hasher, admin_tokens, owner):
    mock_uow.admins.get_by_email.return_value = owner

    result = await LoginAdminUseCase(mock_uow, hasher, admin_tokens).execute(
        AdminLoginCommand(email="owner@acme.com", password=PASSWORD)
    )

    assert result.is_ok()
    claims = admin_tokens.validate(result.value.token)
    assert claims.identity_id == owner.id
    assert claims.email == "owner@acme.com"
    assert claims.extra == {"role": "owner", "company_id": 1}
    assert result.value.admin.id == owner.id

@pytest.mark.asyncio
async def test_login_unknown_email_and_wrong_password_are_identical(
    mock_uow, hasher, admin_tokens, owner
):
    """
    Given one admin exists
    When logging in with an unknown email, then with a wrong password
    Then both attempts fail with the same error code and message
    """
    use_case = LoginAdminUseCase(mock_uow, hasher, admin_tokens)

    mock_uow.admins.get_by_email.return_value = None
    unknown = await use_case.execute(AdminLoginCommand(email="ghost@acme.com", password=PASSWORD))

    mock_uow.admins.get_by_email.return_value = owner
    wrong = await use_case.execute(AdminLoginCommand(email="owner@acme.com", password="nope-nope"))

    assert unknown.error == wrong.error
    assert unknown.error.code == "INVALID_CREDENTIALS"

@pytest.mark.asyncio
async def test_login_unknown_email_still_verifies_a_hash(mock_uow, hasher, admin_tokens):
    mock_uow.admins.get_by_email.return_value = None

    with patch.object(hasher, "verify", wraps=hasher.verify) as verify:
        await LoginAdminUseCase(mock_uow, hasher, admin_tokens).execute(
            AdminLoginCommand(email="ghost@acme.com", password=PASSWORD)
        )

    verify.assert_called_once_with(PASSWORD, hasher.dummy_hash)

@pytest.mark.asyncio
async def test_login_inactive_admin(mock_uow, hasher, admin_tokens, owner):
    owner.is_active = False
    mock_uow.admins.get_by_email.return_value = owner

    result = await LoginAdminUseCase(mock_uow, hasher, admin_tokens).execute(
        AdminLoginCommand(email="owner@acme.com", password=PASSWORD)
    )

    assert result.error.code == "ACCOUNT_INACTIVE"

@pytest.mark.asyncio
async def test_login_reads_admin_only_while_unit_of_work_is_open(
    mock_uow, hasher, admin_tokens, owner
):
    """
    Given the session expires loaded rows when the unit of work closes
    When an admin logs in with correct, wrong and inactive credentials
    Then every check runs before the unit of work closes
    """
    use_case = LoginAdminUseCase(mock_uow, hasher, admin_tokens)

    mock_uow.admins.get_by_email.return_value = expire_on_exit(mock_uow, owner)
    ok = await use_case.execute(AdminLoginCommand(email="owner@acme.com", password=PASSWORD))
    assert ok.is_ok()
    assert ok.value.admin.email == "owner@acme.com"

    mock_uow.admins.get_by_email.return_value = expire_on_exit(mock_uow, owner)
    wrong = await use_case.execute(AdminLoginCommand(email="owner@acme.com", password="nope-nope"))
    assert wrong.error.code == "INVALID_CREDENTIALS"

    owner.is_active = False
    mock_uow.admins.get_by_email.return_value = expire_on_exit(mock_uow, owner)
    inactive = await use_case.execute(AdminLoginCommand(email="owner@acme.com", password=PASSWORD))
    assert inactive.error.code == "ACCOUNT_INACTIVE"

@pytest.mark.asyncio
async def test_create_admin_is_always_manager(mock_uow, hasher):
    mock_uow.companies.get_by_id.return_value = make_company()
    mock_uow.admins.get_by_email.return_value = None
    mock_uow.admins.create.side_effect = _with_id(11)

    result = await CreateCompanyAdminUseCase(mock_uow, hasher).execute(
        1,
        CreateCompanyAdminCommand(full_name="Max Manager", email="max@acme.com", password=PASSWORD),
    )

    created = mock_uow.admins.create.call_args.args[0]
    assert created.role == AdminRole.manager
    assert created.company_id == 1
    mock_uow.commit.assert_awaited_once()
    assert result.value.role == AdminRole.manager

@pytest.mark.asyncio
async def test_create_admin_duplicate_email(mock_uow, hasher):
    mock_uow.companies.get_by_id.return_value = make_company()
    mock_uow.admins.get_by_email.return_value = make_admin()

    result = await CreateCompanyAdminUseCase(mock_uow, hasher).execute(
        1,
        CreateCompanyAdminCommand(full_name="Max Manager", email="owner@acme.com", password=PASSWORD),
    )

    assert result.error.code == "DUPLICATE_ADMIN_EMAIL"

@pytest.mark.asyncio
async def test_list_admins_unknown_company(mock_uow):
    mock_uow.companies.get_by_id.return_value = None

    result = await ListCompanyAdminsUseCase(mock_uow).execute(42)

    assert result.error.code == "COMPANY_NOT_FOUND"

@pytest.mark.asyncio
async def test_deactivate_admin_of_other_company_is_not_found(mock_uow):
    mock_uow.admins.get_by_id.return_value = make_admin(company_id=2)

    result = await SetAdminActiveUseCase(mock_uow).execute(1, 10, False)

    assert result.error.code == "ADMIN_NOT_FOUND"

@pytest.mark.asyncio
async def test_deactivate_admin(mock_uow):
    admin = make_admin()
    mock_uow.admins.get_by_id.return_value = admin
    mock_uow.admins.update.side_effect = _same

    result = await SetAdminActiveUseCase(mock_uow).execute(1, 10, False)

    assert result.value.is_active is False
    mock_uow.commit.assert_awaited_once()
