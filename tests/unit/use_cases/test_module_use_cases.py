import pytest

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.use_cases.modules import (
    AssignModuleCommand,
    AssignModuleUseCase,
    ListCompanyModulesUseCase,
    RemoveModuleUseCase,
    SetModuleEnabledUseCase,
    UpdateModuleConfigCommand,
    UpdateModuleConfigUseCase,
)
from fleetadmin.domain.entities import CompanyStatus
from .factories import make_assignment, make_company, make_module


async def _same(entity):
    return entity


async def _created(assignment):
    assignment.id = 100
    return assignment


@pytest.fixture
def active_company(mock_uow):
    mock_uow.companies.get_by_id.return_value = make_company()
    mock_uow.modules.get_by_id.return_value = make_module()


@pytest.mark.asyncio
async def test_assign_module(mock_uow, active_company):
    mock_uow.company_modules.get.return_value = None
    mock_uow.company_modules.create.side_effect = _created

    result = await AssignModuleUseCase(mock_uow).execute(
        1, AssignModuleCommand(module_id=5, config={"refresh_seconds": 10})
    )

    assert result.value.company_id == 1
    assert result.value.module.module_key == "live_tracking"
    assert result.value.is_enabled is True
    assert result.value.config == {"refresh_seconds": 10}
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_assign_to_unknown_company(mock_uow):
    mock_uow.companies.get_by_id.return_value = None

    result = await AssignModuleUseCase(mock_uow).execute(9, AssignModuleCommand(module_id=5))

    assert result.error.code == "COMPANY_NOT_FOUND"


@pytest.mark.asyncio
async def test_assign_to_suspended_company(mock_uow):
    mock_uow.companies.get_by_id.return_value = make_company(status=CompanyStatus.suspended)

    result = await AssignModuleUseCase(mock_uow).execute(1, AssignModuleCommand(module_id=5))

    assert result.error.code == "COMPANY_SUSPENDED"
    mock_uow.company_modules.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_assign_unknown_module(mock_uow):
    mock_uow.companies.get_by_id.return_value = make_company()
    mock_uow.modules.get_by_id.return_value = None

    result = await AssignModuleUseCase(mock_uow).execute(1, AssignModuleCommand(module_id=77))

    assert result.error.code == "MODULE_NOT_FOUND"


@pytest.mark.asyncio
async def test_assign_existing_pair(mock_uow, active_company):
    mock_uow.company_modules.get.return_value = make_assignment()

    result = await AssignModuleUseCase(mock_uow).execute(1, AssignModuleCommand(module_id=5))

    assert result.error.code == "MODULE_ALREADY_ASSIGNED"
    mock_uow.company_modules.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_concurrent_assignment_loses_on_unique_index(mock_uow, active_company):
    """
    Given another request inserted the same pair after our existence check
    When our insert violates the unique index
    Then the result is MODULE_ALREADY_ASSIGNED and nothing is committed
    """
    mock_uow.company_modules.get.return_value = None
    mock_uow.company_modules.create.side_effect = DuplicateEntityError("pair exists")

    result = await AssignModuleUseCase(mock_uow).execute(1, AssignModuleCommand(module_id=5))

    assert result.error.code == "MODULE_ALREADY_ASSIGNED"
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_remove_unassigned_module(mock_uow):
    mock_uow.company_modules.get.return_value = None

    result = await RemoveModuleUseCase(mock_uow).execute(1, 99)

    assert result.error.code == "MODULE_NOT_ASSIGNED"
    mock_uow.company_modules.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_remove_module(mock_uow):
    assignment = make_assignment()
    mock_uow.company_modules.get.return_value = assignment

    result = await RemoveModuleUseCase(mock_uow).execute(1, 5)

    assert result.is_ok()
    mock_uow.company_modules.delete.assert_awaited_once_with(assignment)


@pytest.mark.asyncio
async def test_update_config_replaces_wholesale(mock_uow):
    mock_uow.company_modules.get.return_value = make_assignment(config={"a": 1, "b": 2})
    mock_uow.company_modules.update.side_effect = _same
    mock_uow.modules.get_by_id.return_value = make_module()

    result = await UpdateModuleConfigUseCase(mock_uow).execute(
        1, 5, UpdateModuleConfigCommand(config={"c": 3})
    )

    assert result.value.config == {"c": 3}


@pytest.mark.asyncio
async def test_disable_unassigned_module(mock_uow):
    mock_uow.company_modules.get.return_value = None

    result = await SetModuleEnabledUseCase(mock_uow).execute(1, 5, False)

    assert result.error.code == "MODULE_NOT_ASSIGNED"


@pytest.mark.asyncio
async def test_disable_module(mock_uow):
    mock_uow.company_modules.get.return_value = make_assignment(is_enabled=True)
    mock_uow.company_modules.update.side_effect = _same
    mock_uow.modules.get_by_id.return_value = make_module()

    result = await SetModuleEnabledUseCase(mock_uow).execute(1, 5, False)

    assert result.value.is_enabled is False


@pytest.mark.asyncio
async def test_list_company_modules_in_assignment_order(mock_uow):
    mock_uow.companies.get_by_id.return_value = make_company()
    mock_uow.company_modules.list_by_company.return_value = [
        (make_assignment(id=1, module_id=5), make_module(id=5)),
        (make_assignment(id=2, module_id=6), make_module(id=6, module_key="analytics")),
    ]

    result = await ListCompanyModulesUseCase(mock_uow).execute(1)

    assert [m.id for m in result.value] == [1, 2]
    assert result.value[1].module.module_key == "analytics"
