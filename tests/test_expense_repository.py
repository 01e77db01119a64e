"""Unit tests for ExpenseRepository."""
import pytest
from datetime import date, datetime

from database.repositories.expense import ExpenseRepository
from database.models import Expense


@pytest.mark.asyncio
async def test_save_assigns_id(db_session):
    """Test saving a new expense assigns an ID."""
    repo = ExpenseRepository(db_session)
    
    expense = await repo.save(Expense(
        title="Coffee",
        amount=3.5,
        category="food",
        date=date(2024, 1, 1),
        note="Morning",
    ))
    
    assert expense.id is not None
    assert expense.title == "Coffee"
    assert expense.amount == 3.5
    assert expense.date == date(2024, 1, 1)


@pytest.mark.asyncio
async def test_save_assigns_distinct_ids(db_session):
    """Test every insert gets its own ID."""
    repo = ExpenseRepository(db_session)
    
    first = await repo.save(Expense(title="Coffee"))
    second = await repo.save(Expense(title="Rent"))
    
    assert first.id != second.id


@pytest.mark.asyncio
async def test_save_existing_updates_row(db_session, sample_expense):
    """Test saving an entity with an ID updates that row."""
    repo = ExpenseRepository(db_session)
    
    sample_expense.title = "Updated"
    await repo.save(sample_expense)
    await db_session.commit()
    
    assert await repo.count() == 1
    retrieved = await repo.find_by_id(sample_expense.id)
    assert retrieved.title == "Updated"


@pytest.mark.asyncio
async def test_save_detached_with_id_updates_row(db_session, sample_expense):
    """Test a detached entity carrying an ID updates the stored row."""
    repo = ExpenseRepository(db_session)
    db_session.expunge(sample_expense)
    
    replacement = Expense(
        id=sample_expense.id,
        title="Replaced",
        created_at=sample_expense.created_at,
    )
    saved = await repo.save(replacement)
    
    assert saved.id == sample_expense.id
    assert saved.title == "Replaced"
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_find_by_id(db_session, sample_expense):
    """Test retrieving expense by ID."""
    repo = ExpenseRepository(db_session)
    
    retrieved = await repo.find_by_id(sample_expense.id)
    
    assert retrieved is not None
    assert retrieved.id == sample_expense.id
    assert retrieved.category == "food"


@pytest.mark.asyncio
async def test_find_by_id_missing(db_session):
    """Test missing ID returns None instead of raising."""
    repo = ExpenseRepository(db_session)
    
    assert await repo.find_by_id(999999) is None


@pytest.mark.asyncio
async def test_find_all(db_session):
    """Test retrieving all expenses."""
    repo = ExpenseRepository(db_session)
    
    await repo.save(Expense(title="Coffee"))
    await repo.save(Expense(title="Rent"))
    
    expenses = await repo.find_all()
    
    assert len(expenses) == 2
    assert {e.title for e in expenses} == {"Coffee", "Rent"}


@pytest.mark.asyncio
async def test_exists_by_id(db_session, sample_expense):
    """Test membership check."""
    repo = ExpenseRepository(db_session)
    
    assert await repo.exists_by_id(sample_expense.id) is True
    assert await repo.exists_by_id(sample_expense.id + 1) is False


@pytest.mark.asyncio
async def test_delete_by_id(db_session, sample_expense):
    """Test deleting an expense."""
    repo = ExpenseRepository(db_session)
    
    await repo.delete_by_id(sample_expense.id)
    await db_session.commit()
    
    assert await repo.exists_by_id(sample_expense.id) is False
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_delete_by_id_missing_is_noop(db_session, sample_expense):
    """Test deleting an unknown ID leaves the store alone."""
    repo = ExpenseRepository(db_session)
    
    await repo.delete_by_id(999999)
    
    assert await repo.count() == 1


def test_created_at_set_on_construction():
    """Test created_at is stamped when the object is built, before any flush."""
    before = datetime.now()
    expense = Expense(title="Coffee")
    after = datetime.now()
    
    assert expense.id is None
    assert before <= expense.created_at <= after
