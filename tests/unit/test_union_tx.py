"""Tests for joining and leaving the union."""

import pytest

from payledger.sdk.dao import UpdateError
from payledger.sdk.domain import Unaffiliated, UnionAffiliation
from payledger.sdk.usecase import (
    AddHourlyEmployeeTx,
    AddSalaryEmployeeTx,
    AddUnionMemberFailed,
    ChangeUnaffiliatedTx,
    ChangeUnionMemberTx,
    DeleteEmployeeTx,
    InvalidTransaction,
    NotFound,
    RemoveUnionMemberFailed,
    UnexpectedAffiliation,
    UpdateEmployeeFailed,
)


@pytest.fixture
def two_employees(db):
    AddSalaryEmployeeTx(db, 1, "Bob", "Home", 1000.0).execute()
    AddHourlyEmployeeTx(db, 2, "Bill", "Home", 15.0).execute()
    return db


class TestChangeUnionMember:

    def test_sets_affiliation_and_index(self, two_employees):
        db = two_employees
        ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        assert db.fetch(1).affiliation == UnionAffiliation(member_id=7734, dues=9.75)
        assert db.find_union_member(7734) == 1

    def test_member_id_already_taken(self, two_employees):
        db = two_employees
        ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        with pytest.raises(AddUnionMemberFailed, match="member_id=7734 already exists"):
            ChangeUnionMemberTx(db, 2, 7734, 9.75).execute()
        assert db.fetch(2).affiliation == Unaffiliated()
        assert db.find_union_member(7734) == 1

    def test_existing_member_cannot_take_second_member_id(self, two_employees):
        db = two_employees
        ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        with pytest.raises(AddUnionMemberFailed, match="emp_id=1"):
            ChangeUnionMemberTx(db, 1, 8000, 12.0).execute()
        assert db.fetch(1).affiliation == UnionAffiliation(member_id=7734, dues=9.75)
        assert db.union_members() == {7734: 1}

    def test_negative_dues_touch_nothing(self, two_employees):
        db = two_employees
        with pytest.raises(InvalidTransaction, match="dues"):
            ChangeUnionMemberTx(db, 1, 7734, -9.75).execute()
        assert db.fetch(1).affiliation == Unaffiliated()
        assert db.union_members() == {}

    def test_unknown_employee_touches_nothing(self, db):
        with pytest.raises(NotFound):
            ChangeUnionMemberTx(db, 9, 7734, 9.75).execute()
        assert db.union_members() == {}

    def test_index_change_survives_failed_update(self, two_employees):
        """The index entry is written before the employee; it is not undone."""

        class RefusingDb(type(two_employees)):
            def update(self, employee):
                raise UpdateError("read only")

        db = RefusingDb()
        AddSalaryEmployeeTx(db, 1, "Bob", "Home", 1000.0).execute()
        with pytest.raises(UpdateEmployeeFailed):
            ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        assert db.union_members() == {7734: 1}
        assert db.fetch(1).affiliation == Unaffiliated()


class TestChangeUnaffiliated:

    def test_leaves_union(self, two_employees):
        db = two_employees
        ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        ChangeUnaffiliatedTx(db, 1).execute()
        assert db.fetch(1).affiliation == Unaffiliated()
        assert db.union_members() == {}

    def test_already_unaffiliated_fails(self, two_employees):
        db = two_employees
        with pytest.raises(UnexpectedAffiliation):
            ChangeUnaffiliatedTx(db, 1).execute()

    def test_missing_index_entry_fails_and_keeps_membership(self, two_employees):
        db = two_employees
        ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        db.remove_union_member(7734)
        with pytest.raises(RemoveUnionMemberFailed):
            ChangeUnaffiliatedTx(db, 1).execute()
        assert db.fetch(1).affiliation.member_id == 7734

    def test_rejoin_after_leaving(self, two_employees):
        db = two_employees
        ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        ChangeUnaffiliatedTx(db, 1).execute()
        ChangeUnionMemberTx(db, 1, 8000, 5.0).execute()
        assert db.union_members() == {8000: 1}


class TestDeleteLeavesIndex:

    def test_deleting_member_leaves_stale_index_entry(self, two_employees):
        db = two_employees
        ChangeUnionMemberTx(db, 1, 7734, 9.75).execute()
        DeleteEmployeeTx(db, 1).execute()
        assert db.union_members() == {7734: 1}
